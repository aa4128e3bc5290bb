"""
Route middleware

Handlers have the shape `async (request, context) -> Response`. Each
combinator takes such a handler and returns one of the same shape, so they
stack as plain decorators:

    @router.get("")
    @with_middleware
    @with_session
    @with_query_validation(OccupantQuery)
    async def list_occupants(request, context): ...

The decorator closest to the handler runs first on the way in and last on
the way out. `with_middleware` must be outermost: it turns the chain into a
FastAPI endpoint and is the only layer that converts exceptions into
responses.
"""

import secrets
import string
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Type

from fastapi import Depends, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from config import ApplicationConfig
from building_portal.adapter.services.rate_limiter import SlidingWindowRateLimiter
from building_portal.api.error import format_issues, handle_error
from building_portal.app.services.unit_of_work import UnitOfWork
from building_portal.app.use_cases.sessions import SessionSnapshot, ValidateSessionUseCase
from building_portal.depends import get_unit_of_work
from building_portal.domain.errors import (
    AuthenticationError,
    MethodNotAllowedError,
    RateLimitError,
    ValidationError,
)
from building_portal.logger import LogContext, logger

_ID_ALPHABET = string.ascii_lowercase + string.digits

MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


@dataclass
class RequestContext:
    """Per-request state shared by every layer of one handler chain"""

    request_id: str
    start_time: float
    method: str
    path: str
    uow: Optional[UnitOfWork] = None
    user_id: Optional[int] = None
    username: Optional[str] = None
    session_id: Optional[str] = None
    session: Optional[SessionSnapshot] = None
    body: Optional[BaseModel] = None
    query: Optional[BaseModel] = None

    def log_context(self) -> LogContext:
        return LogContext(
            request_id=self.request_id,
            user_id=self.user_id,
            session_id=self.session_id,
            username=self.username,
            action=self.method,
            resource=self.path,
        )


Handler = Callable[[Request, RequestContext], Awaitable[Response]]


def generate_request_id() -> str:
    """req_<epoch ms>_<9 random chars>"""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"req_{int(time.time() * 1000)}_{suffix}"


def success(payload: Optional[dict] = None, status_code: int = 200) -> JSONResponse:
    """Success envelope: {"success": true, **payload}"""
    content = {"success": True}
    content.update(jsonable_encoder(payload or {}))
    return JSONResponse(status_code=status_code, content=content)


def session_credentials(request: Request):
    """Session id and token from headers, falling back to cookies"""
    session_id = request.headers.get(ApplicationConfig.SESSION_ID_HEADER) or request.cookies.get(
        ApplicationConfig.SESSION_ID_COOKIE
    )
    token = request.headers.get(ApplicationConfig.SESSION_TOKEN_HEADER) or request.cookies.get(
        ApplicationConfig.SESSION_TOKEN_COOKIE
    )
    return session_id, token


def with_middleware(handler: Handler):
    """Root wrapper: request id, timing, request/response logs, error envelope."""

    async def endpoint(request: Request, uow: UnitOfWork = Depends(get_unit_of_work)):
        context = RequestContext(
            request_id=generate_request_id(),
            start_time=time.perf_counter(),
            method=request.method,
            path=request.url.path,
            uow=uow,
        )
        logger.log_request(context.method, context.path, context.log_context())

        try:
            response = await handler(request, context)
            logger.log_response(
                context.method,
                context.path,
                response.status_code,
                (time.perf_counter() - context.start_time) * 1000,
                context.log_context(),
            )
        except Exception as exc:
            response = handle_error(exc)
            logger.log_api_error(
                context.method, context.path, response.status_code, exc, context.log_context()
            )

        response.headers["X-Request-ID"] = context.request_id
        return response

    # Not functools.wraps: FastAPI must see the endpoint's own signature
    endpoint.__name__ = handler.__name__
    endpoint.__doc__ = handler.__doc__
    return endpoint


def with_session(handler: Handler) -> Handler:
    """Require a live session; exposes the snapshot on the context."""

    async def wrapper(request: Request, context: RequestContext) -> Response:
        session_id, token = session_credentials(request)
        if not session_id or not token:
            raise AuthenticationError("No active session", code="NO_SESSION")

        snapshot = await ValidateSessionUseCase(context.uow).execute(session_id, token)
        context.session = snapshot
        context.session_id = snapshot.session_id
        context.user_id = snapshot.user_id
        context.username = snapshot.username
        return await handler(request, context)

    wrapper.__name__ = handler.__name__
    wrapper.__doc__ = handler.__doc__
    return wrapper


def _validate(schema: Type[BaseModel], data: Any) -> BaseModel:
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(format_issues(exc)) from exc


def with_validation(schema: Type[BaseModel]) -> Callable[[Handler], Handler]:
    """Parse the JSON body into `schema`; result lands on `context.body`."""

    def decorator(handler: Handler) -> Handler:
        async def wrapper(request: Request, context: RequestContext) -> Response:
            data = await request.json()
            context.body = _validate(schema, data)
            return await handler(request, context)

        wrapper.__name__ = handler.__name__
        wrapper.__doc__ = handler.__doc__
        return wrapper

    return decorator


def with_query_validation(schema: Type[BaseModel]) -> Callable[[Handler], Handler]:
    """Validate the query string into `schema`; result lands on `context.query`."""

    def decorator(handler: Handler) -> Handler:
        async def wrapper(request: Request, context: RequestContext) -> Response:
            context.query = _validate(schema, dict(request.query_params))
            return await handler(request, context)

        wrapper.__name__ = handler.__name__
        wrapper.__doc__ = handler.__doc__
        return wrapper

    return decorator


def with_methods(*methods: str) -> Callable[[Handler], Handler]:
    allowed = {method.upper() for method in methods}

    def decorator(handler: Handler) -> Handler:
        async def wrapper(request: Request, context: RequestContext) -> Response:
            if request.method not in allowed:
                raise MethodNotAllowedError(request.method)
            return await handler(request, context)

        wrapper.__name__ = handler.__name__
        wrapper.__doc__ = handler.__doc__
        return wrapper

    return decorator


def with_audit(resource: str) -> Callable[[Handler], Handler]:
    """Audit entry after a successful mutation"""

    def decorator(handler: Handler) -> Handler:
        async def wrapper(request: Request, context: RequestContext) -> Response:
            response = await handler(request, context)
            if request.method in MUTATING_METHODS and response.status_code < 400:
                logger.log_audit(request.method, resource, context.log_context())
            return response

        wrapper.__name__ = handler.__name__
        wrapper.__doc__ = handler.__doc__
        return wrapper

    return decorator


def with_rate_limit(
    max_requests: int = 100,
    window_seconds: float = 60,
    limiter: Optional[SlidingWindowRateLimiter] = None,
) -> Callable[[Handler], Handler]:
    """Per-client request budget; over budget is a 429."""
    limiter = limiter or SlidingWindowRateLimiter(max_requests, window_seconds)

    def decorator(handler: Handler) -> Handler:
        async def wrapper(request: Request, context: RequestContext) -> Response:
            client = request.client.host if request.client else "unknown"
            try:
                limiter.hit(client)
            except RateLimitError:
                logger.log_security(
                    "Rate limit exceeded", context.log_context(), {"client": client}
                )
                raise
            return await handler(request, context)

        wrapper.__name__ = handler.__name__
        wrapper.__doc__ = handler.__doc__
        return wrapper

    return decorator


def compose(*layers: Callable[[Handler], Handler]) -> Callable[[Handler], Handler]:
    """compose(a, b)(h) == a(b(h)); the first layer is outermost."""

    def decorator(handler: Handler) -> Handler:
        for layer in reversed(layers):
            handler = layer(handler)
        return handler

    return decorator
