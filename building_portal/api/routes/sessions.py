from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from building_portal.adapter.services.rate_limiter import SlidingWindowRateLimiter
from building_portal.api.middleware import (
    RequestContext,
    session_credentials,
    success,
    with_middleware,
    with_rate_limit,
    with_session,
    with_validation,
)
from building_portal.app.use_cases.sessions import (
    AuthenticateCredentialsUseCase,
    CreateSessionUseCase,
    DeleteSessionUseCase,
)
from building_portal.domain.errors import AuthenticationError
from building_portal.logger import LogContext, logger

router = APIRouter(prefix="/sessions", tags=["Sessions"])

login_rate_limiter = SlidingWindowRateLimiter(
    max_requests=ApplicationConfig.LOGIN_RATE_LIMIT_MAX_REQUESTS,
    window_seconds=ApplicationConfig.LOGIN_RATE_LIMIT_WINDOW_SECONDS,
)


class SessionCreateRequest(BaseModel):
    """Login payload"""

    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=100)


@router.post("", status_code=status.HTTP_201_CREATED)
@with_middleware
@with_rate_limit(limiter=login_rate_limiter)
@with_validation(SessionCreateRequest)
async def create_session(request: Request, context: RequestContext):
    """
    Log In

    Verifies username/password and issues a 15 minute session. Every call
    creates a new session; existing ones stay valid.

    Raises:
        - 400 Bad Request: Missing or malformed fields
        - 401 Unauthorized: Unknown user, wrong password or unverified account
        - 429 Too Many Requests: Login budget for this client spent
    """
    body: SessionCreateRequest = context.body

    result = await AuthenticateCredentialsUseCase(context.uow).execute(
        body.username, body.password
    )
    if not result.success:
        logger.log_security(
            "Failed login attempt",
            LogContext(request_id=context.request_id, username=body.username),
            {"reason": result.reason},
        )
        raise AuthenticationError("Invalid credentials")

    created = await CreateSessionUseCase(context.uow).execute(result.user)

    context.user_id = created.user.user_id
    context.username = created.user.username
    context.session_id = created.session_id
    logger.log_audit("LOGIN", f"user/{created.user.user_id}", context.log_context())

    return success(
        {
            "sessionId": created.session_id,
            "token": created.token,
            "expires_at": created.expires_at,
            "user": created.user,
        },
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/current")
@with_middleware
@with_session
async def get_current_session(request: Request, context: RequestContext):
    """Current session snapshot, as captured at login time"""
    logger.debug("Session retrieved successfully", context.log_context())
    return success({"session": context.session})


@router.delete("/current")
@with_middleware
async def delete_current_session(request: Request, context: RequestContext):
    """
    Log Out

    Deletes the session only when both the id and the token match. Expired
    sessions can still be logged out.

    Raises:
        - 401 Unauthorized: Missing credentials or unknown id/token pair
    """
    session_id, token = session_credentials(request)
    if not session_id or not token:
        raise AuthenticationError("Missing session credentials", code="NO_SESSION")

    snapshot = await DeleteSessionUseCase(context.uow).execute(session_id, token)

    context.user_id = snapshot.user_id
    context.username = snapshot.username
    context.session_id = snapshot.session_id
    logger.log_audit("LOGOUT", f"user/{snapshot.user_id}", context.log_context())

    return success({"message": "Logged out successfully"})
