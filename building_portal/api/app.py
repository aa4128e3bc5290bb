from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from building_portal.adapter.services.database import initialize_database
from building_portal.depends import engine
from building_portal.domain.errors import AppError, ValidationError
from building_portal.logger import configure_logging, logger
from .error import error_response, format_issues, handle_error

HTTP_ERROR_CODES = {
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


async def handle_app_error(request: Request, exc: AppError):
    logger.warn(f"Client error: {exc.code}", metadata={"path": request.url.path})
    return handle_error(exc)


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    return error_response(
        exc.status_code, HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"), str(exc.detail)
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    return handle_error(ValidationError(format_issues(exc)))


@asynccontextmanager
async def lifespan(app: FastAPI):
    await initialize_database(engine)
    yield
    await engine.dispose()


def create_app(ApplicationConfig) -> FastAPI:
    configure_logging(ApplicationConfig.LOG_LEVEL)

    app = FastAPI(title="Building Portal API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from building_portal.api.routes import health_check, leases, maintenance, occupants, sessions

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(sessions.router, prefix=ApplicationConfig.API_PREFIX)
    app.include_router(occupants.router, prefix=ApplicationConfig.API_PREFIX)
    app.include_router(maintenance.router, prefix=ApplicationConfig.API_PREFIX)
    app.include_router(leases.router, prefix=ApplicationConfig.API_PREFIX)

    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    return app
