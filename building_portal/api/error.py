"""
Error translation

`handle_error` turns any exception into the JSON envelope
`{"success": false, "error": {"code", "message", "details"?, "errorId"?}}`.
"""

import json
import uuid
from typing import Any, Dict, Optional

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from config import ApplicationConfig
from building_portal.domain.errors import AppError
from building_portal.logger import logger


def format_issues(exc):
    """One {path, message} entry per violated constraint"""
    return [
        {"path": ".".join(str(part) for part in issue["loc"]), "message": issue["msg"]}
        for issue in exc.errors()
    ]


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[Any] = None,
    error_id: Optional[str] = None,
) -> JSONResponse:
    error: Dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    if error_id is not None:
        error["errorId"] = error_id
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


def handle_error(exc: BaseException, is_development: Optional[bool] = None) -> JSONResponse:
    if is_development is None:
        is_development = ApplicationConfig.IS_DEVELOPMENT

    if isinstance(exc, AppError):
        return error_response(
            exc.status_code,
            exc.code,
            exc.message,
            exc.details if is_development else None,
        )

    if isinstance(exc, PydanticValidationError):
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "VALIDATION_ERROR",
            "Validation failed",
            format_issues(exc) if is_development else None,
        )

    if isinstance(exc, (json.JSONDecodeError, UnicodeDecodeError)):
        return error_response(
            status.HTTP_400_BAD_REQUEST, "INVALID_JSON", "Invalid JSON in request body"
        )

    error_id = str(uuid.uuid4())
    logger.error(f"[{error_id}] Unexpected error", error=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        str(exc) if is_development else "An unexpected error occurred",
        error_id=error_id,
    )
