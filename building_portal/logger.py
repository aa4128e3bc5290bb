"""
Structured Logger

One JSON object per call on stdout: level, message, ISO-8601 timestamp and the
optional context / metadata / error keys. Stdlib logging is the sink,
structlog does the rendering.
"""

from __future__ import annotations

import logging
import sys
import traceback
from typing import Any, Dict, Optional

import structlog
from pydantic import BaseModel

from config import ApplicationConfig

LOGGER_NAME = "building_portal"


class LogContext(BaseModel):
    """Fixed per-request record threaded through logs"""

    request_id: Optional[str] = None
    user_id: Optional[int] = None
    session_id: Optional[str] = None
    username: Optional[str] = None
    action: Optional[str] = None
    resource: Optional[str] = None


def configure_logging(level: str = "INFO") -> None:
    """Route structlog through stdlib logging as JSON lines on stdout."""
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger(LOGGER_NAME).setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


class StructuredLogger:
    """Leveled logger with request, audit and security helpers."""

    def __init__(self, development: bool = False, name: str = LOGGER_NAME):
        self.development = development
        self._logger = structlog.stdlib.get_logger(name)

    def _fields(
        self,
        context: Optional[LogContext],
        metadata: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        fields: Dict[str, Any] = {}
        if context is not None:
            dumped = context.model_dump(exclude_none=True)
            if dumped:
                fields["context"] = dumped
        if metadata:
            fields["metadata"] = metadata
        return fields

    def debug(
        self,
        message: str,
        context: Optional[LogContext] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if self.development:
            self._logger.debug(message, **self._fields(context, metadata))

    def info(
        self,
        message: str,
        context: Optional[LogContext] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._logger.info(message, **self._fields(context, metadata))

    def warn(
        self,
        message: str,
        context: Optional[LogContext] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._logger.warning(message, **self._fields(context, metadata))

    def error(
        self,
        message: str,
        context: Optional[LogContext] = None,
        error: Optional[BaseException] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        fields = self._fields(context, metadata)
        if error is not None:
            details: Dict[str, Any] = {"message": str(error)}
            code = getattr(error, "code", None)
            if code is not None:
                details["code"] = code
            if self.development:
                details["stack"] = "".join(
                    traceback.format_exception(type(error), error, error.__traceback__)
                )
            fields["error"] = details
        self._logger.error(message, **fields)

    def log_request(self, method: str, path: str, context: Optional[LogContext] = None) -> None:
        self.info(f"{method} {path}", context)

    def log_response(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float,
        context: Optional[LogContext] = None,
    ) -> None:
        self.info(
            f"{method} {path} {status_code}",
            context,
            {"duration": f"{duration_ms:.0f}ms"},
        )

    def log_api_error(
        self,
        method: str,
        path: str,
        status_code: int,
        error: BaseException,
        context: Optional[LogContext] = None,
    ) -> None:
        self.error(f"{method} {path} {status_code}", context, error)

    def log_audit(self, action: str, resource: str, context: Optional[LogContext] = None) -> None:
        base = context.model_copy() if context is not None else LogContext()
        base.action = action
        base.resource = resource
        self.info(f"Audit: {action} on {resource}", base)

    def log_security(
        self,
        event: str,
        context: Optional[LogContext] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.warn(f"Security: {event}", context, metadata)


logger = StructuredLogger(development=ApplicationConfig.IS_DEVELOPMENT)
