"""FastAPI exception handlers that answer with failed results.

The handlers catch ResultError subclasses, FastAPI's RequestValidationError
and unhandled exceptions, and return the same body every result has:
{ succeeded, failed, messages }.
"""

from __future__ import annotations

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from response_wrapper.config.settings import ResponseWrapperSettings
from response_wrapper.exceptions import ResultError
from response_wrapper.models.result import Result
from response_wrapper.responses import to_json_response

logger = logging.getLogger(__name__)


def error_messages(exc: ResultError, include_details: bool = False) -> list[str]:
    """Message list for ``exc``, optionally followed by ``key: value`` details."""
    messages = [exc.message]
    if include_details:
        messages.extend(f"{key}: {value}" for key, value in exc.details.items())
    return messages


def register_error_handlers(
    app: FastAPI,
    settings: ResponseWrapperSettings | None = None,
) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    if settings is None:
        settings = ResponseWrapperSettings()
    include_details = settings.expose_error_details

    async def _result_error_handler(_request: Request, exc: ResultError) -> JSONResponse:
        """Handle ResultError subclasses."""
        logger.warning(
            "%s: %s",
            type(exc).__name__,
            exc.message,
            extra={"status_code": exc.status_code, "error_type": type(exc).__name__},
        )
        result = Result.fail(error_messages(exc, include_details))
        return to_json_response(result, exc.status_code)

    async def _validation_error_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle FastAPI / Pydantic RequestValidationError (422)."""
        messages = [
            f"{' -> '.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]
        return to_json_response(Result.fail(messages), 422)

    async def _unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unhandled exceptions: log traceback, return generic 500."""
        logger.error(
            "Unhandled exception: %s\n%s",
            exc,
            traceback.format_exc(),
            extra={"status_code": 500, "error_type": type(exc).__name__},
        )
        return to_json_response(Result.fail("Internal server error"), 500)

    app.add_exception_handler(ResultError, _result_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)  # type: ignore[arg-type]
