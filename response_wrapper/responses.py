"""Render results as FastAPI JSON responses using the camelCase wire names."""

from __future__ import annotations

import logging

from fastapi.responses import JSONResponse

from response_wrapper.models.result import Result

logger = logging.getLogger(__name__)


def result_body(result: Result) -> dict:
    """Serialize ``result`` with its wire field names."""
    return result.model_dump(mode="json", by_alias=True)


def to_json_response(result: Result, status_code: int | None = None) -> JSONResponse:
    """Wrap ``result`` in a :class:`JSONResponse`.

    The status defaults to 200 for succeeded results and 400 for failed ones.
    """
    if status_code is None:
        status_code = 200 if result.succeeded else 400

    logger.debug(
        "Rendering %s with status %d",
        type(result).__name__,
        status_code,
        extra={
            "succeeded": result.succeeded,
            "message_count": len(result.messages),
            "status_code": status_code,
        },
    )
    return JSONResponse(status_code=status_code, content=result_body(result))
