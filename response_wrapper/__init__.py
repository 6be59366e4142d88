"""Uniform result envelopes for service-layer return values.

Applications that want the package's JSON log lines call
:func:`configure_logging` once at startup, for example from a FastAPI
lifespan handler alongside :func:`register_error_handlers`.
"""

from response_wrapper.config.settings import ResponseWrapperSettings
from response_wrapper.exceptions import (
    InvalidInputError,
    InvalidPaginationError,
    NotFoundError,
    ResultError,
)
from response_wrapper.logging_config import configure_logging
from response_wrapper.models.paginated import PaginatedResult
from response_wrapper.models.result import DataResult, Result
from response_wrapper.pagination import paginate

__all__ = [
    "DataResult",
    "InvalidInputError",
    "InvalidPaginationError",
    "NotFoundError",
    "PaginatedResult",
    "ResponseWrapperSettings",
    "Result",
    "ResultError",
    "configure_logging",
    "paginate",
]
