"""Error hierarchy for code that produces results.

Services raise these when an outcome cannot be represented as a returned
result, for example an argument error at a boundary. The FastAPI handlers in
:mod:`response_wrapper.middleware.error_handler` turn them back into failed
results.

Only :meth:`PaginatedResult.success` and :func:`paginate` raise from inside
this package. Building a model directly with out-of-range values raises
``pydantic.ValidationError`` instead.
"""

from __future__ import annotations


class ResultError(Exception):
    """Base error for all response-wrapper errors.

    Keyword arguments are kept in ``details`` and can be appended to the
    failed result's messages by the error handlers.
    """

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, **details: object) -> None:
        if message:
            self.message = message
        self.details: dict[str, object] = details
        super().__init__(self.message)


class InvalidInputError(ResultError):
    """Invalid input supplied by the caller."""

    status_code = 422
    message = "Validation error"


class InvalidPaginationError(InvalidInputError, ValueError):
    """Page number, page size or total count outside their allowed range."""

    message = "Invalid pagination parameters"


class NotFoundError(ResultError):
    """Requested resource does not exist."""

    status_code = 404
    message = "Resource not found"
