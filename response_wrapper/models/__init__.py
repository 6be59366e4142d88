"""Public result models."""

from response_wrapper.models.paginated import PaginatedResult
from response_wrapper.models.result import DataResult, Result

__all__ = [
    "DataResult",
    "PaginatedResult",
    "Result",
]
