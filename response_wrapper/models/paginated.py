"""Paginated result envelope.

Extends :class:`Result` with page metadata. ``total_pages`` and the
previous/next flags are computed from the stored fields on every access.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import Field, computed_field

from response_wrapper.exceptions import InvalidPaginationError
from response_wrapper.models.result import Messages, Result, as_messages

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


def ceil_div(numerator: int, denominator: int) -> int:
    """Exact integer ceiling of ``numerator / denominator``."""
    return -(-numerator // denominator)


def validate_page_args(count: int, page: int, page_size: int) -> None:
    """Raise :class:`InvalidPaginationError` naming every bad argument."""
    problems: dict[str, int] = {}
    if count < 0:
        problems["count"] = count
    if page < 1:
        problems["page"] = page
    if page_size < 1:
        problems["page_size"] = page_size
    if problems:
        raise InvalidPaginationError(**problems)


class PaginatedResult(Result, Generic[T]):
    """One page of ``T`` items plus the metadata needed to page through them."""

    data: list[T] = Field(default_factory=list, strict=True)
    current_page: int = Field(default=DEFAULT_PAGE, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    total_count: int = Field(default=0, ge=0)

    @computed_field(alias="totalPages")  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        return ceil_div(self.total_count, self.page_size)

    @computed_field(alias="hasPreviousPage")  # type: ignore[prop-decorator]
    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    @computed_field(alias="hasNextPage")  # type: ignore[prop-decorator]
    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def failure(cls, messages: Messages = None):
        """Build a failed page: no items, metadata left at its defaults."""
        return cls(succeeded=False, messages=as_messages(messages))

    @classmethod
    def success(cls, data: list[T], count: int, page: int, page_size: int):
        """Build a successful page.

        Parameters
        ----------
        data:
            Items on this page.
        count:
            Total number of items across all pages.
        page:
            1-based number of this page.
        page_size:
            Maximum number of items per page.

        Raises
        ------
        InvalidPaginationError
            If ``count`` is negative or ``page``/``page_size`` is below 1.
        """
        validate_page_args(count, page, page_size)
        return cls(
            succeeded=True,
            data=data,
            current_page=page,
            page_size=page_size,
            total_count=count,
        )

    @classmethod
    async def failure_async(cls, messages: Messages = None):
        return cls.failure(messages)

    @classmethod
    async def success_async(cls, data: list[T], count: int, page: int, page_size: int):
        return cls.success(data, count, page, page_size)
