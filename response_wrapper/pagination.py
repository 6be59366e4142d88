"""Slice in-memory sequences into paginated results."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from response_wrapper.config.settings import ResponseWrapperSettings
from response_wrapper.exceptions import InvalidPaginationError
from response_wrapper.models.paginated import PaginatedResult, validate_page_args

logger = logging.getLogger(__name__)

T = TypeVar("T")


def paginate(
    items: Sequence[T],
    page: int = 1,
    page_size: int | None = None,
    settings: ResponseWrapperSettings | None = None,
) -> PaginatedResult[T]:
    """Return page ``page`` of ``items`` as a successful :class:`PaginatedResult`.

    Parameters
    ----------
    items:
        The full, already-ordered collection.
    page:
        1-based page number. Pages past the end yield an empty ``data`` list.
    page_size:
        Items per page. Defaults to ``settings.default_page_size``.
    settings:
        Library settings; loaded from the environment when omitted.

    Raises
    ------
    InvalidPaginationError
        If ``page`` or ``page_size`` is below 1, or ``page_size`` exceeds
        ``settings.max_page_size``.
    """
    if settings is None:
        settings = ResponseWrapperSettings()
    if page_size is None:
        page_size = settings.default_page_size

    if page_size > settings.max_page_size:
        raise InvalidPaginationError(
            f"Page size {page_size} exceeds maximum of {settings.max_page_size}",
            page_size=page_size,
            max_page_size=settings.max_page_size,
        )

    total = len(items)
    validate_page_args(total, page, page_size)

    start = (page - 1) * page_size
    window = list(items[start:start + page_size])

    logger.debug(
        "Paginated %d of %d items (page %d, size %d)",
        len(window),
        total,
        page,
        page_size,
        extra={"total_count": total, "page": page, "page_size": page_size},
    )

    return PaginatedResult.success(window, total, page, page_size)
