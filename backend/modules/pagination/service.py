"""
Page metadata computation.

limit and page are validated upstream (1 <= limit <= 100, page >= 1).
An out-of-range page is not clamped: its metadata reports the requested
page, and its slice is whatever the directory returned (normally empty).
"""

import math
from typing import Sequence, TypeVar

from .models import Page, PageMeta

T = TypeVar("T")

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def _check_bounds(limit: int, page: int) -> None:
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")


def offset_for(limit: int, page: int) -> int:
    """Number of items to skip to reach the given 1-based page."""
    _check_bounds(limit, page)
    return (page - 1) * limit


def build_page_meta(total_items: int, limit: int, page: int) -> PageMeta:
    """Compute metadata for the requested page."""
    _check_bounds(limit, page)
    total_pages = math.ceil(total_items / limit) if total_items > 0 else 0
    return PageMeta(
        current_page=page,
        items_per_page=limit,
        total_items=total_items,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )


def paginate(items: Sequence[T], total_items: int, limit: int, page: int) -> Page[T]:
    """Wrap a directory slice in a Page with its metadata."""
    return Page(data=list(items), meta=build_page_meta(total_items, limit, page))
