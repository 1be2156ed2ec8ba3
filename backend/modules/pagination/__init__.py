"""
Pagination module.

Computes page metadata from a total count, a page size and a page number.
"""

from .models import Page, PageMeta
from .service import build_page_meta, offset_for, paginate

__all__ = [
    "Page",
    "PageMeta",
    "build_page_meta",
    "offset_for",
    "paginate",
]
