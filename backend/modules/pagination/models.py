"""
Pagination data models.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageMeta(BaseModel):
    """Metadata describing one page of a listing."""

    current_page: int = Field(..., ge=1, description="Current page number")
    items_per_page: int = Field(..., ge=1, description="Number of items per page")
    total_items: int = Field(..., ge=0, description="Total number of items")
    total_pages: int = Field(..., ge=0, description="Total number of pages")
    has_next_page: bool = Field(..., description="Whether there is a next page")
    has_previous_page: bool = Field(..., description="Whether there is a previous page")


class Page(BaseModel, Generic[T]):
    """A slice of items together with its pagination metadata."""

    data: list[T] = Field(default_factory=list, description="Items for the current page")
    meta: PageMeta
