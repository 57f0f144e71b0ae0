"""Paginated response envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class PageRead(BaseModel, Generic[T]):
    """One page of results plus totals."""

    model_config = ConfigDict(from_attributes=True)

    items: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int
