"""Offset pagination shared by the list operations."""

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from slotbook.config import get_settings
from slotbook.core.errors import InvalidInputError

T = TypeVar("T")


@dataclass
class PageRequest:
    """Zero-based page number and page size."""

    page: int = 0
    size: int = field(default_factory=lambda: get_settings().default_page_size)

    def __post_init__(self) -> None:
        max_size = get_settings().max_page_size
        if self.page < 0:
            raise InvalidInputError("page must be >= 0")
        if self.size < 1 or self.size > max_size:
            raise InvalidInputError(f"size must be between 1 and {max_size}")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    items: list[T]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0
