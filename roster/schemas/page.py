"""
Pagination request and result types.
Challenge: Offset windows with an exact pre-window total, validated before any query runs.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, computed_field

from roster.core.exceptions import InvalidInputError

T = TypeVar("T")


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Order:
    """Sort on one result property, e.g. Order("age", Direction.DESC)."""

    property: str
    direction: Direction = Direction.ASC

    @classmethod
    def parse(cls, text: str) -> "Order":
        """Parse "property" or "property,asc|desc" (query-string form)."""
        name, _, direction = text.partition(",")
        name = name.strip()
        if not name:
            raise InvalidInputError(f"empty sort property in {text!r}")
        direction = direction.strip().lower() or Direction.ASC.value
        try:
            return cls(name, Direction(direction))
        except ValueError:
            raise InvalidInputError(f"unknown sort direction {direction!r}") from None


def _as_orders(sort) -> tuple[Order, ...]:
    """Normalise sort entries; strings use the "property,direction" form."""
    if isinstance(sort, (str, Order)):
        sort = (sort,)
    try:
        entries = tuple(sort)
    except TypeError:
        raise InvalidInputError(f"sort must be a sequence of orders, got {sort!r}") from None
    orders = []
    for entry in entries:
        if isinstance(entry, Order):
            orders.append(entry)
        elif isinstance(entry, str):
            orders.append(Order.parse(entry))
        else:
            raise InvalidInputError(f"sort entry must be an Order or string, got {entry!r}")
    return tuple(orders)


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page number and page size. Offset = page * size."""

    page: int
    size: int
    sort: tuple[Order, ...] = field(default=())

    def __post_init__(self):
        if isinstance(self.page, bool) or not isinstance(self.page, int):
            raise InvalidInputError(f"page must be an integer, got {self.page!r}")
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise InvalidInputError(f"size must be an integer, got {self.size!r}")
        if self.page < 0:
            raise InvalidInputError(f"page must not be negative, got {self.page}")
        if self.size < 1:
            raise InvalidInputError(f"size must be at least 1, got {self.size}")
        object.__setattr__(self, "sort", _as_orders(self.sort))

    @classmethod
    def of(cls, page: int, size: int, *sort: Order | str) -> "PageRequest":
        return cls(page, size, sort)

    @property
    def offset(self) -> int:
        return self.page * self.size

    def next(self) -> "PageRequest":
        return PageRequest(self.page + 1, self.size, self.sort)

    def previous_or_first(self) -> "PageRequest":
        return PageRequest(self.page - 1, self.size, self.sort) if self.page > 0 else self.first()

    def first(self) -> "PageRequest":
        return PageRequest(0, self.size, self.sort)


class Page(BaseModel, Generic[T]):
    """One window of results plus the total count of matches before paging."""

    content: list[T]
    pageable: PageRequest
    total: int

    @computed_field
    @property
    def number(self) -> int:
        return self.pageable.page

    @computed_field
    @property
    def size(self) -> int:
        return self.pageable.size

    @computed_field
    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @computed_field
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.pageable.size)

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next
