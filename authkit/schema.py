"""Common response, pagination and ordering types."""

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

MAX_PAGE_SIZE = 100
DEFAULT_CURRENT = 1
DEFAULT_PAGE_SIZE = 10


class StatusText(str, enum.Enum):
    """Status words used in plain status responses."""

    OK = "OK"
    ERROR = "ERROR"
    FAIL = "FAIL"

    def __str__(self) -> str:
        return self.value


@dataclass
class NilResult:
    """An empty response body."""


@dataclass
class StatusResult:
    status: StatusText = StatusText.OK


@dataclass
class ErrorItem:
    code: int
    message: str


@dataclass
class ErrorResult:
    error: ErrorItem


@dataclass
class PaginationResult:
    total: int = 0
    current: int = 0
    page_size: int = 0


@dataclass
class ListResult:
    """A list of items with optional pagination details."""

    list: Any = None
    pagination: Optional[PaginationResult] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape of the result; ``pagination`` is left out when absent."""
        result: Dict[str, Any] = {"list": self.list}
        if self.pagination is not None:
            result["pagination"] = {
                "total": self.pagination.total,
                "current": self.pagination.current,
                "pageSize": self.pagination.page_size,
            }
        return result


@dataclass
class PaginationParam:
    """Paging request: page ``current`` of ``page_size`` items (at most 100)."""

    pagination: bool = False
    only_count: bool = False
    current: int = DEFAULT_CURRENT
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.current < 0:
            raise ValueError("current must not be negative")
        if self.page_size < 0:
            raise ValueError("page_size must not be negative")
        if self.page_size > MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be at most {MAX_PAGE_SIZE}")

    def effective_page_size(self) -> int:
        """The page size, with 0 meaning 100."""
        return self.page_size if self.page_size else MAX_PAGE_SIZE


class OrderDirection(enum.IntEnum):
    ASC = 1
    DESC = 2


@dataclass
class OrderField:
    key: str
    direction: OrderDirection = OrderDirection.ASC


@dataclass
class QueryOptions:
    order_fields: List[OrderField] = field(default_factory=list)


@dataclass
class IDResult:
    id: str


def new_order_field_with_keys(
    keys: List[str], directions: Optional[Mapping[int, OrderDirection]] = None
) -> List[OrderField]:
    """Order fields for ``keys``, ascending unless ``directions`` maps the key's index."""
    chosen = directions or {}
    return [
        new_order_field(key, chosen.get(index, OrderDirection.ASC))
        for index, key in enumerate(keys)
    ]


def new_order_fields(*args: OrderField) -> List[OrderField]:
    return list(args)


def new_order_field(key: str, direction: OrderDirection = OrderDirection.ASC) -> OrderField:
    return OrderField(key=key, direction=OrderDirection(direction))


def new_id_result(id: str) -> IDResult:
    return IDResult(id=id)