"""Resources that roles can be granted."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .schema import OrderField, PaginationParam, PaginationResult
from .serialization import json_marshal_to_string


@dataclass
class Resource:
    id: int = 0
    app_key: str = ""
    name: str = ""
    type: str = ""
    feature: str = ""
    method: str = ""
    pid: int = 0
    sequence: int = 0

    def to_json(self) -> str:
        return json_marshal_to_string(
            {
                "id": self.id,
                "appKey": self.app_key,
                "name": self.name,
                "type": self.type,
                "feature": self.feature,
                "method": self.method,
                "pid": self.pid,
                "sequence": self.sequence,
            }
        )

    def __str__(self) -> str:
        return self.to_json()


@dataclass
class ResourceQueryParam(PaginationParam):
    ids: List[int] = field(default_factory=list)
    app_key: str = ""
    name: str = ""
    feature: str = ""
    type: str = ""


@dataclass
class ResourceQueryOptions:
    order_fields: List[OrderField] = field(default_factory=list)


class Resources(List[Resource]):
    """A list of resources."""

    def to_map(self) -> Dict[int, Resource]:
        """Resources by id; a later resource wins over an earlier one with the same id."""
        return {item.id: item for item in self}

    def sort_by_sequence(self) -> "Resources":
        """Sort in place, highest sequence first, and return the list."""
        self.sort(key=lambda item: item.sequence, reverse=True)
        return self


@dataclass
class ResourceQueryResult:
    data: Resources = field(default_factory=Resources)
    page_result: Optional[PaginationResult] = None