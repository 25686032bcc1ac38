"""Applications that accounts log in to."""

import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .schema import OrderField, PaginationParam, PaginationResult

_ZERO_TIME = "0001-01-01T00:00:00Z"


def _format_time(moment: Optional[datetime.datetime]) -> str:
    """RFC 3339 text with trailing fraction zeros dropped; naive times count as UTC."""
    if moment is None:
        return _ZERO_TIME
    base = moment.strftime("%Y-%m-%dT%H:%M:%S")
    fraction = f"{moment.microsecond:06d}".rstrip("0")
    if fraction:
        base = f"{base}.{fraction}"
    offset = moment.utcoffset()
    if not offset:
        return base + "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{base}{sign}{hours:02d}:{mins:02d}"


@dataclass
class App:
    id: int = 0
    app_key: str = ""
    name: str = ""
    account_type: str = ""
    create_time: Optional[datetime.datetime] = None
    update_time: Optional[datetime.datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape of the application."""
        return {
            "id": self.id,
            "appKey": self.app_key,
            "name": self.name,
            "accountType": self.account_type,
            "createTime": _format_time(self.create_time),
            "updateTime": _format_time(self.update_time),
        }


@dataclass
class AppQueryParam(PaginationParam):
    app_key: str = ""
    account_type: str = ""


@dataclass
class AppQueryOptions:
    order_fields: List[OrderField] = field(default_factory=list)


@dataclass
class AppQueryResult:
    data: List[App] = field(default_factory=list)
    page_result: Optional[PaginationResult] = None