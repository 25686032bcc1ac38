"""Accounts, account systems and account-to-role grants."""

import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .schema import OrderField, PaginationParam, PaginationResult
from .serialization import json_marshal_to_string

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
class Account:
    account_key: str = ""
    username: str = ""
    password: str = ""
    account_type: str = ""
    mobile_phone: str = ""
    email: str = ""
    create_time: Optional[datetime.datetime] = None
    update_time: Optional[datetime.datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accountKey": self.account_key,
            "username": self.username,
            "password": self.password,
            "accountType": self.account_type,
            "mobilePhone": self.mobile_phone,
            "email": self.email,
            "createTime": _format_time(self.create_time),
            "updateTime": _format_time(self.update_time),
        }

    def to_json(self) -> str:
        return json_marshal_to_string(self.to_dict())

    def clean_secure(self) -> "Account":
        """Blank the password and return the same account."""
        self.password = ""
        return self

    def __str__(self) -> str:
        return self.to_json()


@dataclass
class AccountCreateParam:
    account_type: str
    username: str
    password: str


@dataclass
class AccountQueryParam(PaginationParam):
    account_type: str = ""
    account_key: str = ""
    username: str = ""
    password: str = ""
    app_key: str = ""
    role_ids: List[str] = field(default_factory=list)


@dataclass
class AccountQueryOptions:
    order_fields: List[OrderField] = field(default_factory=list)


class Accounts(List[Account]):
    """A list of accounts."""


@dataclass
class AccountQueryResult:
    data: Accounts = field(default_factory=Accounts)
    page_result: Optional[PaginationResult] = None


@dataclass
class AccountSystem:
    id: str = ""
    account_type: str = ""


@dataclass
class AccountSystemQueryParam(PaginationParam):
    account_type: str = ""


class AccountSystems(List[AccountSystem]):
    """A list of account systems."""


@dataclass
class AccountSystemQueryResult:
    data: AccountSystems = field(default_factory=AccountSystems)
    page_result: Optional[PaginationResult] = None


@dataclass
class AccountRole:
    id: int = 0
    account_key: str = ""
    role_id: int = 0


@dataclass
class AccountRoleQueryParam(PaginationParam):
    account_key: str = ""
    account_keys: List[str] = field(default_factory=list)


@dataclass
class AccountRoleQueryOptions:
    order_fields: List[OrderField] = field(default_factory=list)


class AccountRoles(List[AccountRole]):
    """A list of account-to-role grants."""

    def to_account_key_map(self) -> Dict[str, "AccountRoles"]:
        """Grants grouped by account key, in their original order."""
        grouped: Dict[str, AccountRoles] = {}
        for item in self:
            grouped.setdefault(item.account_key, AccountRoles()).append(item)
        return grouped


@dataclass
class AccountRoleQueryResult:
    data: AccountRoles = field(default_factory=AccountRoles)
    page_result: Optional[PaginationResult] = None