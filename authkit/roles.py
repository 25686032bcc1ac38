"""Roles and their granted resources."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .schema import OrderField, PaginationParam, PaginationResult


@dataclass
class Role:
    id: int = 0
    name: str = ""


@dataclass
class RoleQueryParam(PaginationParam):
    ids: List[int] = field(default_factory=list)
    app_key: str = ""
    name: str = ""
    account_key: str = ""


@dataclass
class RoleQueryOptions:
    order_fields: List[OrderField] = field(default_factory=list)


class Roles(List[Role]):
    """A list of roles."""

    def to_names(self) -> List[str]:
        return [role.name for role in self]

    def to_map(self) -> Dict[int, Role]:
        """Roles by id; a later role wins over an earlier one with the same id."""
        return {role.id: role for role in self}


@dataclass
class RoleQueryResult:
    data: Roles = field(default_factory=Roles)
    page_result: Optional[PaginationResult] = None


@dataclass
class RoleResource:
    id: int = 0
    role_id: int = 0
    resource_id: int = 0


@dataclass
class RoleResourceQueryParam(PaginationParam):
    role_id: str = ""
    role_ids: List[str] = field(default_factory=list)


@dataclass
class RoleResourceQueryOptions:
    order_fields: List[OrderField] = field(default_factory=list)


class RoleResources(List[RoleResource]):
    """A list of role-to-resource grants."""

    def to_role_id_map(self) -> Dict[int, "RoleResources"]:
        """Grants grouped by role id, in their original order."""
        grouped: Dict[int, RoleResources] = {}
        for item in self:
            grouped.setdefault(item.role_id, RoleResources()).append(item)
        return grouped

    def to_resource_ids(self) -> List[int]:
        """Distinct resource ids in order of first appearance."""
        return list(dict.fromkeys(item.resource_id for item in self))


@dataclass
class RoleResourceQueryResult:
    data: RoleResources = field(default_factory=RoleResources)
    page_result: Optional[PaginationResult] = None