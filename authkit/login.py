"""Login and authentication request and response bodies."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

DEFAULT_RESOURCE_TYPE = "api"


def _required_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        if value is None:
            raise ValueError(f"{key} is required")
        raise ValueError(f"{key} must be a string")
    if not value:
        raise ValueError(f"{key} is required")
    return value


def _optional_str(data: Mapping[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    if value is None or value == "":
        return default
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


@dataclass
class LoginParam:
    username: str
    password: str
    app_key: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoginParam":
        """Read a login body; every field is required and must be non-empty."""
        return cls(
            username=_required_str(data, "username"),
            password=_required_str(data, "password"),
            app_key=_required_str(data, "appKey"),
        )


@dataclass
class LoginTokenInfo:
    token: str
    expires_at: int

    def to_dict(self) -> Dict[str, Any]:
        return {"token": self.token, "expiresAt": self.expires_at}


@dataclass
class AuthenticateParam:
    feature: str
    resource_type: str = DEFAULT_RESOURCE_TYPE
    method: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AuthenticateParam":
        """Read an authentication request; ``feature`` is required."""
        return cls(
            feature=_required_str(data, "feature"),
            resource_type=_optional_str(data, "resourceType", DEFAULT_RESOURCE_TYPE),
            method=_optional_str(data, "method", ""),
        )


@dataclass
class AuthenticateInfo:
    """Result of an authentication check: grant is 1 when allowed, 0 when not."""

    grant: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"grant": self.grant}