"""Revoked-token stores, RBAC schemas, structured logging, identifiers and socket framing."""

__version__ = "0.1.0"

__all__ = ["__version__"]