"""Hex digests of bytes and strings."""

import hashlib


def md5_hash(data: bytes) -> str:
    """Return the lower-case hex MD5 digest of ``data``."""
    return hashlib.md5(data).hexdigest()


def md5_hash_string(text: str) -> str:
    """Return the lower-case hex MD5 digest of the UTF-8 encoding of ``text``."""
    return md5_hash(text.encode("utf-8"))


def sha1_hash(data: bytes) -> str:
    """Return the lower-case hex SHA1 digest of ``data``."""
    return hashlib.sha1(data).hexdigest()


def sha1_hash_string(text: str) -> str:
    """Return the lower-case hex SHA1 digest of the UTF-8 encoding of ``text``."""
    return sha1_hash(text.encode("utf-8"))