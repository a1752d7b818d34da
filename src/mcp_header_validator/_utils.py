"""Internal utility functions for mcp-header-validator."""

from __future__ import annotations

import ipaddress
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import urlsplit

from mcp_header_validator._types import HeaderMap

_FORBIDDEN_HOST_CHARS = frozenset("\x00#%/:<>?@[\\]^|")


def ensure_header_map(headers: Any) -> HeaderMap:
    """Return ``headers`` as a mapping, treating ``None`` as empty.

    Raises:
        TypeError: If ``headers`` is neither ``None`` nor a mapping.
    """
    if headers is None:
        return {}
    if not isinstance(headers, Mapping):
        raise TypeError(f"headers must be a mapping of name to value(s), got {type(headers).__name__}")
    return headers


def _raw_value(headers: HeaderMap, name: str) -> Any:
    """Look up a raw header value: lower-cased name, given name, then any casing."""
    lowered = name.lower()
    if lowered in headers:
        return headers[lowered]
    if name in headers:
        return headers[name]
    for key, value in headers.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    return None


def _first(value: Any) -> str | None:
    """Collapse a repeated header to its first entry.

    Raises:
        TypeError: If the value, or its first entry, is not a string.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)) or not isinstance(value, Iterable):
        raise TypeError(f"header value must be a string or a list of strings, got {type(value).__name__}")
    for item in value:
        if item is None:
            return None
        if not isinstance(item, str):
            raise TypeError(f"header value entries must be strings, got {type(item).__name__}")
        return item
    return None


def has_header(headers: HeaderMap, name: str) -> bool:
    """Check whether a header was sent, before trimming.

    A whitespace-only value counts as present; an empty string or an empty
    list of values does not.
    """
    value = _first(_raw_value(headers, name))
    return bool(value)


def get_header_value(headers: HeaderMap, name: str, *, empty_as_none: bool = True) -> str | None:
    """Return a header's value, trimmed.

    Args:
        headers: Header map (single values or lists of values).
        name: Header name, matched case-insensitively.
        empty_as_none: Report a value that trims to empty as ``None``
            instead of ``""``.

    Returns:
        The trimmed first value, or ``None`` if the header is absent.
    """
    value = _first(_raw_value(headers, name))
    if value is None:
        return None
    value = value.strip()
    if not value and empty_as_none:
        return None
    return value


def _is_valid_host(hostname: str) -> bool:
    if ":" in hostname:
        try:
            ipaddress.IPv6Address(hostname)
        except ValueError:
            return False
        return True
    return not any(char in _FORBIDDEN_HOST_CHARS or char.isspace() for char in hostname)


def is_valid_url(url: str) -> bool:
    """Check that ``url`` is an absolute http(s) URL with a well-formed host and port."""
    try:
        parsed = urlsplit(url)
        hostname = parsed.hostname
        # Raises on a non-numeric or out-of-range port.
        parsed.port
    except ValueError:
        return False
    if parsed.scheme not in ("http", "https") or not hostname:
        return False
    return _is_valid_host(hostname)
