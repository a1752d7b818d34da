"""Routing classification: proxy-forwarded request or direct MCP server request.

Independent of the priority resolver; the hosting layer uses it to choose a
code path, not a credential.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp_header_validator._utils import ensure_header_map, get_header_value, has_header, is_valid_url
from mcp_header_validator.constants import (
    AUTH_HEADERS,
    HEADER_BTP_DESTINATION,
    HEADER_MCP_DESTINATION,
    HEADER_MCP_URL,
    PROXY_HEADERS,
    PROXY_ONLY_HEADERS,
)
from mcp_header_validator.models import ProxyHeaderValidation

logger = logging.getLogger(__name__)


def validate_proxy_headers(headers: Any = None) -> ProxyHeaderValidation:
    """Validate the routing headers of a proxied request.

    Args:
        headers: Header name to value (or list of values).

    Returns:
        A ``ProxyHeaderValidation``. ``is_valid`` is False with no errors when
        no routing header was sent.
    """
    headers = ensure_header_map(headers)
    errors: list[str] = []
    warnings: list[str] = []
    values: dict[str, str | None] = {}

    for name in PROXY_HEADERS:
        if not has_header(headers, name):
            values[name] = None
            continue
        value = get_header_value(headers, name)
        if value is None:
            errors.append(f"{name} header is empty")
        values[name] = value

    mcp_url = values[HEADER_MCP_URL]
    if mcp_url is not None and not is_valid_url(mcp_url):
        errors.append(f"{HEADER_MCP_URL} is not a valid URL: {mcp_url}")

    if mcp_url is not None and values[HEADER_MCP_DESTINATION] is not None:
        warnings.append(f"{HEADER_MCP_URL} takes precedence over {HEADER_MCP_DESTINATION} for routing")

    present = any(has_header(headers, name) for name in PROXY_HEADERS)
    result = ProxyHeaderValidation(
        is_valid=present and not errors,
        btp_destination=values[HEADER_BTP_DESTINATION],
        mcp_destination=values[HEADER_MCP_DESTINATION],
        mcp_url=mcp_url,
        errors=tuple(errors),
        warnings=tuple(warnings),
    )
    logger.debug("Proxy headers: present=%s errors=%d", present, len(errors))
    return result


def is_proxy_request(headers: Any = None) -> bool:
    """True if any routing header (BTP destination, MCP destination, MCP URL) is present."""
    headers = ensure_header_map(headers)
    return any(has_header(headers, name) for name in PROXY_HEADERS)


def is_mcp_server_request(headers: Any = None) -> bool:
    """True for a request aimed directly at an MCP server.

    At least one authentication header must be present and none of the
    proxy-only headers.
    """
    headers = ensure_header_map(headers)
    if any(has_header(headers, name) for name in PROXY_ONLY_HEADERS):
        return False
    return any(has_header(headers, name) for name in AUTH_HEADERS)
