"""Starlette route handlers for header diagnostics."""

from __future__ import annotations

import logging

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from mcp_header_validator.auth.middleware import extract_headers
from mcp_header_validator.auth.resolver import validate_auth_headers
from mcp_header_validator.constants import KNOWN_HEADERS
from mcp_header_validator.proxy import is_mcp_server_request, is_proxy_request, validate_proxy_headers

logger = logging.getLogger(__name__)


def build_diagnostics_routes() -> list[Route]:
    """Build Starlette routes for header diagnostics.

    Returns:
        List of Starlette Route objects to be mounted under the diagnostics prefix.
    """

    async def validate(request: Request) -> JSONResponse:
        headers = extract_headers(request.scope)
        outcome = validate_auth_headers(headers)
        proxy = validate_proxy_headers(headers)
        logger.debug("Diagnostics requested for %d header(s)", len(headers))
        return JSONResponse(
            {
                "recognized_headers": sorted(name for name in headers if name in KNOWN_HEADERS),
                "auth": outcome.to_dict(),
                "proxy": proxy.to_dict(),
                "is_proxy_request": is_proxy_request(headers),
                "is_mcp_server_request": is_mcp_server_request(headers),
            }
        )

    return [Route("/validate", validate, methods=["GET"])]
