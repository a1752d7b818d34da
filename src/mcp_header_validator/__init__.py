"""mcp-header-validator: authentication header resolution for MCP ABAP ADT servers."""

from __future__ import annotations

import logging

from mcp_header_validator._utils import get_header_value, has_header, is_valid_url
from mcp_header_validator.auth import HeaderValidationMiddleware, auth_outcome_var, extract_headers
from mcp_header_validator.auth.resolver import validate_auth_headers
from mcp_header_validator.constants import (
    AUTH_TYPE_BASIC,
    AUTH_TYPE_JWT,
    AUTH_TYPE_XSUAA,
    HEADER_BTP_DESTINATION,
    HEADER_MCP_DESTINATION,
    HEADER_MCP_URL,
    HEADER_SAP_AUTH_TYPE,
    HEADER_SAP_CLIENT,
    HEADER_SAP_DESTINATION_SERVICE,
    HEADER_SAP_JWT_TOKEN,
    HEADER_SAP_LOGIN,
    HEADER_SAP_PASSWORD,
    HEADER_SAP_REFRESH_TOKEN,
    HEADER_SAP_UAA_CLIENT_ID,
    HEADER_SAP_UAA_CLIENT_SECRET,
    HEADER_SAP_UAA_URL,
    HEADER_SAP_URL,
)
from mcp_header_validator.models import (
    AuthMethod,
    AuthMethodPriority,
    AuthType,
    Basic,
    DirectJwt,
    McpDestination,
    ProxyHeaderValidation,
    SapDestination,
    UaaCredentials,
    ValidationOutcome,
)
from mcp_header_validator.proxy import is_mcp_server_request, is_proxy_request, validate_proxy_headers

__all__ = [
    # Public API
    "validate_auth_headers",
    "validate_proxy_headers",
    "is_proxy_request",
    "is_mcp_server_request",
    "set_log_level",
    # Models
    "AuthMethod",
    "AuthMethodPriority",
    "AuthType",
    "SapDestination",
    "McpDestination",
    "DirectJwt",
    "Basic",
    "UaaCredentials",
    "ValidationOutcome",
    "ProxyHeaderValidation",
    # Hosting layer
    "HeaderValidationMiddleware",
    "auth_outcome_var",
    "extract_headers",
    # Helpers
    "get_header_value",
    "has_header",
    "is_valid_url",
    # Constants
    "HEADER_SAP_DESTINATION_SERVICE",
    "HEADER_MCP_DESTINATION",
    "HEADER_SAP_URL",
    "HEADER_SAP_CLIENT",
    "HEADER_SAP_AUTH_TYPE",
    "HEADER_SAP_JWT_TOKEN",
    "HEADER_SAP_REFRESH_TOKEN",
    "HEADER_SAP_UAA_URL",
    "HEADER_SAP_UAA_CLIENT_ID",
    "HEADER_SAP_UAA_CLIENT_SECRET",
    "HEADER_SAP_LOGIN",
    "HEADER_SAP_PASSWORD",
    "HEADER_BTP_DESTINATION",
    "HEADER_MCP_URL",
    "AUTH_TYPE_JWT",
    "AUTH_TYPE_XSUAA",
    "AUTH_TYPE_BASIC",
]

__version__ = "0.1.0"

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def set_log_level(level: str) -> None:
    """Set the log level for the mcp_header_validator logger.

    Args:
        level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL (any case).

    Raises:
        ValueError: If the level is unknown.
    """
    if level.upper() not in _VALID_LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level!r}. Valid: {sorted(_VALID_LOG_LEVELS)}")
    logging.getLogger("mcp_header_validator").setLevel(getattr(logging, level.upper()))
