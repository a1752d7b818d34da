"""Header names, auth types and limits recognized by mcp-header-validator."""

from __future__ import annotations

# Destination-based authentication
HEADER_SAP_DESTINATION_SERVICE = "x-sap-destination"
HEADER_MCP_DESTINATION = "x-mcp-destination"

# Connection
HEADER_SAP_URL = "x-sap-url"
HEADER_SAP_CLIENT = "x-sap-client"
HEADER_SAP_AUTH_TYPE = "x-sap-auth-type"

# Direct JWT
HEADER_SAP_JWT_TOKEN = "x-sap-jwt-token"
HEADER_SAP_REFRESH_TOKEN = "x-sap-refresh-token"
HEADER_SAP_UAA_URL = "x-sap-uaa-url"
HEADER_SAP_UAA_CLIENT_ID = "x-sap-uaa-client-id"
HEADER_SAP_UAA_CLIENT_SECRET = "x-sap-uaa-client-secret"
HEADER_UAA_URL = "uaa-url"
HEADER_UAA_CLIENT_ID = "uaa-client-id"
HEADER_UAA_CLIENT_SECRET = "uaa-client-secret"

# Basic
HEADER_SAP_LOGIN = "x-sap-login"
HEADER_SAP_PASSWORD = "x-sap-password"

# Proxy routing
HEADER_BTP_DESTINATION = "x-btp-destination"
HEADER_MCP_URL = "x-mcp-url"

AUTH_TYPE_JWT = "jwt"
AUTH_TYPE_XSUAA = "xsuaa"
AUTH_TYPE_BASIC = "basic"

VALID_AUTH_TYPES: tuple[str, ...] = (AUTH_TYPE_JWT, AUTH_TYPE_XSUAA, AUTH_TYPE_BASIC)

MIN_JWT_TOKEN_LENGTH = 10

# UAA fields: each entry lists header aliases in lookup order.
UAA_HEADER_ALIASES: dict[str, tuple[str, ...]] = {
    "url": (HEADER_SAP_UAA_URL, HEADER_UAA_URL),
    "client_id": (HEADER_SAP_UAA_CLIENT_ID, HEADER_UAA_CLIENT_ID),
    "client_secret": (HEADER_SAP_UAA_CLIENT_SECRET, HEADER_UAA_CLIENT_SECRET),
}

PROXY_HEADERS: tuple[str, ...] = (HEADER_BTP_DESTINATION, HEADER_MCP_DESTINATION, HEADER_MCP_URL)

# Headers that only make sense when a proxy forwards the request.
PROXY_ONLY_HEADERS: tuple[str, ...] = (HEADER_BTP_DESTINATION, HEADER_MCP_URL)

AUTH_HEADERS: tuple[str, ...] = (
    HEADER_SAP_URL,
    HEADER_SAP_DESTINATION_SERVICE,
    HEADER_MCP_DESTINATION,
    HEADER_SAP_AUTH_TYPE,
    HEADER_SAP_JWT_TOKEN,
    HEADER_SAP_LOGIN,
    HEADER_SAP_PASSWORD,
)

# Every header name the resolver or the proxy classifier reads.
KNOWN_HEADERS: frozenset[str] = frozenset(
    (
        HEADER_SAP_DESTINATION_SERVICE,
        HEADER_MCP_DESTINATION,
        HEADER_SAP_URL,
        HEADER_SAP_CLIENT,
        HEADER_SAP_AUTH_TYPE,
        HEADER_SAP_JWT_TOKEN,
        HEADER_SAP_REFRESH_TOKEN,
        HEADER_SAP_UAA_URL,
        HEADER_SAP_UAA_CLIENT_ID,
        HEADER_SAP_UAA_CLIENT_SECRET,
        HEADER_UAA_URL,
        HEADER_UAA_CLIENT_ID,
        HEADER_UAA_CLIENT_SECRET,
        HEADER_SAP_LOGIN,
        HEADER_SAP_PASSWORD,
        HEADER_BTP_DESTINATION,
        HEADER_MCP_URL,
    )
)
