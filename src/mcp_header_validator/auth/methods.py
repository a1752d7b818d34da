"""Per-method header validators.

Each validator inspects the header map for one authentication method and
returns ``None`` when its trigger header is absent, or a ``MethodCandidate``
that is either populated or carries the errors that disqualify it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from mcp_header_validator._types import HeaderMap
from mcp_header_validator._utils import get_header_value, has_header
from mcp_header_validator.constants import (
    HEADER_MCP_DESTINATION,
    HEADER_SAP_AUTH_TYPE,
    HEADER_SAP_CLIENT,
    HEADER_SAP_DESTINATION_SERVICE,
    HEADER_SAP_JWT_TOKEN,
    HEADER_SAP_LOGIN,
    HEADER_SAP_PASSWORD,
    HEADER_SAP_REFRESH_TOKEN,
    HEADER_SAP_URL,
    MIN_JWT_TOKEN_LENGTH,
    UAA_HEADER_ALIASES,
)
from mcp_header_validator.models import (
    AuthMethod,
    AuthMethodPriority,
    AuthType,
    Basic,
    DirectJwt,
    McpDestination,
    SapDestination,
    UaaCredentials,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MethodCandidate:
    """Outcome of a single method validator.

    Attributes:
        priority: Rank of ``method``, or ``NONE`` when the method was rejected.
        method: The populated method, or None when rejected outright.
        sap_url: URL to connect to (empty for destination-based methods).
        errors: Problems that disqualify this candidate.
        warnings: Headers that were present but have no effect.
    """

    priority: AuthMethodPriority
    method: AuthMethod | None
    sap_url: str = ""
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def _rejected(sap_url: str, errors: list[str], warnings: list[str]) -> MethodCandidate:
    return MethodCandidate(AuthMethodPriority.NONE, None, sap_url, tuple(errors), tuple(warnings))


def _ignored_warnings(headers: HeaderMap, names: Iterable[str], trigger: str, reason: str) -> list[str]:
    return [
        f"{name} is ignored when {trigger} is present ({reason})"
        for name in names
        if has_header(headers, name)
    ]


def validate_sap_destination(headers: HeaderMap) -> MethodCandidate | None:
    """Validate ``x-sap-destination`` based authentication (highest priority).

    The URL comes from the destination, so ``x-sap-url`` is never used.
    """
    if not has_header(headers, HEADER_SAP_DESTINATION_SERVICE):
        return None

    destination = get_header_value(headers, HEADER_SAP_DESTINATION_SERVICE, empty_as_none=False)
    if not destination:
        return _rejected("", [f"{HEADER_SAP_DESTINATION_SERVICE} header is empty"], [])

    warnings = _ignored_warnings(
        headers,
        (HEADER_SAP_URL,),
        HEADER_SAP_DESTINATION_SERVICE,
        "URL is loaded from the destination service key or .env file",
    )
    warnings += _ignored_warnings(
        headers,
        (HEADER_SAP_JWT_TOKEN, HEADER_MCP_DESTINATION),
        HEADER_SAP_DESTINATION_SERVICE,
        "destination-based auth takes priority",
    )
    warnings += _ignored_warnings(
        headers,
        (HEADER_SAP_AUTH_TYPE,),
        HEADER_SAP_DESTINATION_SERVICE,
        "always uses JWT",
    )

    method = SapDestination(
        destination=destination,
        sap_client=get_header_value(headers, HEADER_SAP_CLIENT),
        username=get_header_value(headers, HEADER_SAP_LOGIN),
        password=get_header_value(headers, HEADER_SAP_PASSWORD),
    )
    return MethodCandidate(method.priority, method, "", (), tuple(warnings))


def validate_mcp_destination(headers: HeaderMap) -> MethodCandidate | None:
    """Validate ``x-mcp-destination`` based authentication.

    Always JWT through the token broker; URL, auth-type, token and basic
    credentials sent alongside are reported as ignored.
    """
    if not has_header(headers, HEADER_MCP_DESTINATION):
        return None

    destination = get_header_value(headers, HEADER_MCP_DESTINATION, empty_as_none=False)
    if not destination:
        return _rejected("", [f"{HEADER_MCP_DESTINATION} header is empty"], [])

    warnings = _ignored_warnings(
        headers,
        (HEADER_SAP_URL,),
        HEADER_MCP_DESTINATION,
        "URL is loaded from the destination service key or .env file",
    )
    warnings += _ignored_warnings(
        headers,
        (HEADER_SAP_AUTH_TYPE,),
        HEADER_MCP_DESTINATION,
        "always uses JWT",
    )
    warnings += _ignored_warnings(
        headers,
        (HEADER_SAP_JWT_TOKEN, HEADER_SAP_LOGIN, HEADER_SAP_PASSWORD),
        HEADER_MCP_DESTINATION,
        "destination-based auth takes priority",
    )

    method = McpDestination(
        destination=destination,
        sap_client=get_header_value(headers, HEADER_SAP_CLIENT),
    )
    return MethodCandidate(method.priority, method, "", (), tuple(warnings))


def _read_uaa(headers: HeaderMap) -> tuple[UaaCredentials | None, list[str]]:
    """Read the UAA triple, accepting either alias per field."""
    values: dict[str, str | None] = {}
    for field_name, aliases in UAA_HEADER_ALIASES.items():
        values[field_name] = next(
            (value for value in (get_header_value(headers, alias) for alias in aliases) if value),
            None,
        )

    present = [name for name, value in values.items() if value]
    if not present:
        return None, []
    if len(present) < len(values):
        missing = [UAA_HEADER_ALIASES[name][0] for name, value in values.items() if not value]
        return None, [
            "UAA configuration is incomplete and will not be used for token refresh; "
            f"missing: {', '.join(missing)}"
        ]
    return UaaCredentials(url=values["url"], client_id=values["client_id"], client_secret=values["client_secret"]), []


def validate_direct_jwt(headers: HeaderMap, sap_url: str, auth_type: AuthType) -> MethodCandidate | None:
    """Validate a bearer token passed in ``x-sap-jwt-token``.

    Only applies to the ``jwt`` and ``xsuaa`` auth types. The length check is a
    shape check; the token is never decoded.
    """
    if auth_type not in (AuthType.JWT, AuthType.XSUAA):
        return None

    jwt_token = get_header_value(headers, HEADER_SAP_JWT_TOKEN)
    if not jwt_token:
        return None

    errors: list[str] = []
    if len(jwt_token) < MIN_JWT_TOKEN_LENGTH:
        errors.append(
            f"{HEADER_SAP_JWT_TOKEN} appears to be invalid (too short, minimum {MIN_JWT_TOKEN_LENGTH} characters)"
        )

    uaa, warnings = _read_uaa(headers)
    method = DirectJwt(
        jwt_token=jwt_token,
        auth_type=auth_type,
        refresh_token=get_header_value(headers, HEADER_SAP_REFRESH_TOKEN),
        uaa=uaa,
        sap_client=get_header_value(headers, HEADER_SAP_CLIENT),
    )
    return MethodCandidate(method.priority, method, sap_url, tuple(errors), tuple(warnings))


def validate_basic(headers: HeaderMap, sap_url: str, auth_type: AuthType) -> MethodCandidate | None:
    """Validate ``x-sap-login`` / ``x-sap-password`` for the ``basic`` auth type."""
    if auth_type is not AuthType.BASIC:
        return None

    if not (has_header(headers, HEADER_SAP_LOGIN) and has_header(headers, HEADER_SAP_PASSWORD)):
        return None

    username = get_header_value(headers, HEADER_SAP_LOGIN)
    password = get_header_value(headers, HEADER_SAP_PASSWORD)

    if username and password:
        warnings: list[str] = []
        if has_header(headers, HEADER_SAP_JWT_TOKEN):
            warnings.append(f"{HEADER_SAP_JWT_TOKEN} is ignored when {HEADER_SAP_AUTH_TYPE} is basic")
        method = Basic(username=username, password=password)
        return MethodCandidate(method.priority, method, sap_url, (), tuple(warnings))

    errors: list[str] = []
    if not username:
        errors.append(f"{HEADER_SAP_LOGIN} header is empty")
    if not password:
        errors.append(f"{HEADER_SAP_PASSWORD} header is empty")
    logger.debug("Basic credentials rejected: %d empty field(s)", len(errors))
    return _rejected(sap_url, errors, [])
