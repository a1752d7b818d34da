"""Authentication methods and validation results.

Every value here is a frozen dataclass built fresh for a single validation
call. ``AuthMethod`` is a closed union of four variants; each variant carries a
fixed ``priority`` used to pick one method when several are signalled at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, ClassVar, Union

_MASK = "***"


class AuthType(str, Enum):
    """Declared authentication type (``x-sap-auth-type``)."""

    JWT = "jwt"
    XSUAA = "xsuaa"
    BASIC = "basic"

    @classmethod
    def parse(cls, value: str | None) -> AuthType | None:
        """Parse a header value case-insensitively. Returns None if unknown."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class AuthMethodPriority(IntEnum):
    """Precedence among authentication methods (higher wins)."""

    NONE = 0
    BASIC = 1
    DIRECT_JWT = 2
    MCP_DESTINATION = 3
    SAP_DESTINATION = 4


@dataclass(frozen=True)
class UaaCredentials:
    """UAA endpoint triple used only for token refresh."""

    url: str
    client_id: str
    client_secret: str

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "client_id": self.client_id, "client_secret": _MASK}


@dataclass(frozen=True)
class SapDestination:
    """Destination resolved by the token broker from ``x-sap-destination``.

    Attributes:
        destination: Destination name (non-empty).
        sap_client: Optional SAP client number.
        username: Optional login, used by some cloud systems.
        password: Optional password paired with ``username``.
    """

    kind: ClassVar[str] = "sap_destination"
    priority: ClassVar[AuthMethodPriority] = AuthMethodPriority.SAP_DESTINATION
    auth_type: ClassVar[AuthType] = AuthType.JWT

    destination: str
    sap_client: str | None = None
    username: str | None = None
    password: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "auth_type": self.auth_type.value,
            "destination": self.destination,
            "sap_client": self.sap_client,
            "username": self.username,
            "password": _MASK if self.password is not None else None,
        }


@dataclass(frozen=True)
class McpDestination:
    """Destination resolved by the token broker from ``x-mcp-destination``."""

    kind: ClassVar[str] = "mcp_destination"
    priority: ClassVar[AuthMethodPriority] = AuthMethodPriority.MCP_DESTINATION
    auth_type: ClassVar[AuthType] = AuthType.JWT

    destination: str
    sap_client: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "auth_type": self.auth_type.value,
            "destination": self.destination,
            "sap_client": self.sap_client,
        }


@dataclass(frozen=True)
class DirectJwt:
    """Bearer token passed directly in ``x-sap-jwt-token``.

    Attributes:
        jwt_token: The access token, passed through untouched.
        auth_type: ``AuthType.JWT`` or ``AuthType.XSUAA``.
        refresh_token: Optional refresh token.
        uaa: Complete UAA triple for refreshing, or None.
        sap_client: Optional SAP client number.
    """

    kind: ClassVar[str] = "direct_jwt"
    priority: ClassVar[AuthMethodPriority] = AuthMethodPriority.DIRECT_JWT

    jwt_token: str
    auth_type: AuthType = AuthType.JWT
    refresh_token: str | None = None
    uaa: UaaCredentials | None = None
    sap_client: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "auth_type": self.auth_type.value,
            "jwt_token": _MASK,
            "refresh_token": _MASK if self.refresh_token is not None else None,
            "uaa": self.uaa.to_dict() if self.uaa is not None else None,
            "sap_client": self.sap_client,
        }


@dataclass(frozen=True)
class Basic:
    """Username/password pair from ``x-sap-login`` and ``x-sap-password``."""

    kind: ClassVar[str] = "basic"
    priority: ClassVar[AuthMethodPriority] = AuthMethodPriority.BASIC
    auth_type: ClassVar[AuthType] = AuthType.BASIC

    username: str
    password: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "auth_type": self.auth_type.value,
            "username": self.username,
            "password": _MASK,
        }


AuthMethod = Union[SapDestination, McpDestination, DirectJwt, Basic]


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of resolving the authentication headers of one request.

    ``is_valid`` is True only when a method was selected and no error was
    reported. An outcome with no method and no errors means the request carried
    no authentication headers at all.
    """

    is_valid: bool
    selected_method: AuthMethod | None = None
    sap_url: str = ""
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def priority(self) -> AuthMethodPriority:
        if self.selected_method is None:
            return AuthMethodPriority.NONE
        return self.selected_method.priority

    def to_dict(self) -> dict[str, Any]:
        """Render as a JSON-safe dict with secrets masked."""
        return {
            "is_valid": self.is_valid,
            "priority": self.priority.name,
            "selected_method": self.selected_method.to_dict() if self.selected_method is not None else None,
            "sap_url": self.sap_url,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class ProxyHeaderValidation:
    """Routing headers found on a request and any problems with them."""

    is_valid: bool
    btp_destination: str | None = None
    mcp_destination: str | None = None
    mcp_url: str | None = None
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "btp_destination": self.btp_destination,
            "mcp_destination": self.mcp_destination,
            "mcp_url": self.mcp_url,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
