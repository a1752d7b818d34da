"""Shared test fixtures for mcp-header-validator tests."""

from __future__ import annotations

from typing import Any

import pytest

from mcp_header_validator.constants import (
    AUTH_TYPE_BASIC,
    AUTH_TYPE_JWT,
    HEADER_SAP_AUTH_TYPE,
    HEADER_SAP_JWT_TOKEN,
    HEADER_SAP_LOGIN,
    HEADER_SAP_PASSWORD,
    HEADER_SAP_URL,
)

# ---------------------------------------------------------------------------
# Fixtures: reusable header maps
# ---------------------------------------------------------------------------


@pytest.fixture
def jwt_token() -> str:
    """A syntactically plausible JWT (never decoded by the validator)."""
    return (
        "eyJhbGciOiJSUzI1NiIsInR5cCI6IkpXVCJ9."
        "eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ."
        "SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
    )


@pytest.fixture
def jwt_headers(jwt_token: str) -> dict[str, Any]:
    """URL + jwt auth type + direct token."""
    return {
        HEADER_SAP_URL: "https://test.sap.com",
        HEADER_SAP_AUTH_TYPE: AUTH_TYPE_JWT,
        HEADER_SAP_JWT_TOKEN: jwt_token,
    }


@pytest.fixture
def basic_headers() -> dict[str, Any]:
    """URL + basic auth type + login/password."""
    return {
        HEADER_SAP_URL: "https://test.sap.com",
        HEADER_SAP_AUTH_TYPE: AUTH_TYPE_BASIC,
        HEADER_SAP_LOGIN: "username",
        HEADER_SAP_PASSWORD: "password",
    }
