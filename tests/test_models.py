"""Tests for authentication method models and result rendering."""

from __future__ import annotations

import dataclasses

import pytest

from mcp_header_validator.models import (
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


class TestAuthType:
    @pytest.mark.parametrize("raw", ["jwt", "JWT", "  Jwt  "])
    def test_parse_is_case_insensitive(self, raw: str):
        assert AuthType.parse(raw) is AuthType.JWT

    def test_parse_unknown_returns_none(self):
        assert AuthType.parse("oauth") is None

    def test_parse_none(self):
        assert AuthType.parse(None) is None


class TestPriority:
    def test_rank_order(self):
        assert (
            AuthMethodPriority.SAP_DESTINATION
            > AuthMethodPriority.MCP_DESTINATION
            > AuthMethodPriority.DIRECT_JWT
            > AuthMethodPriority.BASIC
            > AuthMethodPriority.NONE
        )

    def test_variants_carry_fixed_rank(self):
        assert SapDestination("D").priority == 4
        assert McpDestination("D").priority == 3
        assert DirectJwt("token-12345").priority == 2
        assert Basic("u", "p").priority == 1

    def test_destinations_always_jwt(self):
        assert SapDestination("D").auth_type is AuthType.JWT
        assert McpDestination("D").auth_type is AuthType.JWT


class TestImmutability:
    def test_methods_are_frozen(self):
        method = Basic("u", "p")
        with pytest.raises(dataclasses.FrozenInstanceError):
            method.username = "other"  # type: ignore[misc]

    def test_outcome_is_frozen(self):
        outcome = ValidationOutcome(is_valid=False)
        with pytest.raises(dataclasses.FrozenInstanceError):
            outcome.is_valid = True  # type: ignore[misc]


class TestToDict:
    def test_secrets_are_masked(self):
        method = DirectJwt(
            jwt_token="eyJsecret-token",
            auth_type=AuthType.XSUAA,
            refresh_token="refresh",
            uaa=UaaCredentials("https://uaa.test.com", "client", "secret"),
        )
        data = method.to_dict()
        assert data["jwt_token"] == "***"
        assert data["refresh_token"] == "***"
        assert data["uaa"] == {"url": "https://uaa.test.com", "client_id": "client", "client_secret": "***"}
        assert data["auth_type"] == "xsuaa"

    def test_basic_password_masked(self):
        assert Basic("u", "p").to_dict() == {"kind": "basic", "auth_type": "basic", "username": "u", "password": "***"}

    def test_sap_destination_without_password(self):
        data = SapDestination("S4HANA_E19").to_dict()
        assert data["password"] is None
        assert data["destination"] == "S4HANA_E19"

    def test_outcome_without_method(self):
        outcome = ValidationOutcome(is_valid=False, errors=("bad",))
        assert outcome.priority is AuthMethodPriority.NONE
        assert outcome.to_dict() == {
            "is_valid": False,
            "priority": "NONE",
            "selected_method": None,
            "sap_url": "",
            "errors": ["bad"],
            "warnings": [],
        }

    def test_outcome_with_method(self):
        outcome = ValidationOutcome(is_valid=True, selected_method=McpDestination("TRIAL", "100"))
        data = outcome.to_dict()
        assert data["priority"] == "MCP_DESTINATION"
        assert data["selected_method"] == {
            "kind": "mcp_destination",
            "auth_type": "jwt",
            "destination": "TRIAL",
            "sap_client": "100",
        }

    def test_proxy_validation(self):
        result = ProxyHeaderValidation(is_valid=True, mcp_url="https://mcp.test.com")
        assert result.to_dict()["mcp_url"] == "https://mcp.test.com"
        assert result.to_dict()["errors"] == []
