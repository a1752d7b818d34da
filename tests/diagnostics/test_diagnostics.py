"""Tests for the header diagnostics endpoint."""

from __future__ import annotations

import pytest
from starlette.applications import Starlette
from starlette.testclient import TestClient

from mcp_header_validator.diagnostics import create_diagnostics_mount


@pytest.fixture
def diagnostics_app() -> Starlette:
    return Starlette(routes=[create_diagnostics_mount()])


class TestValidateEndpoint:
    def test_no_headers(self, diagnostics_app: Starlette) -> None:
        client = TestClient(diagnostics_app)
        response = client.get("/headers/validate")
        assert response.status_code == 200
        data = response.json()
        assert data["auth"]["is_valid"] is False
        assert data["auth"]["errors"] == []
        assert data["proxy"]["is_valid"] is False
        assert data["is_proxy_request"] is False
        assert data["is_mcp_server_request"] is False
        assert data["recognized_headers"] == []

    def test_basic_auth_masks_password(self, diagnostics_app: Starlette) -> None:
        client = TestClient(diagnostics_app)
        response = client.get(
            "/headers/validate",
            headers={
                "X-SAP-URL": "https://test.sap.com",
                "X-SAP-Auth-Type": "basic",
                "X-SAP-Login": "user",
                "X-SAP-Password": "secret",
            },
        )
        data = response.json()
        assert data["auth"]["is_valid"] is True
        assert data["auth"]["priority"] == "BASIC"
        assert data["auth"]["sap_url"] == "https://test.sap.com"
        assert data["auth"]["selected_method"]["username"] == "user"
        assert data["auth"]["selected_method"]["password"] == "***"
        assert "secret" not in response.text
        assert data["is_mcp_server_request"] is True
        assert data["recognized_headers"] == ["x-sap-auth-type", "x-sap-login", "x-sap-password", "x-sap-url"]

    def test_destination_with_warning(self, diagnostics_app: Starlette) -> None:
        client = TestClient(diagnostics_app)
        response = client.get(
            "/headers/validate",
            headers={"x-sap-destination": "S4HANA_E19", "x-sap-url": "https://test.sap.com"},
        )
        data = response.json()
        assert data["auth"]["selected_method"]["kind"] == "sap_destination"
        assert data["auth"]["selected_method"]["destination"] == "S4HANA_E19"
        assert len(data["auth"]["warnings"]) == 1

    def test_proxy_request(self, diagnostics_app: Starlette) -> None:
        client = TestClient(diagnostics_app)
        response = client.get(
            "/headers/validate",
            headers={"x-btp-destination": "BTP", "x-mcp-url": "https://mcp.test.com"},
        )
        data = response.json()
        assert data["proxy"]["is_valid"] is True
        assert data["proxy"]["btp_destination"] == "BTP"
        assert data["is_proxy_request"] is True
        assert data["is_mcp_server_request"] is False

    def test_post_not_allowed(self, diagnostics_app: Starlette) -> None:
        client = TestClient(diagnostics_app)
        response = client.post("/headers/validate")
        assert response.status_code == 405


class TestMount:
    def test_custom_prefix(self) -> None:
        app = Starlette(routes=[create_diagnostics_mount(prefix="/debug/auth/")])
        client = TestClient(app)
        assert client.get("/debug/auth/validate").status_code == 200

    @pytest.mark.parametrize("prefix", ["", "/", "headers"])
    def test_invalid_prefix(self, prefix: str) -> None:
        with pytest.raises(ValueError, match="prefix"):
            create_diagnostics_mount(prefix=prefix)
