"""Tests for the mcp-header-validator public API."""

from __future__ import annotations

import logging

import pytest

import mcp_header_validator
from mcp_header_validator import (
    AuthMethodPriority,
    SapDestination,
    set_log_level,
    validate_auth_headers,
)


class TestExports:
    def test_all_names_resolve(self):
        for name in mcp_header_validator.__all__:
            assert hasattr(mcp_header_validator, name), name

    def test_version(self):
        assert mcp_header_validator.__version__ == "0.1.0"

    def test_top_level_validate(self):
        result = validate_auth_headers({"x-sap-destination": "S4HANA_E19"})
        assert result.is_valid is True
        assert result.selected_method == SapDestination("S4HANA_E19")
        assert result.priority is AuthMethodPriority.SAP_DESTINATION


class TestSetLogLevel:
    @pytest.fixture(autouse=True)
    def _restore_level(self):
        package_logger = logging.getLogger("mcp_header_validator")
        original = package_logger.level
        yield
        package_logger.setLevel(original)

    @pytest.mark.parametrize("level", ["DEBUG", "info", "Warning"])
    def test_sets_level(self, level: str):
        set_log_level(level)
        assert logging.getLogger("mcp_header_validator").level == getattr(logging, level.upper())

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            set_log_level("VERBOSE")
