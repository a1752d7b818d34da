"""Authentication header resolution for mcp-header-validator."""

from mcp_header_validator.auth.methods import (
    MethodCandidate,
    validate_basic,
    validate_direct_jwt,
    validate_mcp_destination,
    validate_sap_destination,
)
from mcp_header_validator.auth.middleware import HeaderValidationMiddleware, auth_outcome_var, extract_headers
from mcp_header_validator.auth.resolver import validate_auth_headers

__all__ = [
    "validate_auth_headers",
    "MethodCandidate",
    "validate_sap_destination",
    "validate_mcp_destination",
    "validate_direct_jwt",
    "validate_basic",
    "HeaderValidationMiddleware",
    "auth_outcome_var",
    "extract_headers",
]
