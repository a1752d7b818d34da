"""Priority resolution of authentication headers.

``validate_auth_headers`` runs the method validators in a fixed order and picks
exactly one method:

1. ``x-sap-destination`` (short-circuits everything else)
2. ``x-mcp-destination`` (short-circuits the direct methods)
3. ``x-sap-jwt-token`` with ``x-sap-auth-type`` jwt/xsuaa
4. ``x-sap-login`` + ``x-sap-password`` with ``x-sap-auth-type`` basic

A request without any authentication header is reported as invalid but with
no errors, so the caller can fall back to configuration from other sources.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp_header_validator._types import HeaderMap
from mcp_header_validator._utils import ensure_header_map, get_header_value, has_header, is_valid_url
from mcp_header_validator.auth.methods import (
    MethodCandidate,
    validate_basic,
    validate_direct_jwt,
    validate_mcp_destination,
    validate_sap_destination,
)
from mcp_header_validator.constants import (
    HEADER_MCP_DESTINATION,
    HEADER_SAP_AUTH_TYPE,
    HEADER_SAP_DESTINATION_SERVICE,
    HEADER_SAP_JWT_TOKEN,
    HEADER_SAP_LOGIN,
    HEADER_SAP_PASSWORD,
    HEADER_SAP_URL,
    VALID_AUTH_TYPES,
)
from mcp_header_validator.models import AuthType, ValidationOutcome

logger = logging.getLogger(__name__)

BASIC_AUTH_REQUIRED = f"Basic authentication requires {HEADER_SAP_LOGIN} and {HEADER_SAP_PASSWORD} headers"
JWT_AUTH_REQUIRED = (
    "JWT authentication requires either "
    f"{HEADER_SAP_DESTINATION_SERVICE}, {HEADER_MCP_DESTINATION}, or {HEADER_SAP_JWT_TOKEN} header"
)


def _short_circuit(candidate: MethodCandidate) -> ValidationOutcome:
    """Finish resolution with a destination-based candidate."""
    if candidate.errors or candidate.method is None:
        return ValidationOutcome(is_valid=False, errors=candidate.errors, warnings=candidate.warnings)
    return ValidationOutcome(
        is_valid=True,
        selected_method=candidate.method,
        sap_url="",
        warnings=candidate.warnings,
    )


def _check_basic_set(headers: HeaderMap, auth_type: AuthType | None, errors: list[str], warnings: list[str]) -> bool:
    """Cross-check login/password presence against the declared auth type.

    Returns True when exactly one of the pair was sent.
    """
    has_login = has_header(headers, HEADER_SAP_LOGIN)
    has_password = has_header(headers, HEADER_SAP_PASSWORD)

    if has_login and has_password and auth_type is not AuthType.BASIC:
        warnings.append(
            f"{HEADER_SAP_LOGIN} and {HEADER_SAP_PASSWORD} are ignored because {HEADER_SAP_AUTH_TYPE} is not basic"
        )
    if auth_type is AuthType.BASIC and not (has_login and has_password):
        errors.append(BASIC_AUTH_REQUIRED)

    if has_login != has_password:
        present, missing = (
            (HEADER_SAP_LOGIN, HEADER_SAP_PASSWORD) if has_login else (HEADER_SAP_PASSWORD, HEADER_SAP_LOGIN)
        )
        errors.append(f"{present} is provided without {missing}; both headers are required together")
        return True
    return False


def validate_auth_headers(headers: Any = None) -> ValidationOutcome:
    """Validate and prioritize authentication headers.

    Args:
        headers: Header name to value (or list of values). ``None`` is
            treated as no headers.

    Returns:
        A ``ValidationOutcome`` naming at most one selected method.

    Raises:
        TypeError: If ``headers`` is not a mapping.
    """
    headers = ensure_header_map(headers)

    sap_destination = validate_sap_destination(headers)
    if sap_destination is not None:
        outcome = _short_circuit(sap_destination)
        _log_outcome(outcome)
        return outcome

    sap_url = get_header_value(headers, HEADER_SAP_URL)

    mcp_destination = validate_mcp_destination(headers)
    if mcp_destination is not None:
        outcome = _short_circuit(mcp_destination)
        _log_outcome(outcome)
        return outcome

    if not sap_url:
        logger.debug("No destination and no %s header; nothing to validate", HEADER_SAP_URL)
        return ValidationOutcome(is_valid=False)

    if not is_valid_url(sap_url):
        outcome = ValidationOutcome(is_valid=False, errors=(f"{HEADER_SAP_URL} is not a valid URL: {sap_url}",))
        _log_outcome(outcome)
        return outcome

    errors: list[str] = []
    warnings: list[str] = []

    raw_auth_type = get_header_value(headers, HEADER_SAP_AUTH_TYPE)
    auth_type = AuthType.parse(raw_auth_type)

    partial_basic_set = _check_basic_set(headers, auth_type, errors, warnings)

    if raw_auth_type is None:
        if not partial_basic_set:
            errors.append(
                f"{HEADER_SAP_AUTH_TYPE} header is required when "
                f"{HEADER_SAP_DESTINATION_SERVICE} and {HEADER_MCP_DESTINATION} are not present"
            )
    elif auth_type is None:
        errors.append(f"{HEADER_SAP_AUTH_TYPE} must be one of: {', '.join(VALID_AUTH_TYPES)}, got: {raw_auth_type}")

    candidates: list[MethodCandidate] = []
    if auth_type is not None:
        for validator in (validate_direct_jwt, validate_basic):
            candidate = validator(headers, sap_url, auth_type)
            if candidate is not None:
                candidates.append(candidate)

    if not candidates:
        if auth_type in (AuthType.JWT, AuthType.XSUAA):
            errors.append(JWT_AUTH_REQUIRED)
        elif auth_type is AuthType.BASIC and BASIC_AUTH_REQUIRED not in errors:
            errors.append(BASIC_AUTH_REQUIRED)
        outcome = ValidationOutcome(is_valid=False, errors=tuple(errors), warnings=tuple(warnings))
        _log_outcome(outcome)
        return outcome

    # max() keeps the first of equally ranked candidates
    selected = max(candidates, key=lambda c: c.priority)
    if sum(1 for c in candidates if c.priority == selected.priority) > 1:
        warnings.append(
            f"Multiple authentication methods with same priority detected, using: {selected.priority.name}"
        )

    all_errors = tuple(errors) + selected.errors
    all_warnings = tuple(warnings) + selected.warnings
    is_valid = not all_errors and selected.method is not None

    outcome = ValidationOutcome(
        is_valid=is_valid,
        selected_method=selected.method if is_valid else None,
        sap_url=selected.sap_url if is_valid else "",
        errors=all_errors,
        warnings=all_warnings,
    )
    _log_outcome(outcome)
    return outcome


def _log_outcome(outcome: ValidationOutcome) -> None:
    logger.debug(
        "Auth headers resolved: method=%s valid=%s errors=%d warnings=%d",
        outcome.priority.name,
        outcome.is_valid,
        len(outcome.errors),
        len(outcome.warnings),
    )
