"""ASGI middleware that validates authentication headers and exposes the outcome via ContextVar."""

from __future__ import annotations

import json
import logging
from contextvars import ContextVar
from typing import Any

from mcp_header_validator.auth.resolver import validate_auth_headers
from mcp_header_validator.models import ValidationOutcome

logger = logging.getLogger(__name__)

# Bridge between ASGI middleware and downstream handlers
auth_outcome_var: ContextVar[ValidationOutcome | None] = ContextVar("auth_outcome", default=None)


def extract_headers(scope: dict[str, Any]) -> dict[str, str | list[str]]:
    """Extract headers from ASGI scope as a lowercase-key dict.

    Repeated headers are collected into a list in arrival order.
    """
    result: dict[str, str | list[str]] = {}
    for key_bytes, value_bytes in scope.get("headers", []):
        key = key_bytes.decode("latin-1").lower()
        value = value_bytes.decode("latin-1")
        existing = result.get(key)
        if existing is None:
            result[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            result[key] = [existing, value]
    return result


class HeaderValidationMiddleware:
    """ASGI middleware that validates auth headers and sets ``auth_outcome_var``.

    Args:
        app: The ASGI application to wrap.
        require_valid: If True, requests whose headers produce errors receive
            400. Requests without any auth headers always pass through.
        exempt_paths: Exact paths that bypass validation.
        exempt_prefixes: Path prefixes that bypass validation.
    """

    def __init__(
        self,
        app: Any,
        *,
        require_valid: bool = False,
        exempt_paths: set[str] | None = None,
        exempt_prefixes: set[str] | None = None,
    ) -> None:
        for prefix in exempt_prefixes or ():
            if not prefix.startswith("/"):
                raise ValueError(f"exempt prefix must start with '/': {prefix!r}")
        self._app = app
        self._require_valid = require_valid
        self._exempt_paths = exempt_paths if exempt_paths is not None else {"/health", "/metrics"}
        self._exempt_prefixes = exempt_prefixes or set()

    def _is_exempt(self, path: str) -> bool:
        """Check if a path is exempt from validation."""
        if path in self._exempt_paths:
            return True
        return any(path.startswith(prefix) for prefix in self._exempt_prefixes)

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self._app(scope, receive, send)
            return

        path = scope.get("path", "")
        if self._is_exempt(path):
            await self._app(scope, receive, send)
            return

        outcome = validate_auth_headers(extract_headers(scope))

        if outcome.errors and self._require_valid:
            logger.warning("Rejected request to %s: %d header error(s)", path, len(outcome.errors))
            await self._send_400(send, outcome)
            return

        token = auth_outcome_var.set(outcome)
        try:
            await self._app(scope, receive, send)
        finally:
            auth_outcome_var.reset(token)

    @staticmethod
    async def _send_400(send: Any, outcome: ValidationOutcome) -> None:
        """Send a 400 Bad Request JSON response listing the header problems."""
        body = json.dumps(
            {
                "error": "Invalid authentication headers",
                "errors": list(outcome.errors),
                "warnings": list(outcome.warnings),
            }
        ).encode()
        await send(
            {
                "type": "http.response.start",
                "status": 400,
                "headers": [
                    [b"content-type", b"application/json"],
                    [b"content-length", str(len(body)).encode()],
                ],
            }
        )
        await send({"type": "http.response.body", "body": body})
