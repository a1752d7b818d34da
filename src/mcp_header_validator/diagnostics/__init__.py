"""Header diagnostics: a JSON endpoint that reports how a request's headers resolve."""

from __future__ import annotations

from starlette.routing import Mount

from mcp_header_validator.diagnostics.routes import build_diagnostics_routes


def create_diagnostics_mount(*, prefix: str = "/headers") -> Mount:
    """Create a Starlette Mount for the header diagnostics endpoint.

    Args:
        prefix: URL prefix for the endpoint (default: "/headers").

    Returns:
        A Starlette Mount that can be included in the app's route list.
    """
    if not prefix.startswith("/") or prefix == "/":
        raise ValueError(f"prefix must start with '/' and name a path segment: {prefix!r}")
    return Mount(prefix.rstrip("/"), routes=build_diagnostics_routes())
