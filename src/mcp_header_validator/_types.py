"""Internal type definitions and type aliases for mcp-header-validator."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Union

# A header value is a single string, or the ordered values of a repeated header.
HeaderValue = Union[str, Sequence[str]]

# Header name -> value(s). Keys are usually lower-cased, but need not be.
HeaderMap = Mapping[str, HeaderValue]
