"""
Core exception types raised by stream definition construction and conversion.

Provides typed exceptions for core-domain failures:
- MalformedStreamDefinition for names/versions that break the identity rules.
- StreamDefinitionConversionError for documents the converter cannot turn into a definition.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Messages name the offending field and the violated rule, e.g.
      ``name 'Temp-erature' cannot contain '-'``.
    - IO-layer failures live in databridge.io.errors.

Examples:
    Catch a malformed version.

    >>> from databridge.core.definition import StreamDefinition
    >>> from databridge.core.errors import MalformedStreamDefinition
    >>> try:
    ...     StreamDefinition("Temperature", "1.0")
    ... except MalformedStreamDefinition as e:
    ...     msg = str(e)
    >>> "x.x.x" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "MalformedStreamDefinition",
    "StreamDefinitionConversionError",
]


class MalformedStreamDefinition(ValueError):
    """Stream name or version violates the separator or x.x.x format rules."""


class StreamDefinitionConversionError(MalformedStreamDefinition):
    """Textual/dict document could not be converted into a StreamDefinition."""
