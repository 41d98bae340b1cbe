"""
Identity and naming constants for stream definitions.

Defines the reserved separator used to join stream names and versions, the default
version, and the version pattern enforced by the validating constructor. This module
is zero-IO and uses only the Python standard library.

Notes:
    - Stream ids are ``name + STREAM_NAME_VERSION_SPLITTER + version``.
    - Neither the name nor the version of a validated definition may contain the
      separator, so an id can always be split on its last separator.
    - Changing these constants changes every derived stream id downstream.
"""

from __future__ import annotations

import re
from typing import Final

__all__ = [
    "STREAM_NAME_VERSION_SPLITTER",
    "DEFAULT_STREAM_VERSION",
    "VERSION_PATTERN",
    "META_DATA",
    "CORRELATION_DATA",
    "PAYLOAD_DATA",
]

# Reserved character joining name and version in a stream id.
STREAM_NAME_VERSION_SPLITTER: Final[str] = "-"

# Version used when a definition is created from a name alone.
DEFAULT_STREAM_VERSION: Final[str] = "1.0.0"

# Anchored x.x.x pattern (three dot-separated non-negative integers).
VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d+\.\d+\.\d+$")

# Literal attribute-group keys used on the wire and by lookup-by-key callers.
META_DATA: Final[str] = "metaData"
CORRELATION_DATA: Final[str] = "correlationData"
PAYLOAD_DATA: Final[str] = "payloadData"
