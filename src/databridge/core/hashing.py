"""
Canonical JSON serialization and schema fingerprints for stream definitions.

Provides a single canonical JSON policy and a SHA-256 schema fingerprint that agrees
with StreamDefinition equality: equal definitions always share a fingerprint, and
display metadata (stream id, nick name, description, tags) never affects it. This
module is zero-IO and uses only the Python standard library.

Notes:
    - Canonical JSON:
        - sort_keys=True
        - separators=(",", ":")
        - ensure_ascii=False
    - Hashing is performed over the UTF-8 encoded canonical JSON string.
    - Absent and empty attribute groups both fingerprint as [].
"""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .definition import StreamDefinition

__all__ = [
    "json_dumps_canonical",
    "schema_fingerprint",
]


def json_dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Args:
        obj (Any): JSON-serializable object.

    Returns:
        str: Canonical JSON string with sort_keys=True, compact separators,
        and ensure_ascii=False.
    """
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _sha256_hexdigest(s: str) -> str:
    """Compute SHA-256 hex digest of a UTF-8 string."""
    h = hashlib.sha256()
    h.update(s.encode("utf-8"))
    return h.hexdigest()


def schema_fingerprint(definition: StreamDefinition) -> str:
    """
    Compute a stable fingerprint of a definition's schema shape.

    Args:
        definition (StreamDefinition): Definition to fingerprint.

    Returns:
        str: SHA-256 hex digest over name, version and the three ordered groups.

    Examples:
        >>> from databridge.core.definition import StreamDefinition
        >>> from databridge.core.hashing import schema_fingerprint
        >>> a = StreamDefinition("Temperature", "1.0.0")
        >>> b = StreamDefinition("Temperature", "1.0.0")
        >>> b.description = "display only"
        >>> schema_fingerprint(a) == schema_fingerprint(b)
        True
    """

    def group(attrs: Any) -> list[list[str]]:
        return [[a.name, a.type.value] for a in attrs or ()]

    shape = {
        "name": definition.name,
        "version": definition.version,
        "metaData": group(definition.meta_data),
        "correlationData": group(definition.correlation_data),
        "payloadData": group(definition.payload_data),
    }
    return _sha256_hexdigest(json_dumps_canonical(shape))
