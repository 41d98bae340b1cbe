"""
JSON converter for stream definitions.

Renders a StreamDefinition as a camelCase JSON document and builds definitions
back from such documents. Document shape is guarded by Pydantic v2 models; the
definition itself is always rebuilt through the validating constructor. This
module is zero-IO.

Document shape
--------------
```json
{
  "streamId": "Temperature-1.0.0",
  "name": "Temperature",
  "version": "1.0.0",
  "nickName": "temp",
  "description": "Room temperature readings",
  "metaData": [{"name": "sensorId", "type": "STRING"}],
  "correlationData": [{"name": "traceId", "type": "STRING"}],
  "payloadData": [{"name": "value", "type": "DOUBLE"}],
  "tags": ["iot"]
}
```

Notes:
    - Absent fields (None) are omitted; empty lists are kept.
    - "streamId" is informational on input. It is always re-derived from name and
      version, and a differing value is logged and discarded.
    - A missing "version" defaults to "1.0.0" and is still validated.
    - Use `json_dumps_canonical` (re-exported from hashing) for deterministic strings.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .attribute import Attribute, AttributeType, attribute_type_from_value
from .constants import DEFAULT_STREAM_VERSION
from .definition import StreamDefinition
from .errors import MalformedStreamDefinition, StreamDefinitionConversionError

# Re-export canonical dumps to keep a single canonicalization policy.
from .hashing import json_dumps_canonical  # noqa: F401
from .typing import JsonDict

__all__ = [
    "AttributeDocument",
    "StreamDefinitionDocument",
    "to_dict",
    "to_json",
    "from_dict",
    "from_json",
    "json_loads",
    "json_dumps_canonical",
]

logger = logging.getLogger(__name__)


class AttributeDocument(BaseModel):
    """
    Wire form of a single attribute.

    Attributes:
        name (str): Non-empty attribute name.
        type (AttributeType): Attribute type; case-insensitive on input.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    type: AttributeType

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, v: Any) -> AttributeType:
        try:
            return attribute_type_from_value(v)
        except MalformedStreamDefinition as exc:
            raise ValueError(str(exc)) from exc


class StreamDefinitionDocument(BaseModel):
    """
    Wire form of a stream definition (camelCase aliases).

    Raises:
        pydantic.ValidationError: On unknown keys, missing/empty name, or
            malformed attribute entries.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    stream_id: str | None = Field(default=None, alias="streamId")
    name: str = Field(..., min_length=1)
    version: str = DEFAULT_STREAM_VERSION
    nick_name: str | None = Field(default=None, alias="nickName")
    description: str | None = None
    meta_data: list[AttributeDocument] | None = Field(default=None, alias="metaData")
    correlation_data: list[AttributeDocument] | None = Field(default=None, alias="correlationData")
    payload_data: list[AttributeDocument] | None = Field(default=None, alias="payloadData")
    tags: list[str] | None = None


def _attributes_out(group: list[Attribute] | None) -> list[JsonDict] | None:
    if group is None:
        return None
    return [{"name": a.name, "type": a.type.value} for a in group]


def _attributes_in(group: list[AttributeDocument] | None) -> list[Attribute] | None:
    if group is None:
        return None
    return [Attribute(a.name, a.type) for a in group]


def to_dict(definition: StreamDefinition) -> JsonDict:
    """
    Convert a definition into its JSON-ready document mapping.

    Args:
        definition (StreamDefinition): Definition to render.

    Returns:
        JsonDict: camelCase mapping with absent fields omitted, in document order.
    """
    doc: JsonDict = {
        "streamId": definition.stream_id,
        "name": definition.name,
        "version": definition.version,
        "nickName": definition.nick_name,
        "description": definition.description,
        "metaData": _attributes_out(definition.meta_data),
        "correlationData": _attributes_out(definition.correlation_data),
        "payloadData": _attributes_out(definition.payload_data),
        "tags": list(definition.tags) if definition.tags is not None else None,
    }
    return {k: v for k, v in doc.items() if v is not None}


def to_json(definition: StreamDefinition, indent: int | None = None) -> str:
    """
    Render a definition as a JSON string.

    Args:
        definition (StreamDefinition): Definition to render.
        indent (int | None): Pretty-print indent; None for compact output.

    Returns:
        str: JSON document (keys in document order, unicode kept as-is).
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(to_dict(definition), indent=indent, separators=separators, ensure_ascii=False)


def from_dict(obj: Any) -> StreamDefinition:
    """
    Build a definition from a document mapping.

    Args:
        obj (Any): Decoded JSON object.

    Returns:
        StreamDefinition: Validated definition with all groups, tags and display
        metadata restored.

    Raises:
        StreamDefinitionConversionError: If the document shape is invalid.
        MalformedStreamDefinition: If name/version break the identity rules.
    """
    try:
        doc = StreamDefinitionDocument.model_validate(obj)
    except ValidationError as exc:
        raise StreamDefinitionConversionError(f"invalid stream definition document: {exc}") from exc

    definition = StreamDefinition(doc.name, doc.version)
    if doc.stream_id is not None and doc.stream_id != definition.stream_id:
        logger.warning(
            "discarding supplied streamId %r; using derived id %r",
            doc.stream_id,
            definition.stream_id,
        )
    definition.nick_name = doc.nick_name
    definition.description = doc.description
    definition.tags = list(doc.tags) if doc.tags is not None else None
    definition.meta_data = _attributes_in(doc.meta_data)
    definition.correlation_data = _attributes_in(doc.correlation_data)
    definition.payload_data = _attributes_in(doc.payload_data)
    return definition


def json_loads(s: str) -> Any:
    """
    Deserialize a JSON string using the stdlib json module.

    Raises:
        StreamDefinitionConversionError: If s is not valid JSON.
    """
    try:
        return json.loads(s)
    except json.JSONDecodeError as exc:
        raise StreamDefinitionConversionError(f"invalid JSON: {exc}") from exc


def from_json(s: str) -> StreamDefinition:
    """
    Parse a JSON document into a StreamDefinition.

    Args:
        s (str): JSON text produced by `to_json` or an equivalent writer.

    Returns:
        StreamDefinition: Validated definition.

    Raises:
        StreamDefinitionConversionError: On invalid JSON or document shape.
        MalformedStreamDefinition: If name/version break the identity rules.
    """
    return from_dict(json_loads(s))
