"""
Core package aggregator for stream definition contracts (identity, schema, serde).

## Contracts (single source of truth)
- Constants — reserved separator, default version, x.x.x pattern, group keys.
- Attribute — AttributeType, AttributeGroup and the (name, type) Attribute value.
- Definition — StreamDefinition with validation, mutators and duplicate-detection equality.
- IDs — stream id generation and splitting.
- Hashing/Serde — canonical JSON, schema fingerprints and the JSON converter.

## Notes
- Zero‑IO policy: stdlib + pydantic only; no file/network IO.
- Stream ids are always derived (``<name>-<version>``), never supplied.
- Equality ignores stream id and display metadata (nick name, description, tags).

## Downstream usage
- databridge.io — reads/writes definition files and validates polars event frames.
- databridge.cli — inspects and compares definition files.

## Examples
```python
from databridge.core import AttributeType, StreamDefinition, to_json

d = StreamDefinition("Temperature", "1.0.0")
d.add_meta_data("sensorId", AttributeType.STRING)
d.add_payload_data("value", AttributeType.DOUBLE)
d.stream_id  # 'Temperature-1.0.0'
to_json(d)
```
"""

from __future__ import annotations

from .attribute import Attribute, AttributeGroup, AttributeType
from .definition import StreamDefinition
from .errors import MalformedStreamDefinition, StreamDefinitionConversionError
from .hashing import schema_fingerprint
from .ids import generate_stream_id, stream_name_from_id, stream_version_from_id
from .serde import from_dict, from_json, to_dict, to_json

__all__ = [
    "Attribute",
    "AttributeGroup",
    "AttributeType",
    "StreamDefinition",
    "MalformedStreamDefinition",
    "StreamDefinitionConversionError",
    "schema_fingerprint",
    "generate_stream_id",
    "stream_name_from_id",
    "stream_version_from_id",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
