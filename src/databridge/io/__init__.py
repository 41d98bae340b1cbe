"""
databridge.io — Definition files and event-frame validation.

## Responsibilities
- Load runtime settings (env > TOML > defaults).
- Read/write one JSON document per stream definition with atomic renames.
- Flatten definitions into ordered Polars schemas and validate event frames.
- Keep databridge.core as the single source of truth for identity, attributes and JSON shape.

## Public API
- BridgeSettings — configuration for IO behavior.
- definition_path / write_definition / read_definition / list_definitions — definition files.
- frame_schema / validate_frame — Polars schema building and validation.

## Import DAG discipline
- Depends only on stdlib, polars, and databridge.core.*.
- MUST NOT import databridge.cli.

## Examples
```python
from databridge.core import AttributeType, StreamDefinition
from databridge.io import BridgeSettings, read_definition, write_definition

settings = BridgeSettings(root_dir="defs")
d = StreamDefinition("Temperature", "1.0.0")
d.add_payload_data("value", AttributeType.DOUBLE)
path = write_definition(settings, d)  # defs/Temperature-1.0.0.json
read_definition(path) == d  # True
```
"""

from __future__ import annotations

from .config import BridgeSettings
from .errors import IoConfigError, IoError, IoReadError, IoSchemaError, IoWriteError
from .files import definition_path, list_definitions, read_definition, write_definition
from .validate import frame_schema, validate_frame

__all__ = [
    "BridgeSettings",
    "IoError",
    "IoConfigError",
    "IoReadError",
    "IoSchemaError",
    "IoWriteError",
    "definition_path",
    "list_definitions",
    "read_definition",
    "write_definition",
    "frame_schema",
    "validate_frame",
]
