"""
Event-frame schemas and validation for databridge.io.

Purpose
- Flatten a StreamDefinition into an ordered Polars schema (one column per attribute).
- Validate Polars DataFrames of events against a definition with safe casting.

Column layout
- Metadata attributes first, named ``<meta_prefix><name>``.
- Correlation attributes next, named ``<correlation_prefix><name>``.
- Payload attributes last, named as declared.
- Order within each group follows the definition; it is the field order of any
  reader built from the schema.

Checks performed
- Every declared column present.
- When strict: no columns outside the declared set.
- Dtype compatibility: scalar columns are cast (strict casts, failures raise);
  OBJECT columns accept any dtype.

Notes
- Depends on polars and databridge.core; values are never interpreted beyond their dtype.
"""

from __future__ import annotations

import logging

import polars as pl

from databridge.core.attribute import Attribute, AttributeType
from databridge.core.definition import StreamDefinition

from .config import BridgeSettings
from .errors import IoSchemaError

__all__ = [
    "DTYPE_MAP",
    "frame_columns",
    "frame_schema",
    "validate_frame",
]

logger = logging.getLogger(__name__)

# Dtype instances, matching what pl.Schema and df.schema hold.
DTYPE_MAP: dict[AttributeType, object] = {
    AttributeType.INT: pl.Int32(),
    AttributeType.LONG: pl.Int64(),
    AttributeType.BOOL: pl.Boolean(),
    AttributeType.STRING: pl.Utf8(),
    AttributeType.FLOAT: pl.Float32(),
    AttributeType.DOUBLE: pl.Float64(),
    AttributeType.OBJECT: pl.Object(),
}


def frame_columns(
    definition: StreamDefinition, settings: BridgeSettings | None = None
) -> list[tuple[str, Attribute]]:
    """
    List (column name, attribute) pairs in frame order.

    Args:
        definition (StreamDefinition): Source schema.
        settings (BridgeSettings | None): Column prefixes; defaults when None.

    Returns:
        list[tuple[str, Attribute]]: Meta, correlation, then payload columns.

    Raises:
        IoSchemaError: If two attributes flatten to the same column name.
    """
    s = settings or BridgeSettings()
    cols: list[tuple[str, Attribute]] = []
    cols += [(s.meta_prefix + a.name, a) for a in definition.meta_data or ()]
    cols += [(s.correlation_prefix + a.name, a) for a in definition.correlation_data or ()]
    cols += [(a.name, a) for a in definition.payload_data or ()]

    seen: set[str] = set()
    for name, _ in cols:
        if name in seen:
            raise IoSchemaError(
                f"duplicate column {name!r} in frame schema for {definition.stream_id!r}"
            )
        seen.add(name)
    return cols


def frame_schema(definition: StreamDefinition, settings: BridgeSettings | None = None) -> pl.Schema:
    """
    Build the ordered Polars schema for a definition.

    Args:
        definition (StreamDefinition): Source schema.
        settings (BridgeSettings | None): Column prefixes; defaults when None.

    Returns:
        pl.Schema: Column name -> Polars dtype, in frame order.

    Examples:
        >>> from databridge.core import AttributeType, StreamDefinition
        >>> d = StreamDefinition("Temperature", "1.0.0")
        >>> d.add_meta_data("sensorId", AttributeType.STRING)
        >>> d.add_payload_data("value", AttributeType.DOUBLE)
        >>> list(frame_schema(d).names())
        ['meta_sensorId', 'value']
    """
    pairs = [(name, DTYPE_MAP[a.type]) for name, a in frame_columns(definition, settings)]
    return pl.Schema(pairs)  # type: ignore[arg-type]


def _cast(df: pl.DataFrame, col: str, target: object) -> pl.DataFrame:
    try:
        return df.with_columns(pl.col(col).cast(target, strict=True))  # type: ignore[arg-type]
    except pl.exceptions.PolarsError as exc:
        raise IoSchemaError(f"failed to cast column {col!r} to {target}: {exc}") from exc


def validate_frame(
    df: pl.DataFrame,
    definition: StreamDefinition,
    settings: BridgeSettings | None = None,
    *,
    strict: bool | None = None,
) -> pl.DataFrame:
    """
    Validate an event frame against a definition.

    Args:
        df (pl.DataFrame): Frame to validate.
        definition (StreamDefinition): Schema the events must follow.
        settings (BridgeSettings | None): Prefixes and default strictness.
        strict (bool | None): Reject undeclared columns; None uses settings.strict_frames.

    Returns:
        pl.DataFrame: Frame with declared columns cast and moved to frame order,
        followed by any extra columns (non-strict only).

    Raises:
        IoSchemaError: If declared columns are missing, extras are present under
            strict mode, or a column cannot be cast to its declared dtype.
    """
    s = settings or BridgeSettings()
    strict = s.strict_frames if strict is None else strict
    cols = frame_columns(definition, s)
    declared = [name for name, _ in cols]

    missing = [c for c in declared if c not in df.columns]
    if missing:
        raise IoSchemaError(f"missing required columns: {missing!r}")
    extras = [c for c in df.columns if c not in set(declared)]
    if strict and extras:
        raise IoSchemaError(f"unexpected columns present: {extras!r} (allowed={declared!r})")

    for name, attr in cols:
        if attr.type is AttributeType.OBJECT:
            continue
        expected = DTYPE_MAP[attr.type]
        if df.schema[name] != expected:
            df = _cast(df, name, expected)

    logger.debug(
        "validated %d rows against %s (%d columns)", df.height, definition.stream_id, len(declared)
    )
    return df.select([*declared, *extras])
