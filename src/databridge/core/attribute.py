"""
Attribute value types and attribute-group keys for stream definitions.

Defines the scalar attribute types a stream schema may declare, the frozen
(name, type) Attribute value, and the three attribute groups (metadata,
correlation data, payload data) addressable by their literal wire keys.

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - AttributeType values (wire/JSON): UPPER case, e.g. "STRING"
   - AttributeGroup values (wire/JSON): camelCase literal keys, e.g. "payloadData"

2) Shape only:
   - Attributes describe a field; they never carry or interpret values.

Examples
--------
>>> from databridge.core.attribute import Attribute, AttributeType, attribute_type_from_value
>>> attribute_type_from_value("string") == AttributeType.STRING
True
>>> Attribute("temperature", AttributeType.DOUBLE) == Attribute("temperature", "double")
True
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import CORRELATION_DATA, META_DATA, PAYLOAD_DATA
from .errors import MalformedStreamDefinition

__all__ = [
    "AttributeType",
    "AttributeGroup",
    "Attribute",
    "attribute_type_from_value",
    "attribute_group_from_key",
]


class AttributeType(Enum):
    """
    Scalar types an attribute may declare.

    Serialized values appear in:
      - definition documents (attribute "type" field)
      - frame schemas built by databridge.io.validate
    """

    INT = "INT"
    LONG = "LONG"
    BOOL = "BOOL"
    STRING = "STRING"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    OBJECT = "OBJECT"


class AttributeGroup(Enum):
    """
    The three ordered attribute groups of a stream schema.

    Notes:
      Values are the literal keys used by callers that address a group by
      string, and by the JSON document produced in databridge.core.serde.
    """

    META_DATA = META_DATA
    CORRELATION_DATA = CORRELATION_DATA
    PAYLOAD_DATA = PAYLOAD_DATA


def attribute_type_from_value(value: AttributeType | str) -> AttributeType:
    """
    Normalize an attribute type token to an AttributeType.

    Args:
      value (AttributeType | str): Enum member or case-insensitive type name.

    Returns:
      AttributeType: Parsed attribute type.

    Raises:
      MalformedStreamDefinition: If the token does not name a known type.
    """
    if isinstance(value, AttributeType):
        return value
    token = (value or "").strip().upper() if isinstance(value, str) else ""
    try:
        return AttributeType(token)
    except ValueError as exc:
        allowed = [t.value for t in AttributeType]
        raise MalformedStreamDefinition(
            f"attribute type must be one of {allowed} (got {value!r})"
        ) from exc


def attribute_group_from_key(key: AttributeGroup | str) -> AttributeGroup | None:
    """
    Resolve a group key to an AttributeGroup.

    Args:
      key (AttributeGroup | str): Enum member or one of the exact literal keys
        "metaData", "correlationData", "payloadData".

    Returns:
      AttributeGroup | None: The group, or None for any unrecognized key.
    """
    if isinstance(key, AttributeGroup):
        return key
    try:
        return AttributeGroup(key)
    except ValueError:
        return None


@dataclass(frozen=True)
class Attribute:
    """
    Immutable (name, type) pair describing one schema field.

    Attributes:
        name (str): Field name, unique only within its group by convention.
        type (AttributeType): Scalar type; strings are normalized on construction.

    Raises:
        MalformedStreamDefinition: If type is not a known AttributeType.
    """

    name: str
    type: AttributeType

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", attribute_type_from_value(self.type))
