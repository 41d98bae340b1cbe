"""
Stream definition: a named, versioned event schema.

A StreamDefinition owns the stream identity (name, version, derived stream id),
optional display metadata (nick name, description, tags), and three ordered
attribute groups (metadata, correlation data, payload data).

Responsibilities
- Validate name/version at construction (reserved separator, x.x.x version).
- Derive the stream id once; it is never taken from the caller.
- Build the schema incrementally through add_* mutators.
- Compare definitions for duplicate detection (schema shape, not display metadata).

Notes
- Groups and tags stay None until their first element is added. Equality and
  hashing treat None and [] as the same schema.
- Definitions are not synchronized. Construct fully, then publish and stop mutating.
- Textual form is the JSON document from databridge.core.serde.

Examples
--------
>>> from databridge.core.attribute import AttributeType
>>> from databridge.core.definition import StreamDefinition
>>> d = StreamDefinition("Temperature", "1.0.0")
>>> d.stream_id
'Temperature-1.0.0'
>>> d.add_payload_data("value", AttributeType.DOUBLE)
>>> d == StreamDefinition("Temperature", "1.0.0")
False
"""

from __future__ import annotations

import warnings
from collections.abc import Sequence

from .attribute import Attribute, AttributeGroup, AttributeType, attribute_group_from_key
from .constants import DEFAULT_STREAM_VERSION, STREAM_NAME_VERSION_SPLITTER, VERSION_PATTERN
from .errors import MalformedStreamDefinition
from .ids import generate_stream_id

__all__ = [
    "StreamDefinition",
]


def _normalized(group: Sequence[Attribute] | None) -> tuple[Attribute, ...]:
    # None and [] describe the same (empty) schema section.
    return tuple(group) if group else ()


class StreamDefinition:
    """
    Named, versioned stream schema.

    Attributes:
        nick_name (str | None): Optional display name.
        description (str | None): Optional free-text description.
        tags (list[str] | None): Ordered tags; None until the first add_tag.
        meta_data (list[Attribute] | None): Routing metadata attributes.
        correlation_data (list[Attribute] | None): Causal-correlation attributes.
        payload_data (list[Attribute] | None): Event content attributes.

    Args:
        name (str): Stream family name.
        version (str | None): x.x.x version. When omitted, no validation runs
            and the version defaults to "1.0.0".
        stream_id (str | None): Deprecated. Accepted for backward compatibility
            and discarded; the id is always derived from name and version.

    Raises:
        MalformedStreamDefinition: When a version is given and the name or version
            contains '-', or the version is not x.x.x.
    """

    def __init__(self, name: str, version: str | None = None, stream_id: str | None = None) -> None:
        self._version: str = DEFAULT_STREAM_VERSION
        if stream_id is not None:
            warnings.warn(
                "stream_id is ignored; stream ids are always generated as <name>-<version>",
                DeprecationWarning,
                stacklevel=2,
            )
        if version is not None:
            self._validate(name, version)
            self._version = version
        self._name: str = name

        self.nick_name: str | None = None
        self.description: str | None = None
        self.tags: list[str] | None = None
        self.meta_data: list[Attribute] | None = None
        self.correlation_data: list[Attribute] | None = None
        self.payload_data: list[Attribute] | None = None

        self._stream_id: str = self._generate_stream_id()

    @staticmethod
    def _validate(name: str, version: str) -> None:
        if STREAM_NAME_VERSION_SPLITTER in name:
            raise MalformedStreamDefinition(
                f"name {name!r} cannot contain '{STREAM_NAME_VERSION_SPLITTER}'"
            )
        if STREAM_NAME_VERSION_SPLITTER in version:
            raise MalformedStreamDefinition(
                f"version {version!r} cannot contain '{STREAM_NAME_VERSION_SPLITTER}'"
            )
        if not VERSION_PATTERN.fullmatch(version):
            raise MalformedStreamDefinition(
                f"version {version!r} does not adhere to the format x.x.x"
            )

    def _generate_stream_id(self) -> str:
        return generate_stream_id(self._name, self._version)

    @property
    def name(self) -> str:
        return self._name

    @property
    def version(self) -> str:
        return self._version

    @property
    def stream_id(self) -> str:
        """Canonical ``<name>-<version>`` lookup key (derived, read-only)."""
        return self._stream_id

    def attribute_list_for_key(self, key: AttributeGroup | str) -> list[Attribute] | None:
        """
        Return the attribute group addressed by key.

        Args:
            key (AttributeGroup | str): AttributeGroup member or one of the literal
                keys "metaData", "correlationData", "payloadData".

        Returns:
            list[Attribute] | None: The live group list (None if never populated),
            or None when the key is not recognized.
        """
        group = attribute_group_from_key(key)
        if group is AttributeGroup.META_DATA:
            return self.meta_data
        if group is AttributeGroup.CORRELATION_DATA:
            return self.correlation_data
        if group is AttributeGroup.PAYLOAD_DATA:
            return self.payload_data
        return None

    def add_tag(self, tag: str) -> None:
        if self.tags is None:
            self.tags = []
        self.tags.append(tag)

    def add_meta_data(self, name: str, type: AttributeType | str) -> None:
        if self.meta_data is None:
            self.meta_data = []
        self.meta_data.append(Attribute(name, type))

    def add_correlation_data(self, name: str, type: AttributeType | str) -> None:
        if self.correlation_data is None:
            self.correlation_data = []
        self.correlation_data.append(Attribute(name, type))

    def add_payload_data(self, name: str, type: AttributeType | str) -> None:
        if self.payload_data is None:
            self.payload_data = []
        self.payload_data.append(Attribute(name, type))

    # Stream id, nick name, description and tags are excluded: equality detects
    # the same schema registered twice, whatever its display metadata.
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, StreamDefinition):
            return NotImplemented
        return (
            self._name == other._name
            and self._version == other._version
            and _normalized(self.meta_data) == _normalized(other.meta_data)
            and _normalized(self.correlation_data) == _normalized(other.correlation_data)
            and _normalized(self.payload_data) == _normalized(other.payload_data)
        )

    def __hash__(self) -> int:
        result = hash(self._name)
        result = 31 * result + hash(self._version)
        for group in (self.meta_data, self.correlation_data, self.payload_data):
            normalized = _normalized(group)
            result = 31 * result + (hash(normalized) if normalized else 0)
        return result

    def __str__(self) -> str:
        # serde imports this module; resolve the converter lazily.
        from .serde import to_json

        return to_json(self)

    def __repr__(self) -> str:
        return f"StreamDefinition(name={self._name!r}, version={self._version!r})"
