"""
Stream id helpers.

A stream id is the canonical lookup key ``<name>-<version>``. Registries treat it
as opaque; these helpers exist for code that needs to build or take one apart.
This module is zero-IO.

Examples:
    >>> from databridge.core.ids import generate_stream_id, stream_name_from_id
    >>> generate_stream_id("Temperature", "1.0.0")
    'Temperature-1.0.0'
    >>> stream_name_from_id("Temperature-1.0.0")
    'Temperature'
"""

from __future__ import annotations

from typing import NewType

from .constants import STREAM_NAME_VERSION_SPLITTER
from .errors import MalformedStreamDefinition

__all__ = [
    "StreamId",
    "generate_stream_id",
    "stream_name_from_id",
    "stream_version_from_id",
]

StreamId = NewType("StreamId", str)


def generate_stream_id(name: str, version: str) -> StreamId:
    """Join name and version with the reserved separator."""
    return StreamId(f"{name}{STREAM_NAME_VERSION_SPLITTER}{version}")


def _split(stream_id: str) -> tuple[str, str]:
    name, sep, version = stream_id.rpartition(STREAM_NAME_VERSION_SPLITTER)
    if not sep:
        raise MalformedStreamDefinition(
            f"stream id {stream_id!r} does not contain '{STREAM_NAME_VERSION_SPLITTER}'"
        )
    return name, version


def stream_name_from_id(stream_id: str) -> str:
    """
    Extract the stream name from an id.

    Args:
        stream_id (str): Id of the form ``<name>-<version>``.

    Returns:
        str: Everything before the last separator.

    Raises:
        MalformedStreamDefinition: If the id contains no separator.
    """
    return _split(stream_id)[0]


def stream_version_from_id(stream_id: str) -> str:
    """
    Extract the stream version from an id.

    Args:
        stream_id (str): Id of the form ``<name>-<version>``.

    Returns:
        str: Everything after the last separator.

    Raises:
        MalformedStreamDefinition: If the id contains no separator.
    """
    return _split(stream_id)[1]
