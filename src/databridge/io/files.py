"""
Definition files for databridge.io (file protocol baseline).

Layout
- One JSON document per definition at ``<root_dir>/<stream_id>.json``.
- Documents are produced by databridge.core.serde and read back through the
  validating converter, so a file can never yield a definition with a
  caller-supplied stream id.

Write path
- serialize JSON → write "<final>.tmp" → os.replace(tmp, final) on the same filesystem.

Notes
- This is a convenience store for tooling and tests, not a registry: no locking,
  no duplicate detection across files. Callers compare definitions with ``==``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from databridge.core.definition import StreamDefinition
from databridge.core.serde import from_json, to_json

from .config import BridgeSettings
from .errors import IoReadError, IoWriteError

__all__ = [
    "definition_path",
    "write_definition",
    "read_definition",
    "list_definitions",
]

logger = logging.getLogger(__name__)

_SUFFIX = ".json"


def definition_path(settings: BridgeSettings, stream_id: str) -> Path:
    """
    Compute the file path for a stream id.

    Args:
        settings (BridgeSettings): Settings providing root_dir.
        stream_id (str): Derived stream id (``<name>-<version>``).

    Returns:
        Path: ``<root_dir>/<stream_id>.json``.
    """
    return Path(settings.root_dir) / f"{stream_id}{_SUFFIX}"


def write_definition(settings: BridgeSettings, definition: StreamDefinition) -> Path:
    """
    Persist a definition atomically.

    Args:
        settings (BridgeSettings): Layout and JSON indent.
        definition (StreamDefinition): Definition to write; overwrites an existing file.

    Returns:
        Path: Final path written.

    Raises:
        IoWriteError: If the stream id would place the file outside root_dir,
            or the tmp write or rename fails.
    """
    final_path = definition_path(settings, definition.stream_id)
    if final_path.resolve().parent != Path(settings.root_dir).resolve():
        raise IoWriteError(
            f"stream id {definition.stream_id!r} does not map to a file directly under "
            f"{settings.root_dir!r}"
        )
    tmp_path = final_path.with_name(final_path.name + ".tmp")
    payload = to_json(definition, indent=settings.indent or None)
    try:
        final_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(payload + "\n", encoding="utf-8")
        os.replace(tmp_path, final_path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise IoWriteError(f"failed to write definition {definition.stream_id!r}: {exc}") from exc
    logger.debug("wrote definition %s to %s", definition.stream_id, final_path)
    return final_path


def read_definition(path: str | os.PathLike[str]) -> StreamDefinition:
    """
    Load a definition from a JSON file.

    Args:
        path (str | os.PathLike[str]): File to read.

    Returns:
        StreamDefinition: Validated definition.

    Raises:
        IoReadError: If the file is missing, unreadable, or not UTF-8.
        databridge.core.errors.MalformedStreamDefinition: If the document is invalid.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IoReadError(f"cannot read definition file {str(p)!r}: {exc}") from exc
    logger.debug("read definition file %s", p)
    return from_json(text)


def list_definitions(settings: BridgeSettings) -> list[StreamDefinition]:
    """
    Load every definition stored under root_dir.

    Args:
        settings (BridgeSettings): Settings providing root_dir.

    Returns:
        list[StreamDefinition]: Definitions ordered by file name; [] if root_dir does not exist.
    """
    root = Path(settings.root_dir)
    if not root.is_dir():
        return []
    return [read_definition(p) for p in sorted(root.glob(f"*{_SUFFIX}"))]
