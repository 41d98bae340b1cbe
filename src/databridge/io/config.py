"""
Configuration for the databridge.io module.

Defines BridgeSettings, a frozen dataclass carrying runtime configuration for
definition files and event-frame validation.

Source of truth
- Stream identity and group keys come from databridge.core.constants.
- Column ordering of frames follows the attribute group order of the definition.

Import DAG discipline
- Depends only on stdlib and databridge.core.
- Does not import databridge.cli.

Notes
- Precedence: env (DATABRIDGE_*) > TOML (databridge.toml or [tool.databridge.io]) > defaults.
- Invalid values in env/TOML are ignored; `validate()` guards explicit construction.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .errors import IoConfigError

__all__ = [
    "BridgeSettings",
]


@dataclass(frozen=True)
class BridgeSettings:
    """
    Runtime settings for the databridge.io layer.

    Attributes:
        root_dir (str): Directory holding one ``<stream_id>.json`` file per definition.
        indent (int): JSON indent for written files; 0 writes compact JSON.
        strict_frames (bool): If True, reject frame columns not declared by the definition.
        meta_prefix (str): Column prefix for metadata attributes in frame schemas.
        correlation_prefix (str): Column prefix for correlation attributes in frame schemas.

    Examples:
        >>> from databridge.io import BridgeSettings
        >>> BridgeSettings(root_dir="defs", indent=4)  # doctest: +ELLIPSIS
        BridgeSettings(...)
    """

    root_dir: str = "definitions"
    indent: int = 2
    strict_frames: bool = True
    meta_prefix: str = "meta_"
    correlation_prefix: str = "correlation_"

    def validate(self) -> BridgeSettings:
        """
        Check settings invariants.

        Returns:
            BridgeSettings: self, for chaining.

        Raises:
            IoConfigError: If indent is negative or a prefix is empty or equal to the other.
        """
        if self.indent < 0:
            raise IoConfigError(f"indent must be >= 0, got {self.indent}")
        if not self.meta_prefix or not self.correlation_prefix:
            raise IoConfigError("column prefixes must be non-empty")
        if self.meta_prefix == self.correlation_prefix:
            raise IoConfigError(
                f"meta_prefix and correlation_prefix must differ (both {self.meta_prefix!r})"
            )
        return self

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: BridgeSettings, cfg: dict[str, Any] | None) -> BridgeSettings:
        """Apply a loose config mapping onto BridgeSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _bool(v: Any) -> bool:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            if isinstance(v, str):
                return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
            return False

        if "root_dir" in cfg and isinstance(cfg["root_dir"], str) and cfg["root_dir"]:
            s = replace(s, root_dir=cfg["root_dir"])

        if "indent" in cfg:
            try:
                indent = int(cfg["indent"])
            except (TypeError, ValueError):
                indent = s.indent
            if indent >= 0:
                s = replace(s, indent=indent)

        if "strict_frames" in cfg:
            s = replace(s, strict_frames=_bool(cfg["strict_frames"]))

        for key in ("meta_prefix", "correlation_prefix"):
            if key in cfg and isinstance(cfg[key], str) and cfg[key]:
                s = replace(s, **{key: cfg[key]})

        return s

    @classmethod
    def from_env(
        cls, base: BridgeSettings | None = None, prefix: str = "DATABRIDGE_"
    ) -> BridgeSettings:
        """
        Build BridgeSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - DATABRIDGE_ROOT_DIR
            - DATABRIDGE_INDENT
            - DATABRIDGE_STRICT_FRAMES (1/0/true/false/yes/no/on/off)
            - DATABRIDGE_META_PREFIX
            - DATABRIDGE_CORRELATION_PREFIX
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for key in ("root_dir", "indent", "strict_frames", "meta_prefix", "correlation_prefix"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> BridgeSettings:
        """
        Build BridgeSettings from a TOML file.

        Search order when `path` is None:
            1) ./databridge.toml (with either top-level [io] or direct keys)
            2) ./pyproject.toml under [tool.databridge.io]

        Returns defaults if no file is present or none of them parse.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "databridge.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("databridge", {}).get("io", {}) if isinstance(tool, dict) else None
            elif isinstance(data.get("io"), dict):
                cfg = data["io"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> BridgeSettings:
        """
        Load BridgeSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (databridge.toml, pyproject.toml).

        Returns:
            BridgeSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s.validate()
