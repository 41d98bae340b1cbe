"""
Lightweight typing aliases used across the core converter and IO layer.

This module contains no runtime logic and is zero-IO.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "JsonDict",
]

# JSON-like mapping alias. Kept intentionally broad for serde boundaries.
JsonDict = dict[str, Any]
