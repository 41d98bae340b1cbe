"""
Custom exceptions for the databridge.io module.

Purpose
- Provide IO-layer specific error types that map cleanly to responsibilities in databridge.io.
- Keep databridge.core as the source of truth for identity/conversion errors
  (see databridge.core.errors).

Source of truth and boundaries
- MalformedStreamDefinition and StreamDefinitionConversionError are raised by the core.
- databridge.io raises Io* errors for filesystem/settings/frame concerns:
  - IoConfigError: invalid or unsupported configuration.
  - IoSchemaError: event frame failed validation against a StreamDefinition.
  - IoReadError: a definition file is missing or unreadable.
  - IoWriteError: atomic write path failed (tmp write/rename).

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for IO-related errors in databridge.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from databridge.core errors.
    """


class IoConfigError(IoError):
    """
    Raised when IO configuration is invalid or unsupported.

    Examples:
        - Negative JSON indent
        - Empty column prefix
    """


class IoSchemaError(IoError):
    """
    Raised when a DataFrame fails validation against a StreamDefinition.

    Notes:
        Scalar columns may be safely cast prior to raising.
    """


class IoReadError(IoError):
    """Raised when a definition file is missing or cannot be read."""


class IoWriteError(IoError):
    """
    Raised when a definition write fails to complete atomically.

    Notes:
        The write path is tmp json → os.replace(tmp, final). Failures at any step
        surface as IoWriteError (with best-effort cleanup of tmp files).
    """
