"""
.. Custom Exceptions
"""

from __future__ import annotations


class CrtError(Exception):
    """Exception baseclass. Raised for generic errors."""


class ArgumentMissing(CrtError):
    """Raised when no image source is given."""


class FileOpenError(CrtError):
    """Raised when an image source cannot be opened or downloaded."""


class DecodeError(CrtError):
    """Raised when an image source is not in a supported format or is corrupt."""


class EncodeError(CrtError):
    """Raised when the sixel bitstream cannot be produced or written."""


class ConfigError(CrtError):
    """Raised when a config file cannot be read or parsed."""
