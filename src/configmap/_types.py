"""Exception classes shared across the package.

Reads never raise: a missing key or path is reported as ``None``. These
exceptions are reserved for boundary errors such as converting a document
that holds values with no matching variant.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base exception for configmap errors."""


class ConversionError(ConfigError, ValueError):
    """Raised when an external document cannot be mapped onto config values."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        location = f"'{path}'" if path else "the document root"
        super().__init__(f"Cannot convert value at {location}: {reason}")
