"""Exception classes for linemark.

Rendering never raises. These exceptions cover construction-time mistakes
(registry building, config loading) only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linemark.tokens import Marker


class LinemarkError(Exception):
    """Base exception for all linemark errors.

    Subclass this for specific error categories.
    """

    pass


class RegistryError(LinemarkError):
    """Error while building a tag registry.

    Raised by TagRegistryBuilder when a registration conflicts with an
    existing one or is malformed.
    """

    def __init__(self, message: str, marker: Marker | None = None) -> None:
        """Initialize registry error.

        Args:
            message: Description of the problem
            marker: Marker being registered (optional)
        """
        self.message = message
        self.marker = marker

        prefix = f"Marker '{marker.name}': " if marker is not None else ""
        super().__init__(f"{prefix}{message}")


class ConfigError(LinemarkError):
    """Error in render configuration values."""

    def __init__(self, key: str, message: str) -> None:
        """Initialize config error.

        Args:
            key: Name of the offending config key
            message: Description of the error
        """
        self.key = key
        super().__init__(f"Config '{key}': {message}")
