"""Exceptions raised by the charting package."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a color set or palette definition is rejected."""

    def __init__(self, errors: tuple[str, ...]) -> None:
        """Initialize the error.

        Args:
            errors: Human-readable validation errors that caused the rejection.
        """

        super().__init__("Invalid chart color configuration:\n" + "\n".join(errors))
        self.errors = errors
