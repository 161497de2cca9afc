"""Error definitions for the KMP trace engine."""

from __future__ import annotations


class KMPTraceError(Exception):
    """Base exception for all custom errors."""


class InputError(KMPTraceError):
    """Raised when a match request fails input validation."""

    message = "Invalid input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__


class EmptyPatternError(InputError):
    """Raised when the pattern is empty."""

    message = "Pattern cannot be empty"


class EmptyTextError(InputError):
    """Raised when the text is empty."""

    message = "Text cannot be empty"
