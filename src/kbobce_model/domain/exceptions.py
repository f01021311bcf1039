"""Error types raised by the KBO/BCE model."""

from typing import Any


class KboModelError(Exception):
    """Base exception for the kbobce_model package."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', details={self.details})"


class ValidationError(KboModelError, ValueError):
    """Raised when a constructor or builder receives missing or malformed data.

    Lenient ``parse`` factories never raise this; they return ``None`` instead.
    """
