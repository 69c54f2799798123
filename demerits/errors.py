from __future__ import annotations


class DemeritsError(Exception):
    """Base class for registry errors."""


class ValidationFailure(DemeritsError, ValueError):
    """Raised when input data or a requested change breaks a registry rule."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class StoreError(DemeritsError):
    """Raised when a store file cannot be read or written."""


__all__ = ["DemeritsError", "StoreError", "ValidationFailure"]
