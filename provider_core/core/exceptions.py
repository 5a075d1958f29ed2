"""
Custom exception hierarchy for provider-core.

All exceptions inherit from ProviderCoreError, allowing callers to
catch every library-specific error with a single except clause.

Errors raised by a knowledge retriever are deliberately not wrapped:
they reach the caller exactly as the retriever raised them.
"""

from __future__ import annotations


class ProviderCoreError(Exception):
    """Base exception for all provider-core errors."""

    pass


class ValidationError(ProviderCoreError):
    """Raised when a model field fails validation.

    Attributes:
        field: Name of the field that failed validation
        value: The invalid value that was provided
        message: Human-readable explanation of the validation error

    Example:
        >>> KnowledgeBase(id="kb", name="Docs", document_count=99)
        >>> ValidationError: Invalid 'document_count': must be between 1 and 30 (got 99)
    """

    def __init__(self, field: str, value: object, message: str) -> None:
        self.field = field
        self.value = value
        self.message = message
        super().__init__(f"Invalid {field!r}: {message} (got {value!r})")

    def __repr__(self) -> str:
        return (
            f"ValidationError(field={self.field!r}, value={self.value!r}, message={self.message!r})"
        )


class ConfigurationError(ProviderCoreError):
    """Raised when a provider configuration is invalid or incomplete."""

    pass


class StorageError(ProviderCoreError):
    """Raised when rotation storage cannot be read or written.

    Example:
        >>> store = FileSystemRotationStore(path)
        >>> store.get("provider:openai:last_used_key")
        >>> StorageError: Invalid rotation data in /tmp/rotation.json: ...
    """

    pass


class ProviderHTTPError(ProviderCoreError):
    """Raised when a backend answers with an HTTP error status.

    Attributes:
        status_code: HTTP status returned by the backend
        detail: Parsed JSON error body when available, raw text otherwise
    """

    def __init__(self, status_code: int, detail: object) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail}")


class UnsupportedProviderError(ProviderCoreError):
    """Raised when no provider is registered under a requested id."""

    pass


__all__ = [
    "ProviderCoreError",
    "ValidationError",
    "ConfigurationError",
    "StorageError",
    "ProviderHTTPError",
    "UnsupportedProviderError",
]
