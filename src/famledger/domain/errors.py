"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class StorageError(Exception):
    """Ledger storage is unavailable, unwritable or corrupt.

    The message is safe to show to the caller; the underlying driver error
    is chained as ``__cause__``.
    """


MISSING_FIELD = "missing field"
INVALID_AMOUNT = "invalid amount"
INVALID_ACTION = "invalid action"

SAVE_FAILED = "Failed to save transaction"
READ_FAILED = "Failed to read transactions"
STORAGE_UNAVAILABLE = "Ledger storage is unavailable"
SUMMARY_FAILED = "Failed to compute summary"
