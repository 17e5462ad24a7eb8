"""Error types raised by the ledger store and its helpers."""

from __future__ import annotations

from collections.abc import Mapping


class LedgerError(Exception):
    """Base class for every error surfaced by PocketLedger."""


class StorageUnavailable(LedgerError):
    """The datastore could not be opened or its schema created.

    Fatal for the caller: the application should ask the user to reload.
    """


class NotInitialized(LedgerError):
    """An operation ran before ``initialize()`` completed or after ``close()``."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Ledger store is not initialized (called {operation}).")
        self.operation = operation


class ConstraintViolation(LedgerError):
    """A write was rejected by a schema constraint, e.g. an unknown category id."""


class ValidationError(LedgerError, ValueError):
    """User supplied expense input failed validation."""

    def __init__(self, errors: Mapping[str, list[str]]) -> None:
        self.errors = {field: list(messages) for field, messages in errors.items()}
        summary = "; ".join(
            f"{field}: {' '.join(messages)}" for field, messages in self.errors.items()
        )
        super().__init__(summary or "Invalid input.")
