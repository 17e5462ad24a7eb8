"""PocketLedger: local expense ledger with spending summaries."""

from __future__ import annotations

from .config import BaseConfig, TestingConfig
from .errors import (
    ConstraintViolation,
    LedgerError,
    NotInitialized,
    StorageUnavailable,
    ValidationError,
)
from .services.ledger_store import LedgerStore

__all__ = [
    "BaseConfig",
    "ConstraintViolation",
    "LedgerError",
    "LedgerStore",
    "NotInitialized",
    "StorageUnavailable",
    "TestingConfig",
    "ValidationError",
]
