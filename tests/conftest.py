"""Pytest configuration and shared fixtures for PocketLedger tests.

Every test gets its own temporary data directory, so the ledger database,
logs and exports never touch the real application data.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

import pytest

from pocketledger.config import TestingConfig
from pocketledger.infra.database import bootstrap_database
from pocketledger.services.ledger_store import LedgerStore


class FixedClock:
    """Callable clock returning a settable date."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def config(tmp_path) -> TestingConfig:
    """Configuration pointing at a throwaway data directory."""
    return TestingConfig(tmp_path / "data")


@pytest.fixture
def clock() -> FixedClock:
    """Clock pinned to 2024-02-15 (a leap-year February)."""
    return FixedClock(date(2024, 2, 15))


@pytest.fixture
def store(config, clock):
    """Initialized ledger store backed by a temporary SQLite file.

    Yields:
        LedgerStore: store seeded with the default categories
    """
    ledger = LedgerStore(config, clock=clock)
    ledger.initialize()
    yield ledger
    ledger.close()


@pytest.fixture
def session_factory(config):
    """Session factory over a freshly created schema, for repository tests."""
    engine, factory = bootstrap_database(config)
    yield factory
    engine.dispose()


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def category_ids(store) -> dict[str, int]:
    """Map of seeded category name to id."""
    return {c.name: c.id for c in store.list_categories()}


@pytest.fixture
def expense_factory(store, category_ids):
    """Factory for recording test expenses.

    Returns:
        Callable: Function that records an expense and returns its id
    """

    def _create_expense(
        amount: float | Decimal = 10.0,
        description: str = "Test expense",
        category: str = "Otros",
        on: date | None = None,
    ) -> int:
        return store.add_expense(
            amount=amount,
            description=description,
            category_id=category_ids[category],
            date=on or date(2024, 2, 10),
        )

    return _create_expense


# =============================================================================
# Assertion Helpers
# =============================================================================


def assert_money_equal(actual: Decimal, expected: str | Decimal) -> None:
    """Assert a monetary result exactly matches ``expected`` to the cent."""
    assert isinstance(actual, Decimal), f"expected Decimal, got {type(actual).__name__}"
    assert actual == Decimal(expected), f"{actual} != {expected}"


@pytest.fixture(autouse=True)
def _reset_pocketledger_logging():
    """Drop handlers installed by setup_logging so streams never outlive a test."""
    yield
    logger = logging.getLogger("pocketledger")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
