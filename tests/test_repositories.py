"""Unit tests for repository implementations."""

from __future__ import annotations

from datetime import date, timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from pocketledger.infra.repositories import (
    SQLModelCategoryRepository,
    SQLModelExpenseRepository,
)
from pocketledger.models import Category, Expense


@pytest.fixture
def categories(session_factory):
    return SQLModelCategoryRepository(session_factory)


@pytest.fixture
def expenses(session_factory):
    return SQLModelExpenseRepository(session_factory)


@pytest.fixture
def food(categories):
    return categories.create(Category(name="Food", color="#f00", icon="F"))


def test_category_create_and_list(categories):
    created = categories.create(Category(name="Travel", color="#0f0", icon="T"))

    [fetched] = categories.list_all()

    assert fetched.id == created.id
    assert fetched.name == "Travel"
    assert fetched.created_at is not None


def test_create_many_inserts_in_given_order(categories):
    rows = categories.create_many(
        Category(name=name, color="#000", icon=name[0]) for name in ("Zeta", "Alfa", "Beta")
    )

    assert [row.id for row in rows] == [1, 2, 3]
    assert [c.name for c in categories.list_all()] == ["Alfa", "Beta", "Zeta"]


def test_created_at_defaults_to_utc():
    category = Category(name="A", color="#000", icon="a")
    expense = Expense(amount=1.0, description="x", category_id=1, date=date(2024, 1, 1))

    for stamp in (category.created_at, expense.created_at):
        assert stamp.tzinfo is not None
        assert stamp.utcoffset() == timedelta(0)


def test_category_count(categories):
    assert categories.count() == 0
    categories.create(Category(name="A", color="#000", icon="a"))
    assert categories.count() == 1


def test_expense_foreign_key_enforced(expenses):
    with pytest.raises(IntegrityError):
        expenses.create(Expense(amount=1.0, description="x", category_id=77, date=date(2024, 1, 1)))


def test_total_amount_zero_when_empty(expenses):
    assert expenses.total_amount() == 0.0


def test_category_totals_left_join(categories, expenses, food):
    empty = categories.create(Category(name="Empty", color="#fff", icon="E"))
    expenses.create(Expense(amount=2.5, description="a", category_id=food.id, date=date(2024, 1, 1)))
    expenses.create(Expense(amount=1.5, description="b", category_id=food.id, date=date(2024, 1, 2)))

    rows = expenses.category_totals()

    assert [(c.name, total) for c, total in rows] == [("Food", 4.0), (empty.name, 0.0)]


def test_list_all_limit_and_order(expenses, food):
    for day in (5, 1, 3):
        expenses.create(
            Expense(amount=1.0, description=f"d{day}", category_id=food.id, date=date(2024, 1, day))
        )

    assert [e.description for e in expenses.list_all()] == ["d5", "d3", "d1"]
    assert [e.description for e in expenses.list_all(limit=1)] == ["d5"]


def test_date_is_stored_as_iso_text(session_factory, expenses, food):
    expenses.create(Expense(amount=1.0, description="x", category_id=food.id, date=date(2024, 2, 29)))

    with session_factory() as session:
        stored = session.connection().exec_driver_sql("SELECT date FROM expenses").scalar_one()
    assert stored == "2024-02-29"
