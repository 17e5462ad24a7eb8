"""Expense input validation tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from pocketledger.errors import ValidationError
from pocketledger.services.expense_form import ExpenseForm


def _valid(**overrides):
    data = {
        "amount": "12.50",
        "description": "  Supermercado ",
        "category_id": "1",
        "date": "2024-02-15",
    }
    data.update(overrides)
    return data


def test_valid_form_populates_typed_fields():
    form = ExpenseForm.from_mapping(_valid())

    assert form.validate()
    assert form.amount == Decimal("12.50")
    assert form.description == "Supermercado"
    assert form.category_id == 1
    assert form.date == date(2024, 2, 15)


def test_comma_decimal_separator_accepted():
    form = ExpenseForm.from_mapping(_valid(amount="7,25"))

    assert form.validate()
    assert form.amount == Decimal("7.25")


def test_zero_amount_allowed():
    form = ExpenseForm.from_mapping(_valid(amount="0"))

    assert form.validate()


def test_trailing_zeros_beyond_cents_allowed():
    form = ExpenseForm.from_mapping(_valid(amount="4.500"))

    assert form.validate()
    assert form.amount == Decimal("4.5")


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("amount", "", "Amount is required."),
        ("amount", "abc", "Enter a valid number for the amount."),
        ("amount", "NaN", "Enter a valid number for the amount."),
        ("amount", "-3", "Amount cannot be negative."),
        ("amount", "0.125", "Amount can have at most two decimal places."),
        ("description", "   ", "Description is required."),
        ("description", "x" * 256, "Description must be 255 characters or fewer."),
        ("category_id", "", "Category is required."),
        ("category_id", "food", "Category must be a whole number."),
        ("category_id", "0", "Category must be greater than zero."),
        ("date", "", "Date is required."),
        ("date", "15/02/2024", "Enter a valid date (YYYY-MM-DD)."),
        ("date", "2023-02-29", "Enter a valid date (YYYY-MM-DD)."),
    ],
)
def test_invalid_field(field, value, message):
    form = ExpenseForm.from_mapping(_valid(**{field: value}))

    assert not form.validate()
    assert form.errors == {field: [message]}


def test_missing_keys_report_every_field():
    form = ExpenseForm.from_mapping({})

    assert not form.validate()
    assert set(form.errors) == {"amount", "description", "category_id", "date"}


def test_non_string_values_are_coerced():
    form = ExpenseForm.from_mapping(
        {"amount": 3.5, "description": "Bus", "category_id": 2, "date": date(2024, 1, 2)}
    )

    assert form.validate()
    assert form.amount == Decimal("3.5")
    assert form.date == date(2024, 1, 2)


def test_cleaned_raises_validation_error():
    form = ExpenseForm.from_mapping(_valid(amount="-1"))

    with pytest.raises(ValidationError) as excinfo:
        form.cleaned()

    assert excinfo.value.errors == {"amount": ["Amount cannot be negative."]}
    assert "amount" in str(excinfo.value)


def test_cleaned_values_feed_the_store(store, category_ids):
    form = ExpenseForm.from_mapping(_valid(category_id=str(category_ids["Salud"])))

    expense_id = store.add_expense(**form.cleaned())

    [expense] = store.list_expenses_by_category(category_ids["Salud"])
    assert expense.id == expense_id
    assert expense.description == "Supermercado"
