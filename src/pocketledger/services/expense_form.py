"""Expense input validation helpers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..errors import ValidationError

MAX_DESCRIPTION_LENGTH = 255


@dataclass(slots=True)
class ExpenseForm:
    """Represents expense input prior to validation."""

    amount: Decimal | None = None
    description: str = ""
    category_id: Optional[int] = None
    date: date | None = None
    errors: dict[str, list[str]] = field(default_factory=dict, init=False)
    raw_data: dict[str, str] = field(default_factory=dict, init=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ExpenseForm:
        """Create a form populated from user supplied data."""

        form = cls()
        form.load(data)
        return form

    def load(self, data: Mapping[str, Any]) -> None:
        """Bind incoming mapping data to the form state."""

        keys = ("amount", "description", "category_id", "date")
        self.raw_data = {}
        for key in keys:
            value = data.get(key)
            if value is None:
                value_str = ""
            elif isinstance(value, str):
                value_str = value
            else:
                value_str = str(value)
            self.raw_data[key] = value_str

        self.description = self.raw_data.get("description", "").strip()

    def validate(self) -> bool:
        """Validate the bound data and populate typed attributes."""

        self.errors.clear()

        amount_raw = self.raw_data.get("amount", "").strip()
        self.amount = None
        if not amount_raw:
            self._add_error("amount", "Amount is required.")
        else:
            # Accept "12,50" as typed on a Spanish keyboard
            if "," in amount_raw and "." not in amount_raw:
                amount_raw = amount_raw.replace(",", ".")
            try:
                parsed_amount = Decimal(amount_raw)
            except InvalidOperation:
                self._add_error("amount", "Enter a valid number for the amount.")
            else:
                if not parsed_amount.is_finite():
                    self._add_error("amount", "Enter a valid number for the amount.")
                elif parsed_amount < 0:
                    self._add_error("amount", "Amount cannot be negative.")
                elif parsed_amount.normalize().as_tuple().exponent < -2:
                    self._add_error("amount", "Amount can have at most two decimal places.")
                else:
                    self.amount = parsed_amount

        self.description = self.description.strip()
        if not self.description:
            self._add_error("description", "Description is required.")
        elif len(self.description) > MAX_DESCRIPTION_LENGTH:
            self._add_error(
                "description",
                f"Description must be {MAX_DESCRIPTION_LENGTH} characters or fewer.",
            )

        category_raw = self.raw_data.get("category_id", "").strip()
        self.category_id = None
        if not category_raw:
            self._add_error("category_id", "Category is required.")
        else:
            try:
                parsed_category = int(category_raw)
            except ValueError:
                self._add_error("category_id", "Category must be a whole number.")
            else:
                if parsed_category <= 0:
                    self._add_error("category_id", "Category must be greater than zero.")
                else:
                    self.category_id = parsed_category

        date_raw = self.raw_data.get("date", "").strip()
        self.date = None
        if not date_raw:
            self._add_error("date", "Date is required.")
        else:
            try:
                self.date = datetime.strptime(date_raw, "%Y-%m-%d").date()
            except ValueError:
                self._add_error("date", "Enter a valid date (YYYY-MM-DD).")

        return not self.errors

    def cleaned(self) -> dict[str, Any]:
        """Return validated values ready for ``LedgerStore.add_expense``.

        Raises ValidationError when the form does not validate.
        """

        if not self.validate():
            raise ValidationError(self.errors)
        return {
            "amount": self.amount,
            "description": self.description,
            "category_id": self.category_id,
            "date": self.date,
        }

    def _add_error(self, field: str, message: str) -> None:
        """Accumulate validation errors for a specific field."""

        self.errors.setdefault(field, []).append(message)
