"""Service module exports."""

from . import demo_seed, expense_form, export_csv, ledger_store, money, summary

__all__ = [
    "demo_seed",
    "expense_form",
    "export_csv",
    "ledger_store",
    "money",
    "summary",
]
