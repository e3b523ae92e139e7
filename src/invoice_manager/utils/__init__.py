"""Utility functions shared across the Invoice Manager package."""

from invoice_manager.utils.formatting import (
    amount_in_words,
    calculate_due_date,
    format_currency,
    format_date,
    format_date_for_form,
    format_number,
    number_to_words,
    parse_currency,
    parse_iso_date,
    truncate,
)
from invoice_manager.utils.invoice_helpers import (
    add_item,
    compute_total,
    create_default,
    line_total,
    remove_item,
    to_list_item,
    update_invoice,
    update_item,
    update_party,
)

__all__ = [
    "add_item",
    "amount_in_words",
    "calculate_due_date",
    "compute_total",
    "create_default",
    "format_currency",
    "format_date",
    "format_date_for_form",
    "format_number",
    "line_total",
    "number_to_words",
    "parse_currency",
    "parse_iso_date",
    "remove_item",
    "to_list_item",
    "truncate",
    "update_invoice",
    "update_item",
    "update_party",
]
