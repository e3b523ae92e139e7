"""Aggregate logic for invoices: totals, defaults and in-memory item edits."""

from __future__ import annotations

from dataclasses import fields, replace
from typing import Any, Callable

from invoice_manager import settings
from invoice_manager.lib import ids
from invoice_manager.lib.clock import Clock, SystemClock
from invoice_manager.models.invoice import (
    STATUS_DRAFT,
    BankDetails,
    CompanyInfo,
    Invoice,
    InvoiceItem,
    InvoiceListItem,
)
from invoice_manager.utils.formatting import calculate_due_date, format_date_for_form

_INVOICE_FIELDS = {f.name for f in fields(Invoice)} - {"id", "items"}
_ITEM_FIELDS = {f.name for f in fields(InvoiceItem)} - {"id"}
_PARTY_FIELDS = {f.name for f in fields(CompanyInfo)}
_PARTIES = {"from": "from_", "from_": "from_", "to": "to"}


def line_total(item: InvoiceItem) -> float:
    """Return quantity multiplied by unit price for a single item."""
    return item.quantity * item.unit_price


def compute_total(invoice: Invoice) -> float:
    """Sum the line totals of all items; an invoice without items totals 0."""
    return sum((line_total(item) for item in invoice.items), 0)


def to_list_item(invoice: Invoice) -> InvoiceListItem:
    """Project an invoice onto its list-view summary."""
    return InvoiceListItem(
        id=invoice.id,
        invoice_number=invoice.invoice_number,
        client_name=invoice.to.name,
        issued_date=invoice.issued_date,
        total=compute_total(invoice),
        status=invoice.status,
    )


def default_sender() -> CompanyInfo:
    """Return the configured organizational sender details."""
    return CompanyInfo(
        name=settings.SENDER_NAME,
        address=settings.SENDER_ADDRESS,
        email=settings.SENDER_EMAIL,
        phone=settings.SENDER_PHONE,
        website=settings.SENDER_WEBSITE,
    )


def create_default(
    clock: Clock | None = None,
    id_factory: Callable[[], str] = ids.new_id,
    invoice_number: str | None = None,
) -> Invoice:
    """
    Build a brand-new, unsaved invoice with default field values.

    The issued date is today according to clock and the due date is
    settings.DEFAULT_DUE_DAYS later. Recipient fields hold placeholder
    text for the user to overwrite.

    Args:
        clock: Source of "today"; wall-clock time when omitted.
        id_factory: Generator for the invoice id.
        invoice_number: Display number; ``"{year}-0"`` when omitted.
    """
    today = (clock or SystemClock()).today()
    issued = format_date_for_form(today)
    return Invoice(
        id=id_factory(),
        invoice_number=invoice_number or f"{today.year}-0",
        status=STATUS_DRAFT,
        issued_date=issued,
        due_date=calculate_due_date(issued, settings.DEFAULT_DUE_DAYS),
        late_fee=settings.DEFAULT_LATE_FEE,
        notes="",
        from_=default_sender(),
        to=CompanyInfo(
            name="Client Name",
            address="Client Address",
            email="client@example.com",
        ),
        items=[],
        bank_details=BankDetails(
            bank=settings.BANK_NAME,
            account_number=settings.BANK_ACCOUNT_NUMBER,
        ),
    )


def add_item(
    invoice: Invoice,
    description: str = "",
    quantity: float = 1,
    unit_price: float = 0,
    id_factory: Callable[[], str] = ids.new_id,
) -> InvoiceItem:
    """Append a new line item to the invoice and return it."""
    item = InvoiceItem(
        id=id_factory(),
        description=description,
        quantity=quantity,
        unit_price=unit_price,
    )
    invoice.items.append(item)
    return item


def update_item(invoice: Invoice, item_id: str, **changes: Any) -> InvoiceItem | None:
    """
    Apply changes to the item with item_id, keeping its position.

    Returns the updated item, or None when no item has that id.

    Raises:
        TypeError: If changes name a field that InvoiceItem does not have.
    """
    _check_fields(changes, _ITEM_FIELDS, "InvoiceItem")
    for index, item in enumerate(invoice.items):
        if item.id == item_id:
            invoice.items[index] = replace(item, **changes)
            return invoice.items[index]
    return None


def remove_item(invoice: Invoice, item_id: str) -> bool:
    """Remove the item with item_id; returns False when it was not present."""
    remaining = [item for item in invoice.items if item.id != item_id]
    removed = len(remaining) != len(invoice.items)
    invoice.items[:] = remaining
    return removed


def update_invoice(invoice: Invoice, **changes: Any) -> Invoice:
    """Set top-level invoice fields in place. The id and items are not editable here."""
    _check_fields(changes, _INVOICE_FIELDS, "Invoice")
    for name, value in changes.items():
        setattr(invoice, name, value)
    return invoice


def update_party(invoice: Invoice, party: str, **changes: Any) -> CompanyInfo:
    """
    Set fields on the sender (``"from"``) or recipient (``"to"``) in place.

    Raises:
        ValueError: If party is neither ``"from"`` nor ``"to"``.
    """
    try:
        attribute = _PARTIES[party]
    except KeyError as exc:
        raise ValueError(f"Unknown party: {party}") from exc
    _check_fields(changes, _PARTY_FIELDS, "CompanyInfo")
    company = replace(getattr(invoice, attribute), **changes)
    setattr(invoice, attribute, company)
    return company


def _check_fields(changes: dict, allowed: set[str], owner: str) -> None:
    unknown = sorted(set(changes) - allowed)
    if unknown:
        raise TypeError(f"{owner} has no editable field(s): {', '.join(unknown)}")
