from datetime import date

import pytest

from invoice_manager import settings
from invoice_manager.lib.clock import FixedClock
from invoice_manager.models.invoice import Invoice, InvoiceItem
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


def test_compute_total_sums_line_totals(invoice):
    assert compute_total(invoice) == 200000


def test_compute_total_empty_items_is_zero():
    assert compute_total(Invoice(id="x")) == 0


def test_compute_total_keeps_fractional_precision():
    invoice = Invoice(
        id="x",
        items=[InvoiceItem(id="a", quantity=1.5, unit_price=1000.5)],
    )
    assert compute_total(invoice) == pytest.approx(1500.75)


def test_line_total():
    assert line_total(InvoiceItem(id="a", quantity=3, unit_price=2500)) == 7500


def test_create_default_dates_follow_clock(clock):
    invoice = create_default(clock=clock)
    assert invoice.issued_date == "2025-01-01"
    assert invoice.due_date == "2025-01-15"


def test_create_default_fields(default_invoice):
    assert default_invoice.status == "draft"
    assert default_invoice.items == []
    assert default_invoice.notes == ""
    assert default_invoice.invoice_number == "2025-0"
    assert default_invoice.late_fee == settings.DEFAULT_LATE_FEE
    assert default_invoice.from_.name == settings.SENDER_NAME
    assert default_invoice.from_.email == settings.SENDER_EMAIL
    assert default_invoice.to.name == "Client Name"
    assert default_invoice.to.email == "client@example.com"
    assert default_invoice.bank_details.bank == settings.BANK_NAME


def test_create_default_generates_fresh_ids(clock):
    first = create_default(clock=clock)
    second = create_default(clock=clock)
    assert first.id and second.id
    assert first.id != second.id


def test_create_default_uses_given_number_and_id_factory(clock):
    invoice = create_default(clock=clock, id_factory=lambda: "fixed", invoice_number="2025-9")
    assert invoice.id == "fixed"
    assert invoice.invoice_number == "2025-9"


def test_create_default_year_end():
    invoice = create_default(clock=FixedClock(date(2024, 12, 25)))
    assert invoice.due_date == "2025-01-08"
    assert invoice.invoice_number == "2024-0"


def test_add_item_appends_with_defaults(invoice):
    item = add_item(invoice)
    assert invoice.items[-1] is item
    assert item.quantity == 1
    assert item.unit_price == 0
    assert item.description == ""
    assert item.id not in {"item-1", "item-2"}


def test_update_item_keeps_position(invoice):
    updated = update_item(invoice, "item-1", quantity=4, description="AC deep clean")
    assert invoice.items[0] is updated
    assert updated.quantity == 4
    assert updated.description == "AC deep clean"
    assert compute_total(invoice) == 300000


def test_update_item_unknown_id_is_noop(invoice):
    assert update_item(invoice, "missing", quantity=9) is None
    assert compute_total(invoice) == 200000


def test_update_item_rejects_unknown_fields(invoice):
    with pytest.raises(TypeError):
        update_item(invoice, "item-1", price=1)
    with pytest.raises(TypeError):
        update_item(invoice, "item-1", id="other")


def test_remove_item(invoice):
    assert remove_item(invoice, "item-1") is True
    assert [item.id for item in invoice.items] == ["item-2"]
    assert remove_item(invoice, "item-1") is False


def test_update_invoice_sets_fields(invoice):
    update_invoice(invoice, status="booked", notes="Paid")
    assert invoice.status == "booked"
    assert invoice.notes == "Paid"


def test_update_invoice_cannot_change_id(invoice):
    with pytest.raises(TypeError):
        update_invoice(invoice, id="new-id")
    assert invoice.id == "inv-1"


def test_update_party(invoice):
    update_party(invoice, "to", name="PT Baru", phone="021555")
    update_party(invoice, "from", website="")
    assert invoice.to.name == "PT Baru"
    assert invoice.to.phone == "021555"
    assert invoice.to.address == "Jl. Thamrin 2, Jakarta"
    assert invoice.from_.website == ""


def test_update_party_rejects_unknown_party(invoice):
    with pytest.raises(ValueError):
        update_party(invoice, "cc", name="x")


def test_to_list_item(invoice):
    projection = to_list_item(invoice)
    assert projection.id == "inv-1"
    assert projection.invoice_number == "2025-7"
    assert projection.client_name == "PT Client"
    assert projection.issued_date == "2025-01-01"
    assert projection.total == 200000
    assert projection.status == "draft"
