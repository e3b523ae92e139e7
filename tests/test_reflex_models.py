from invoice_manager.models.invoice import InvoiceItem
from invoice_manager.models.reflex_models import to_form_model, to_row_model
from invoice_manager.utils.invoice_helpers import to_list_item


def test_row_model_formats_values(invoice):
    row = to_row_model(to_list_item(invoice))
    assert row.id == "inv-1"
    assert row.invoice_number == "2025-7"
    assert row.client_name == "PT Client"
    assert row.issued_date == "Jan 1, 2025"
    assert row.total == "Rp200.000"
    assert row.status == "draft"


def test_form_model_mirrors_invoice(invoice_factory):
    form = to_form_model(invoice_factory(late_fee=1.5))
    assert form.invoice_number == "2025-7"
    assert form.late_fee == "1.5"
    assert form.sender.name == "CV Sender"
    assert form.recipient.email == "ap@client.example"
    assert [item.quantity for item in form.items] == ["2", "1"]
    assert form.items[0].unit_price == "50000"
    assert form.items[0].line_total == "Rp100.000"
    assert form.total == "Rp200.000"
    assert form.bank == "Bank BCA"


def test_form_model_for_empty_invoice(default_invoice):
    form = to_form_model(default_invoice)
    assert form.items == []
    assert form.total == "Rp0"
    assert form.late_fee == "1"


def test_form_model_handles_amounts_beyond_decimal_precision(invoice_factory):
    form = to_form_model(
        invoice_factory(items=[InvoiceItem(id="big", quantity=1, unit_price=1e28)])
    )
    assert form.total == "Rp10" + ".000" * 9
    assert form.items[0].line_total == form.total
