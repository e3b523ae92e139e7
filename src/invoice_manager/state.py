"""
Reflex state management for the Invoice Manager.

Two states back the two pages:

- InvoiceListState: loads list projections and deletes after confirmation
- InvoiceEditorState: holds the invoice being edited in memory, applies
  field and item edits, and saves, deletes, prints or exports it

Neither state touches the persisted blob directly; everything goes through
InvoiceStore operations. Every action reports a toast.
"""

import json
from typing import Any

import reflex as rx

from invoice_manager.errors import ExportError, InvoiceManagerError
from invoice_manager.lib import logs
from invoice_manager.models.invoice import (
    STATUSES,
    Invoice,
    deserialize_invoice,
    serialize_invoice,
)
from invoice_manager.models.reflex_models import (
    InvoiceFormModel,
    InvoiceRowModel,
    to_form_model,
    to_row_model,
)
from invoice_manager.rendering import (
    document_filename,
    render_invoice_html,
    render_pdf,
    render_print_html,
)
from invoice_manager.services import InvoiceStore, get_invoice_store
from invoice_manager.utils import invoice_helpers
from invoice_manager.utils.formatting import parse_currency

LOG = logs.logger(__file__)

_NUMERIC_ITEM_FIELDS = {"quantity", "unit_price"}
_TEXT_INVOICE_FIELDS = {"invoice_number", "issued_date", "due_date", "notes"}


def _store() -> InvoiceStore:
    """Get the configured invoice store (lazy loaded)."""
    return get_invoice_store()


def record_to_invoice(record: dict[str, Any]) -> Invoice | None:
    """Rebuild the invoice under edit, or None when nothing has been loaded."""
    if not record:
        return None
    return deserialize_invoice(record)


class InvoiceListState(rx.State):
    """State for the invoice list page."""

    rows: list[InvoiceRowModel] = []
    is_loading: bool = True
    confirm_open: bool = False
    pending_delete_id: str = ""

    @rx.var
    def is_empty(self) -> bool:
        """Check if empty state should be shown."""
        return not self.is_loading and len(self.rows) == 0

    @rx.event
    def on_load(self):
        """Load the list projections when the page opens."""
        self.is_loading = True
        try:
            self.rows = [to_row_model(item) for item in _store().list_projections()]
        except InvoiceManagerError as e:
            LOG.error("Failed to load invoices: %s", e, exc_info=True)
            self.rows = []
            return rx.toast.error("Failed to load invoices")
        finally:
            self.is_loading = False

    @rx.event
    def request_delete(self, invoice_id: str):
        """Ask for confirmation before deleting invoice_id."""
        self.pending_delete_id = invoice_id
        self.confirm_open = True

    @rx.event
    def cancel_delete(self):
        self.pending_delete_id = ""
        self.confirm_open = False

    @rx.event
    def confirm_delete(self):
        """Delete the invoice awaiting confirmation and refresh the list."""
        invoice_id = self.pending_delete_id
        self.cancel_delete()
        try:
            _store().delete(invoice_id)
        except InvoiceManagerError as e:
            LOG.error("Delete failed for %s: %s", invoice_id, e, exc_info=True)
            return rx.toast.error("Failed to delete invoice")
        self.rows = [row for row in self.rows if row.id != invoice_id]
        return rx.toast.success("Invoice deleted")

    @rx.event
    def new_invoice(self):
        return rx.redirect("/invoice/new")


class InvoiceEditorState(rx.State):
    """
    State for the invoice editor page.

    The invoice under edit is kept as its serialized record in a backend-only
    var; form and preview are rebuilt from it after every change. Nothing is
    persisted until save() is called.
    """

    form: InvoiceFormModel = InvoiceFormModel()
    preview_html: str = ""
    is_new: bool = False
    is_loading: bool = True
    not_found: bool = False
    confirm_open: bool = False

    _record: dict[str, Any] = {}

    @rx.var
    def statuses(self) -> list[str]:
        return list(STATUSES)

    def _invoice(self) -> Invoice | None:
        return record_to_invoice(self._record)

    def _sync(self, invoice: Invoice) -> None:
        """Store the edited invoice and refresh every derived view."""
        self._record = serialize_invoice(invoice)
        self.form = to_form_model(invoice)
        self.preview_html = render_invoice_html(invoice)

    @rx.event
    def load_new(self):
        """Start editing a brand-new, unsaved invoice."""
        self.is_loading = True
        self.not_found = False
        self.is_new = True
        self._record = {}
        try:
            self._sync(_store().create_invoice())
        except InvoiceManagerError as e:
            LOG.error("Failed to create invoice: %s", e, exc_info=True)
            return rx.toast.error("Failed to create invoice")
        finally:
            self.is_loading = False

    @rx.event
    def load_existing(self):
        """Load the invoice named by the route parameter."""
        self.is_loading = True
        self.is_new = False
        self._record = {}
        invoice_id = self.router.page.params.get("invoice_id", "")
        try:
            invoice = _store().get_by_id(invoice_id)
        except InvoiceManagerError as e:
            LOG.error("Failed to load invoice %s: %s", invoice_id, e, exc_info=True)
            invoice = None
        finally:
            self.is_loading = False
        self.not_found = invoice is None
        if invoice is not None:
            self._sync(invoice)

    @rx.event
    def set_field(self, name: str, value: str):
        """Update a top-level text field such as notes or the due date."""
        if name not in _TEXT_INVOICE_FIELDS:
            LOG.warning("Ignoring edit of unknown field %s", name)
            return
        invoice = self._invoice()
        if invoice is None:
            return
        invoice_helpers.update_invoice(invoice, **{name: value})
        self._sync(invoice)

    @rx.event
    def set_late_fee(self, value: str):
        invoice = self._invoice()
        if invoice is None:
            return
        invoice_helpers.update_invoice(invoice, late_fee=parse_currency(value))
        self._sync(invoice)

    @rx.event
    def set_status(self, value: str):
        if value not in STATUSES:
            return
        invoice = self._invoice()
        if invoice is None:
            return
        invoice_helpers.update_invoice(invoice, status=value)
        self._sync(invoice)

    @rx.event
    def set_party_field(self, party: str, name: str, value: str):
        """Update a sender ("from") or recipient ("to") field."""
        invoice = self._invoice()
        if invoice is None:
            return
        invoice_helpers.update_party(invoice, party, **{name: value})
        self._sync(invoice)

    @rx.event
    def set_bank_field(self, name: str, value: str):
        invoice = self._invoice()
        if invoice is None:
            return
        if name == "bank":
            invoice.bank_details.bank = value
        elif name == "account_number":
            invoice.bank_details.account_number = value
        self._sync(invoice)

    @rx.event
    def add_item(self):
        invoice = self._invoice()
        if invoice is None:
            return
        invoice_helpers.add_item(invoice)
        self._sync(invoice)

    @rx.event
    def set_item_field(self, item_id: str, name: str, value: str):
        """Update one item field; unparseable numbers become zero."""
        new_value: Any = parse_currency(value) if name in _NUMERIC_ITEM_FIELDS else value
        invoice = self._invoice()
        if invoice is None:
            return
        invoice_helpers.update_item(invoice, item_id, **{name: new_value})
        self._sync(invoice)

    @rx.event
    def remove_item(self, item_id: str):
        invoice = self._invoice()
        if invoice is None:
            return
        invoice_helpers.remove_item(invoice, item_id)
        self._sync(invoice)

    @rx.event
    def save(self):
        """Persist the invoice and return to the list."""
        invoice = self._invoice()
        if invoice is None:
            return
        try:
            if self.is_new:
                _store().claim_invoice_number(invoice)
            _store().save(invoice)
        except InvoiceManagerError as e:
            LOG.error("Save failed for %s: %s", invoice.id, e, exc_info=True)
            return rx.toast.error("Failed to save invoice")
        LOG.info("Saved invoice %s", invoice.id)
        self.is_new = False
        return [rx.toast.success("Invoice saved"), rx.redirect("/")]

    @rx.event
    def request_delete(self):
        self.confirm_open = True

    @rx.event
    def cancel_delete(self):
        self.confirm_open = False

    @rx.event
    def confirm_delete(self):
        """Delete the invoice after confirmation and return to the list."""
        self.confirm_open = False
        invoice_id = self._record.get("id", "")
        try:
            _store().delete(invoice_id)
        except InvoiceManagerError as e:
            LOG.error("Delete failed for %s: %s", invoice_id, e, exc_info=True)
            return rx.toast.error("Failed to delete invoice")
        return [rx.toast.success("Invoice deleted"), rx.redirect("/")]

    @rx.event
    def print_invoice(self):
        """Open the print-friendly document in a new window."""
        invoice = self._invoice()
        if invoice is None:
            return
        html = json.dumps(render_print_html(invoice))
        return rx.call_script(
            "(() => {"
            "const w = window.open('', '_blank');"
            "if (!w) return;"
            f"w.document.open(); w.document.write({html}); w.document.close();"
            "})()"
        )

    @rx.event
    def export_pdf(self):
        """Download the invoice as a PDF file."""
        invoice = self._invoice()
        if invoice is None:
            return
        try:
            data = render_pdf(invoice)
        except ExportError as e:
            LOG.error("Export failed for %s: %s", invoice.id, e, exc_info=True)
            return rx.toast.error("Failed to export PDF")
        return [
            rx.download(data=data, filename=document_filename(invoice, "pdf")),
            rx.toast.success("PDF exported"),
        ]

    @rx.event
    def back(self):
        return rx.redirect("/")
