"""
Invoice editor component for Reflex.

Lays out the editable form next to a live preview. The preview iframe shows
the same HTML document used for printing and PDF export.
"""

import reflex as rx

from invoice_manager.components.confirm_dialog import confirm_dialog
from invoice_manager.models.reflex_models import ItemModel
from invoice_manager.state import InvoiceEditorState

_PARTY_FIELDS = (
    ("name", "Name"),
    ("address", "Address"),
    ("email", "Email"),
    ("phone", "Phone"),
    ("website", "Website"),
)


def invoice_editor() -> rx.Component:
    """
    Build the editor page body.

    Returns:
        Loading, not-found, or the form and preview side by side.
    """
    return rx.box(
        rx.cond(
            InvoiceEditorState.is_loading,
            rx.box(
                rx.box(class_name="spinner"),
                rx.text("Loading invoice...", class_name="muted"),
                class_name="card loading-state",
            ),
            rx.cond(
                InvoiceEditorState.not_found,
                _not_found(),
                _editor(),
            ),
        ),
        class_name="invoice-editor",
    )


def _not_found() -> rx.Component:
    return rx.box(
        rx.icon("file-x", class_name="empty-icon", size=60),
        rx.heading("Invoice not found", size="3", as_="h3"),
        rx.button("Back to invoices", on_click=InvoiceEditorState.back),
        class_name="card empty-state",
    )


def _editor() -> rx.Component:
    return rx.box(
        _action_bar(),
        rx.grid(
            rx.vstack(
                _details_section(),
                _party_section("from", "From", InvoiceEditorState.form.sender),
                _party_section("to", "To", InvoiceEditorState.form.recipient),
                _items_section(),
                _notes_section(),
                spacing="4",
                width="100%",
            ),
            rx.el.iframe(
                src_doc=InvoiceEditorState.preview_html,
                title="Invoice preview",
                class_name="invoice-preview",
                width="100%",
                height="1120px",
                border="0",
            ),
            columns="2",
            spacing="6",
            width="100%",
        ),
        confirm_dialog(
            title="Are you sure?",
            description="This will delete the invoice.",
            is_open=InvoiceEditorState.confirm_open,
            on_confirm=InvoiceEditorState.confirm_delete,
            on_cancel=InvoiceEditorState.cancel_delete,
        ),
    )


def _action_bar() -> rx.Component:
    return rx.hstack(
        rx.button(
            rx.icon("arrow-left", size=16),
            "Back",
            variant="ghost",
            on_click=InvoiceEditorState.back,
        ),
        rx.spacer(),
        rx.button(rx.icon("printer", size=16), "Print", variant="soft",
                  on_click=InvoiceEditorState.print_invoice),
        rx.button(rx.icon("download", size=16), "Export PDF", variant="soft",
                  on_click=InvoiceEditorState.export_pdf),
        rx.cond(
            InvoiceEditorState.is_new,
            rx.fragment(),
            rx.button(rx.icon("trash-2", size=16), "Delete", color_scheme="red",
                      variant="soft", on_click=InvoiceEditorState.request_delete),
        ),
        rx.button(rx.icon("save", size=16), "Save", on_click=InvoiceEditorState.save),
        spacing="2",
        width="100%",
        class_name="editor-actions",
    )


def _field(label: str, control: rx.Component) -> rx.Component:
    return rx.vstack(
        rx.text(label, size="2", weight="medium"),
        control,
        spacing="1",
        width="100%",
    )


def _details_section() -> rx.Component:
    form = InvoiceEditorState.form
    return rx.card(
        rx.heading("Invoice", size="3"),
        _field(
            "Invoice Number",
            rx.input(
                value=form.invoice_number,
                on_change=lambda v: InvoiceEditorState.set_field("invoice_number", v),
            ),
        ),
        rx.hstack(
            _field(
                "Issued Date",
                rx.input(
                    type="date",
                    value=form.issued_date,
                    on_change=lambda v: InvoiceEditorState.set_field("issued_date", v),
                ),
            ),
            _field(
                "Due Date",
                rx.input(
                    type="date",
                    value=form.due_date,
                    on_change=lambda v: InvoiceEditorState.set_field("due_date", v),
                ),
            ),
            width="100%",
        ),
        rx.hstack(
            _field(
                "Late Fee (%)",
                rx.input(
                    value=form.late_fee,
                    on_change=InvoiceEditorState.set_late_fee,
                    debounce=300,
                ),
            ),
            _field(
                "Status",
                rx.select(
                    InvoiceEditorState.statuses,
                    value=form.status,
                    on_change=InvoiceEditorState.set_status,
                ),
            ),
            width="100%",
        ),
        width="100%",
    )


def _party_section(party: str, title: str, company) -> rx.Component:
    return rx.card(
        rx.heading(title, size="3"),
        *[
            _field(label, _party_input(party, name, getattr(company, name)))
            for name, label in _PARTY_FIELDS
        ],
        width="100%",
    )


def _party_input(party: str, name: str, value: rx.Var) -> rx.Component:
    return rx.input(
        value=value,
        on_change=lambda v: InvoiceEditorState.set_party_field(party, name, v),
    )


def _items_section() -> rx.Component:
    return rx.card(
        rx.hstack(
            rx.heading("Items", size="3"),
            rx.spacer(),
            rx.button(rx.icon("plus", size=16), "Add item", variant="soft",
                      on_click=InvoiceEditorState.add_item),
            width="100%",
        ),
        rx.foreach(InvoiceEditorState.form.items, _item_row),
        rx.hstack(
            rx.text("Total", weight="bold"),
            rx.spacer(),
            rx.text(InvoiceEditorState.form.total, weight="bold"),
            width="100%",
            class_name="items-total",
        ),
        width="100%",
    )


def _item_row(item: ItemModel) -> rx.Component:
    """Build the inputs for one line item."""
    return rx.box(
        _field(
            "Description",
            rx.input(
                value=item.description,
                on_change=lambda v: InvoiceEditorState.set_item_field(
                    item.id, "description", v
                ),
            ),
        ),
        rx.hstack(
            _field(
                "Quantity",
                rx.input(
                    value=item.quantity,
                    debounce=300,
                    on_change=lambda v: InvoiceEditorState.set_item_field(
                        item.id, "quantity", v
                    ),
                ),
            ),
            _field(
                "Unit Price",
                rx.input(
                    value=item.unit_price,
                    debounce=300,
                    on_change=lambda v: InvoiceEditorState.set_item_field(
                        item.id, "unit_price", v
                    ),
                ),
            ),
            _field("Total", rx.text(item.line_total)),
            rx.icon_button(
                rx.icon("trash-2", size=16),
                variant="ghost",
                color_scheme="red",
                on_click=InvoiceEditorState.remove_item(item.id),
            ),
            align="end",
            width="100%",
        ),
        class_name="item-row",
    )


def _notes_section() -> rx.Component:
    form = InvoiceEditorState.form
    return rx.card(
        rx.heading("Notes & Payment", size="3"),
        _field(
            "Notes",
            rx.text_area(
                value=form.notes,
                on_change=lambda v: InvoiceEditorState.set_field("notes", v),
            ),
        ),
        rx.hstack(
            _field(
                "Bank",
                rx.input(
                    value=form.bank,
                    on_change=lambda v: InvoiceEditorState.set_bank_field("bank", v),
                ),
            ),
            _field(
                "Account Number",
                rx.input(
                    value=form.account_number,
                    on_change=lambda v: InvoiceEditorState.set_bank_field(
                        "account_number", v
                    ),
                ),
            ),
            width="100%",
        ),
        width="100%",
    )
