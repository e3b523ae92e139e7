"""
Invoice list component for Reflex.

Shows one table row per stored invoice with edit and delete actions,
an empty state, and the delete confirmation dialog.
"""

import reflex as rx

from invoice_manager.components.confirm_dialog import confirm_dialog
from invoice_manager.models.reflex_models import InvoiceRowModel
from invoice_manager.state import InvoiceListState


def invoice_list() -> rx.Component:
    """
    Build the invoice list container.

    Returns:
        The list card, or the empty state when no invoices exist.
    """
    return rx.box(
        _toolbar(),
        rx.cond(
            InvoiceListState.is_empty,
            _empty(),
            _table(),
        ),
        confirm_dialog(
            title="Delete invoice?",
            description="This will permanently delete the invoice.",
            is_open=InvoiceListState.confirm_open,
            on_confirm=InvoiceListState.confirm_delete,
            on_cancel=InvoiceListState.cancel_delete,
        ),
        class_name="invoice-list",
    )


def _toolbar() -> rx.Component:
    return rx.hstack(
        rx.text(InvoiceListState.rows.length(), " invoices", class_name="muted"),
        rx.button(
            rx.icon("plus", size=16),
            "New invoice",
            on_click=InvoiceListState.new_invoice,
        ),
        justify="between",
        align="center",
        class_name="list-toolbar",
    )


def _table() -> rx.Component:
    return rx.table.root(
        rx.table.header(
            rx.table.row(
                rx.table.column_header_cell("Invoice"),
                rx.table.column_header_cell("Client"),
                rx.table.column_header_cell("Issued"),
                rx.table.column_header_cell("Total"),
                rx.table.column_header_cell("Status"),
                rx.table.column_header_cell(""),
            )
        ),
        rx.table.body(rx.foreach(InvoiceListState.rows, _row)),
        variant="surface",
        width="100%",
    )


def _row(row: InvoiceRowModel) -> rx.Component:
    """Build a single invoice row."""
    return rx.table.row(
        rx.table.cell(rx.link(row.invoice_number, href="/invoice/" + row.id)),
        rx.table.cell(row.client_name),
        rx.table.cell(row.issued_date),
        rx.table.cell(row.total),
        rx.table.cell(status_badge(row.status)),
        rx.table.cell(
            rx.hstack(
                rx.link(
                    rx.icon_button(rx.icon("pencil", size=16), variant="ghost"),
                    href="/invoice/" + row.id,
                ),
                rx.icon_button(
                    rx.icon("trash-2", size=16),
                    variant="ghost",
                    color_scheme="red",
                    on_click=InvoiceListState.request_delete(row.id),
                ),
                spacing="2",
            )
        ),
    )


def status_badge(status: rx.Var) -> rx.Component:
    """Colored badge for draft or booked."""
    return rx.badge(
        status,
        color_scheme=rx.cond(status == "booked", "green", "gray"),
        variant="soft",
    )


def _empty() -> rx.Component:
    """Build the empty state when no invoices exist."""
    return rx.box(
        rx.icon("file-x", class_name="empty-icon", size=60),
        rx.heading("No invoices yet", size="3", as_="h3"),
        rx.text("Create your first invoice to get started.", class_name="muted"),
        class_name="card empty-state",
    )
