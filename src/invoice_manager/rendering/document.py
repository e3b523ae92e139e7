"""
Static HTML documents for invoice preview, print and export.

Every rendering path goes through build_document_context(), which computes
the invoice total once and formats every displayed value, so the on-screen
preview, the print window and exported files always show the same content.
"""

from functools import cache
from typing import Any

from jinja2 import Environment, PackageLoader, Template

from invoice_manager import settings
from invoice_manager.models.invoice import Invoice
from invoice_manager.utils.formatting import (
    amount_in_words,
    can_spell_amount,
    format_currency,
    format_date,
    format_number,
)
from invoice_manager.utils.invoice_helpers import compute_total, line_total

TEMPLATE_NAME = "invoice.html.j2"


@cache
def _template() -> Template:
    env = Environment(
        loader=PackageLoader("invoice_manager.rendering", "templates"),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    return env.get_template(TEMPLATE_NAME)


def build_document_context(invoice: Invoice) -> dict[str, Any]:
    """
    Compute the display values shared by all document renderings.

    Args:
        invoice: Invoice to render.

    Returns:
        Dictionary consumed by the invoice template and the editor preview.
    """
    total = compute_total(invoice)
    return {
        "invoice_id": invoice.id,
        "invoice_number": invoice.invoice_number,
        "status": invoice.status.title(),
        "issued_date": format_date(invoice.issued_date),
        "due_date": format_date(invoice.due_date),
        "late_fee": format_number(invoice.late_fee) if invoice.late_fee > 0 else "",
        "sender": invoice.from_,
        "recipient": invoice.to,
        "items": [
            {
                "description": item.description,
                "quantity": format_number(item.quantity),
                "unit_price": format_number(item.unit_price),
                "line_total": format_number(line_total(item)),
            }
            for item in invoice.items
        ],
        "total_value": total,
        "subtotal": format_number(total),
        "total": format_number(total),
        "total_currency": format_currency(total),
        "amount_in_words": (
            amount_in_words(total).capitalize()
            if settings.SHOW_AMOUNT_IN_WORDS and can_spell_amount(total)
            else ""
        ),
        "notes": invoice.notes.splitlines(),
        "bank": invoice.bank_details.bank,
        "account_number": invoice.bank_details.account_number,
        "logo_url": settings.LOGO_URL,
    }


def render_invoice_html(invoice: Invoice) -> str:
    """Render the invoice as a standalone HTML document with embedded styles."""
    return _template().render(print_mode=False, **build_document_context(invoice))


def render_print_html(invoice: Invoice) -> str:
    """Render the invoice document with an onload print-and-close hook."""
    return _template().render(print_mode=True, **build_document_context(invoice))


def document_filename(invoice: Invoice, extension: str) -> str:
    """Return ``invoice-{number}.{extension}`` with path separators removed."""
    number = invoice.invoice_number.strip().replace("/", "-").replace("\\", "-")
    stem = f"invoice-{number}" if number else "invoice"
    return f"{stem}.{extension.lstrip('.')}"
