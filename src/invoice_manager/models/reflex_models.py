"""
View models for the Reflex presentation layer.

Reflex state vars must be JSON serializable and typed so components can
reach nested attributes; these dataclasses hold pre-formatted strings
derived from the domain models and are rebuilt after every edit.
"""

from dataclasses import dataclass, field

from invoice_manager.models.invoice import CompanyInfo, Invoice, InvoiceListItem
from invoice_manager.utils.formatting import format_currency, format_date
from invoice_manager.utils.invoice_helpers import compute_total, line_total


@dataclass
class InvoiceRowModel:
    """One row of the invoice list."""

    id: str = ""
    invoice_number: str = ""
    client_name: str = ""
    issued_date: str = ""
    total: str = ""
    status: str = "draft"


@dataclass
class CompanyModel:
    """Editable sender or recipient details."""

    name: str = ""
    address: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""


@dataclass
class ItemModel:
    """Editable line item; quantities and prices are input text."""

    id: str = ""
    description: str = ""
    quantity: str = "1"
    unit_price: str = "0"
    line_total: str = "Rp0"


@dataclass
class InvoiceFormModel:
    """Everything the editor form displays."""

    id: str = ""
    invoice_number: str = ""
    status: str = "draft"
    issued_date: str = ""
    due_date: str = ""
    late_fee: str = "0"
    notes: str = ""
    sender: CompanyModel = field(default_factory=CompanyModel)
    recipient: CompanyModel = field(default_factory=CompanyModel)
    items: list[ItemModel] = field(default_factory=list)
    bank: str = ""
    account_number: str = ""
    total: str = "Rp0"


def to_row_model(item: InvoiceListItem) -> InvoiceRowModel:
    """Format a list projection for display."""
    return InvoiceRowModel(
        id=item.id,
        invoice_number=item.invoice_number,
        client_name=item.client_name,
        issued_date=format_date(item.issued_date),
        total=format_currency(item.total),
        status=item.status,
    )


def _company_model(company: CompanyInfo) -> CompanyModel:
    return CompanyModel(
        name=company.name,
        address=company.address,
        email=company.email,
        phone=company.phone,
        website=company.website,
    )


def to_form_model(invoice: Invoice) -> InvoiceFormModel:
    """Build the editor form model from an invoice."""
    return InvoiceFormModel(
        id=invoice.id,
        invoice_number=invoice.invoice_number,
        status=invoice.status,
        issued_date=invoice.issued_date,
        due_date=invoice.due_date,
        late_fee=_plain_number(invoice.late_fee),
        notes=invoice.notes,
        sender=_company_model(invoice.from_),
        recipient=_company_model(invoice.to),
        items=[
            ItemModel(
                id=item.id,
                description=item.description,
                quantity=_plain_number(item.quantity),
                unit_price=_plain_number(item.unit_price),
                line_total=format_currency(line_total(item)),
            )
            for item in invoice.items
        ],
        bank=invoice.bank_details.bank,
        account_number=invoice.bank_details.account_number,
        total=format_currency(compute_total(invoice)),
    )


def _plain_number(value: float) -> str:
    """Render a number for an input box: no grouping, no trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
