"""
Invoice domain models and serialization helpers.

The hierarchy is:

    Invoice
    ├── CompanyInfo (from_, to)
    ├── InvoiceItem[] (description, quantity, unit price)
    └── BankDetails (bank, account number)

    InvoiceListItem (read-only projection for list display)

Serialization converts between dataclasses and the camelCase JSON records
kept in the persisted invoice blob. Deserialization reads fields through
benedict keypaths so records missing optional fields still load with
defaults.
"""

import math
from dataclasses import dataclass, field
from typing import Any, List, Literal, Mapping

from benedict import benedict

from invoice_manager.lib import ids

STATUS_DRAFT = "draft"
STATUS_BOOKED = "booked"
STATUSES = (STATUS_DRAFT, STATUS_BOOKED)

InvoiceStatus = Literal["draft", "booked"]


@dataclass(slots=True)
class CompanyInfo:
    """Contact details of the sender or the recipient."""

    name: str = ""
    address: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""


@dataclass(slots=True)
class BankDetails:
    """Where the recipient should transfer the payment."""

    bank: str = ""
    account_number: str = ""


@dataclass(slots=True)
class InvoiceItem:
    """A billable row within an invoice."""

    id: str
    description: str = ""
    quantity: float = 1
    unit_price: float = 0


@dataclass(slots=True)
class Invoice:
    """Root billing document."""

    id: str
    invoice_number: str = ""
    status: InvoiceStatus = STATUS_DRAFT
    issued_date: str = ""
    due_date: str = ""
    late_fee: float = 0
    notes: str = ""
    from_: CompanyInfo = field(default_factory=CompanyInfo)
    to: CompanyInfo = field(default_factory=CompanyInfo)
    items: List[InvoiceItem] = field(default_factory=list)
    bank_details: BankDetails = field(default_factory=BankDetails)


@dataclass(slots=True, frozen=True)
class InvoiceListItem:
    """Summary of an invoice for list display, recomputed on every read."""

    id: str
    invoice_number: str
    client_name: str
    issued_date: str
    total: float
    status: InvoiceStatus

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dictionary."""
        return {
            "id": self.id,
            "invoiceNumber": self.invoice_number,
            "clientName": self.client_name,
            "issuedDate": self.issued_date,
            "total": self.total,
            "status": self.status,
        }


def serialize_company(company: CompanyInfo) -> dict:
    """Convert CompanyInfo into its persisted dictionary."""
    return {
        "name": company.name,
        "address": company.address,
        "email": company.email,
        "phone": company.phone,
        "website": company.website,
    }


def serialize_item(item: InvoiceItem) -> dict:
    """Convert an InvoiceItem into its persisted dictionary."""
    return {
        "id": item.id,
        "description": item.description,
        "quantity": item.quantity,
        "unitPrice": item.unit_price,
    }


def serialize_invoice(invoice: Invoice) -> dict:
    """Convert an Invoice dataclass into a JSON serializable dictionary."""
    return {
        "id": invoice.id,
        "invoiceNumber": invoice.invoice_number,
        "status": invoice.status,
        "issuedDate": invoice.issued_date,
        "dueDate": invoice.due_date,
        "lateFee": invoice.late_fee,
        "notes": invoice.notes,
        "from": serialize_company(invoice.from_),
        "to": serialize_company(invoice.to),
        "items": [serialize_item(item) for item in invoice.items],
        "bankDetails": {
            "bank": invoice.bank_details.bank,
            "accountNumber": invoice.bank_details.account_number,
        },
    }


def _text(b: benedict, key: str, default: str = "") -> str:
    # Free text keeps its whitespace; benedict only resolves the keypath
    value = b.get(key)
    if value is None or isinstance(value, (dict, list)):
        return default
    return str(value)


def _company(b: benedict, key: str) -> CompanyInfo:
    return CompanyInfo(
        name=_text(b, f"{key}.name"),
        address=_text(b, f"{key}.address"),
        email=_text(b, f"{key}.email"),
        phone=_text(b, f"{key}.phone"),
        website=_text(b, f"{key}.website"),
    )


def _number(b: benedict, key: str, default: float) -> float:
    """Read a numeric field; missing, unparseable or non-finite values give default."""
    value = b.get(key)
    if isinstance(value, bool) or value is None:
        return default
    number = value if isinstance(value, (int, float)) else b.get_float(key, default)
    try:
        finite = math.isfinite(number)
    except OverflowError:
        # ints beyond the float range
        finite = False
    return number if finite else default


def _status(b: benedict) -> InvoiceStatus:
    value = _text(b, "status", STATUS_DRAFT)
    return value if value in STATUSES else STATUS_DRAFT


def deserialize_item(payload: Mapping[str, Any]) -> InvoiceItem:
    """Convert a persisted item dictionary back into an InvoiceItem."""
    if not isinstance(payload, Mapping):
        raise TypeError(f"Invoice item must be an object, got {type(payload).__name__}")
    b = benedict(dict(payload))
    return InvoiceItem(
        id=_text(b, "id") or ids.new_id(),
        description=_text(b, "description"),
        quantity=_number(b, "quantity", 0),
        unit_price=_number(b, "unitPrice", 0),
    )


def deserialize_invoice(payload: Mapping[str, Any]) -> Invoice:
    """
    Convert a persisted dictionary back into an Invoice dataclass.

    Raises:
        TypeError: If payload or one of its items is not a mapping.
        ValueError: If the record has no id.
    """
    if not isinstance(payload, Mapping):
        raise TypeError(f"Invoice record must be an object, got {type(payload).__name__}")
    b = benedict(dict(payload))
    invoice_id = _text(b, "id")
    if not invoice_id:
        raise ValueError("Invoice record has no id")
    return Invoice(
        id=invoice_id,
        invoice_number=_text(b, "invoiceNumber"),
        status=_status(b),
        issued_date=_text(b, "issuedDate"),
        due_date=_text(b, "dueDate"),
        late_fee=_number(b, "lateFee", 0),
        notes=_text(b, "notes"),
        from_=_company(b, "from"),
        to=_company(b, "to"),
        items=[deserialize_item(item) for item in b.get_list("items")],
        bank_details=BankDetails(
            bank=_text(b, "bankDetails.bank"),
            account_number=_text(b, "bankDetails.accountNumber"),
        ),
    )
