"""
Data models and serialization helpers for the Invoice Manager.

All models use Python dataclasses; the persisted JSON keeps camelCase keys.
"""

from invoice_manager.models.invoice import (
    STATUS_BOOKED,
    STATUS_DRAFT,
    STATUSES,
    BankDetails,
    CompanyInfo,
    Invoice,
    InvoiceItem,
    InvoiceListItem,
    deserialize_invoice,
    deserialize_item,
    serialize_invoice,
    serialize_item,
)

__all__ = [
    "STATUS_BOOKED",
    "STATUS_DRAFT",
    "STATUSES",
    "BankDetails",
    "CompanyInfo",
    "Invoice",
    "InvoiceItem",
    "InvoiceListItem",
    "deserialize_invoice",
    "deserialize_item",
    "serialize_invoice",
    "serialize_item",
]
