"""
Invoice store: CRUD over the persisted invoice collection.

The whole collection lives as one JSON array under a single storage key.
Every save or delete is a full read-modify-write of that array, which is
fine for a single-user invoice book and keeps the persisted layout trivial:

    invoices_db      JSON array of invoice records (camelCase keys)
    invoice_counter  plain integer, source of invoice number suggestions

Malformed persisted data raises CorruptStoreError and is left in place.
An unavailable medium reads as an empty collection.
"""

import json
from typing import Callable, List

from invoice_manager.errors import CorruptStoreError
from invoice_manager.lib import ids, logs, objects
from invoice_manager.lib.clock import Clock, SystemClock
from invoice_manager.lib.storage import Storage
from invoice_manager.models.invoice import (
    Invoice,
    InvoiceListItem,
    deserialize_invoice,
    serialize_invoice,
)
from invoice_manager.utils.invoice_helpers import create_default, to_list_item

LOG = logs.logger(__file__)

STORAGE_KEY = "invoices_db"
INVOICE_COUNTER_KEY = "invoice_counter"


class InvoiceStore:
    """
    Repository over an injected string key/value Storage.

    Attributes:
        storage: Persistence medium holding the collection and counter.
        clock: Source of the current year for invoice number suggestions.
    """

    def __init__(
        self,
        storage: Storage,
        clock: Clock | None = None,
        id_factory: Callable[[], str] = ids.new_id,
    ) -> None:
        self.storage = storage
        self.clock = clock or SystemClock()
        self._id_factory = id_factory

    def load_all(self) -> List[Invoice]:
        """
        Return every persisted invoice in storage order.

        Returns an empty list when nothing was saved yet or the medium is
        unavailable.

        Raises:
            CorruptStoreError: If the persisted blob cannot be deserialized.
        """
        if not self.storage.available:
            LOG.warning("load_all - storage unavailable, returning no invoices")
            return []
        data = self.storage.get(STORAGE_KEY)
        if not data:
            return []
        try:
            records = json.loads(data)
            if not isinstance(records, list):
                raise TypeError(f"expected a JSON array, got {type(records).__name__}")
            return [deserialize_invoice(record) for record in records]
        except (ValueError, TypeError) as exc:
            LOG.error("load_all - malformed %s: %s", STORAGE_KEY, exc)
            raise CorruptStoreError(STORAGE_KEY, str(exc)) from exc

    def get_by_id(self, invoice_id: str) -> Invoice | None:
        """Return the invoice with invoice_id, or None when absent."""
        for invoice in self.load_all():
            if invoice.id == invoice_id:
                return invoice
        return None

    def save(self, invoice: Invoice) -> Invoice:
        """
        Persist an invoice, replacing a stored one with the same id in place.

        New ids are appended to the end of the collection. Last write wins.
        """
        invoices = self.load_all()
        for index, existing in enumerate(invoices):
            if existing.id == invoice.id:
                invoices[index] = invoice
                LOG.debug("save - replaced id:%s at index:%s", invoice.id, index)
                break
        else:
            invoices.append(invoice)
            LOG.debug("save - appended id:%s", invoice.id)
        self._write(invoices)
        return invoice

    def delete(self, invoice_id: str) -> bool:
        """
        Remove the invoice with invoice_id.

        Returns False, leaving the collection untouched, when no invoice
        has that id.
        """
        invoices = self.load_all()
        remaining = [invoice for invoice in invoices if invoice.id != invoice_id]
        if len(remaining) == len(invoices):
            LOG.debug("delete - id:%s not found", invoice_id)
            return False
        self._write(remaining)
        LOG.debug("delete - removed id:%s", invoice_id)
        return True

    def list_projections(self) -> List[InvoiceListItem]:
        """Return list-view summaries in storage order with fresh totals."""
        return [to_list_item(invoice) for invoice in self.load_all()]

    def _read_counter(self) -> int:
        raw = self.storage.get(INVOICE_COUNTER_KEY)
        try:
            return int(raw) if raw else 0
        except ValueError as exc:
            LOG.error("invoice counter - malformed value: %r", raw)
            raise CorruptStoreError(INVOICE_COUNTER_KEY, str(exc)) from exc

    def _format_number(self, counter: int) -> str:
        return f"{self.clock.today().year}-{counter}"

    def next_invoice_number_suggestion(self) -> str:
        """
        Advance the persisted counter and return ``"{year}-{counter}"``.

        The counter is only a suggestion: it is independent of the numbers
        stored on invoices and collisions with edited numbers go undetected.

        Raises:
            CorruptStoreError: If the stored counter is not an integer.
        """
        counter = self._read_counter() + 1
        self.storage.set(INVOICE_COUNTER_KEY, str(counter))
        return self._format_number(counter)

    def peek_invoice_number_suggestion(self) -> str:
        """Return the number next_invoice_number_suggestion() would give, without advancing."""
        return self._format_number(self._read_counter() + 1)

    def create_invoice(self) -> Invoice:
        """
        Build an unsaved default invoice numbered from the counter.

        The counter is not advanced here, so opening and abandoning a new
        invoice leaves no gap; claim_invoice_number() advances it on save.
        """
        return create_default(
            clock=self.clock,
            id_factory=self._id_factory,
            invoice_number=self.peek_invoice_number_suggestion(),
        )

    def claim_invoice_number(self, invoice: Invoice) -> bool:
        """
        Advance the counter if invoice still carries the pending suggestion.

        Returns:
            True when the counter was advanced, False when the number was
            edited away from the suggestion.
        """
        if invoice.invoice_number != self.peek_invoice_number_suggestion():
            return False
        self.next_invoice_number_suggestion()
        return True

    def clear(self) -> None:
        """Remove the collection and the counter from storage."""
        self.storage.remove(STORAGE_KEY)
        self.storage.remove(INVOICE_COUNTER_KEY)

    def _write(self, invoices: List[Invoice]) -> None:
        self.storage.set(
            STORAGE_KEY, objects.to_json([serialize_invoice(inv) for inv in invoices])
        )
