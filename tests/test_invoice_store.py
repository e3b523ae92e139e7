import json

import pytest

from invoice_manager.errors import CorruptStoreError, StorageUnavailableError
from invoice_manager.lib.storage import UnavailableStorage
from invoice_manager.services.invoice_store import (
    INVOICE_COUNTER_KEY,
    STORAGE_KEY,
    InvoiceStore,
)
from invoice_manager.utils.invoice_helpers import compute_total, update_invoice


def test_load_all_empty_on_first_run(store):
    assert store.load_all() == []
    assert store.list_projections() == []


def test_get_by_id_missing_returns_none(store):
    assert store.get_by_id("nope") is None


def test_save_then_get_round_trips(store, invoice):
    saved = store.save(invoice)
    assert saved is invoice
    assert store.get_by_id(invoice.id) == invoice


def test_save_appends_in_insertion_order(store, invoice_factory):
    for invoice_id in ("b", "a", "c"):
        store.save(invoice_factory(invoice_id))
    assert [inv.id for inv in store.load_all()] == ["b", "a", "c"]


def test_save_same_id_replaces_in_place(store, invoice_factory):
    first = invoice_factory("first")
    store.save(first)
    store.save(invoice_factory("second"))

    update_invoice(first, status="booked", notes="Paid in full")
    store.save(first)
    store.save(first)

    invoices = store.load_all()
    assert [inv.id for inv in invoices] == ["first", "second"]
    assert invoices[0].status == "booked"
    assert invoices[0].notes == "Paid in full"


def test_delete_removes_invoice(store, invoice_factory):
    store.save(invoice_factory("a"))
    store.save(invoice_factory("b"))
    assert store.delete("a") is True
    assert store.get_by_id("a") is None
    assert [inv.id for inv in store.load_all()] == ["b"]


def test_delete_missing_id_leaves_collection_unchanged(store, storage, invoice):
    store.save(invoice)
    before = storage.get(STORAGE_KEY)
    assert store.delete("missing") is False
    assert storage.get(STORAGE_KEY) == before


def test_delete_on_empty_store_is_noop(store, storage):
    assert store.delete("missing") is False
    assert storage.get(STORAGE_KEY) is None


def test_list_projections_match_invoices(store, invoice_factory):
    store.save(invoice_factory("a"))
    second = invoice_factory("b")
    second.items = second.items[:1]
    store.save(second)
    store.save(invoice_factory("c", items=[]))

    invoices = store.load_all()
    projections = store.list_projections()
    assert len(projections) == len(invoices)
    for projection, invoice in zip(projections, invoices):
        assert projection.id == invoice.id
        assert projection.client_name == invoice.to.name
        assert projection.total == compute_total(invoice)
    assert [p.total for p in projections] == [200000, 100000, 0]


def test_blob_is_json_array_with_persisted_keys(store, storage, invoice):
    store.save(invoice)
    records = json.loads(storage.get(STORAGE_KEY))
    assert isinstance(records, list)
    assert records[0]["invoiceNumber"] == "2025-7"
    assert records[0]["items"][1]["unitPrice"] == 100000


def test_reads_blob_written_by_earlier_builds(storage, store):
    storage.set(
        STORAGE_KEY,
        json.dumps(
            [
                {
                    "id": "k3j9x2a1b",
                    "invoiceNumber": "2025-0",
                    "status": "booked",
                    "issuedDate": "2025-02-01",
                    "dueDate": "2025-02-15",
                    "lateFee": 1,
                    "notes": "",
                    "from": {"name": "CV Zen`cool", "address": "", "email": "", "phone": "", "website": ""},
                    "to": {"name": "Client Name", "address": "", "email": "", "phone": "", "website": ""},
                    "items": [{"id": "p1", "description": "Cuci AC", "quantity": 3, "unitPrice": 75000}],
                    "bankDetails": {"bank": "Bank BCA", "accountNumber": "0123456789"},
                }
            ]
        ),
    )
    (projection,) = store.list_projections()
    assert projection.id == "k3j9x2a1b"
    assert projection.total == 225000
    assert projection.status == "booked"


@pytest.mark.parametrize(
    "blob",
    ["{not json", '{"id": "a"}', '["a", "b"]', '[{"invoiceNumber": "no id"}]'],
)
def test_malformed_blob_raises_and_is_left_untouched(store, storage, blob):
    storage.set(STORAGE_KEY, blob)
    with pytest.raises(CorruptStoreError) as excinfo:
        store.load_all()
    assert excinfo.value.key == STORAGE_KEY
    with pytest.raises(CorruptStoreError):
        store.save(store.create_invoice())
    assert storage.get(STORAGE_KEY) == blob


def test_unavailable_storage_reads_empty_and_rejects_writes(clock, invoice):
    store = InvoiceStore(UnavailableStorage(), clock=clock)
    assert store.load_all() == []
    assert store.get_by_id(invoice.id) is None
    assert store.list_projections() == []
    with pytest.raises(StorageUnavailableError):
        store.save(invoice)


def test_next_invoice_number_suggestion_increments(store, storage):
    assert store.next_invoice_number_suggestion() == "2025-1"
    assert store.next_invoice_number_suggestion() == "2025-2"
    assert storage.get(INVOICE_COUNTER_KEY) == "2"


def test_next_invoice_number_ignores_stored_numbers(store, invoice_factory):
    store.save(invoice_factory("a", invoice_number="2025-1"))
    assert store.next_invoice_number_suggestion() == "2025-1"


def test_next_invoice_number_uses_clock_year(storage, clock):
    from datetime import date

    clock.set(date(2026, 3, 1))
    storage.set(INVOICE_COUNTER_KEY, "41")
    assert InvoiceStore(storage, clock=clock).next_invoice_number_suggestion() == "2026-42"


def test_malformed_counter_raises(store, storage):
    storage.set(INVOICE_COUNTER_KEY, "many")
    with pytest.raises(CorruptStoreError) as excinfo:
        store.next_invoice_number_suggestion()
    assert excinfo.value.key == INVOICE_COUNTER_KEY


def test_create_invoice_is_numbered_but_not_saved(store, storage):
    invoice = store.create_invoice()
    assert invoice.invoice_number == "2025-1"
    assert storage.get(INVOICE_COUNTER_KEY) is None
    assert invoice.issued_date == "2025-01-01"
    assert invoice.due_date == "2025-01-15"
    assert store.load_all() == []


def test_abandoned_new_invoices_leave_no_gap(store):
    store.create_invoice()
    store.create_invoice()
    assert store.peek_invoice_number_suggestion() == "2025-1"
    assert store.create_invoice().invoice_number == "2025-1"


def test_claim_invoice_number_advances_counter(store, storage):
    invoice = store.create_invoice()
    assert store.claim_invoice_number(invoice) is True
    store.save(invoice)
    assert storage.get(INVOICE_COUNTER_KEY) == "1"
    assert store.create_invoice().invoice_number == "2025-2"


def test_claim_invoice_number_skips_edited_numbers(store, storage):
    invoice = store.create_invoice()
    update_invoice(invoice, invoice_number="INV-CUSTOM")
    assert store.claim_invoice_number(invoice) is False
    assert storage.get(INVOICE_COUNTER_KEY) is None


def test_store_uses_injected_id_factory(storage, clock):
    store = InvoiceStore(storage, clock=clock, id_factory=lambda: "fixed-id")
    assert store.create_invoice().id == "fixed-id"


def test_clear_removes_everything(store, storage, invoice):
    store.save(invoice)
    store.next_invoice_number_suggestion()
    store.clear()
    assert storage.keys() == []
    assert store.load_all() == []
