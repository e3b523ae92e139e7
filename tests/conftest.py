from datetime import date

import pytest

from invoice_manager.lib.clock import FixedClock
from invoice_manager.lib.storage import MemoryStorage
from invoice_manager.models.invoice import CompanyInfo, Invoice, InvoiceItem
from invoice_manager.services import get_invoice_store
from invoice_manager.services.invoice_store import InvoiceStore
from invoice_manager.utils.invoice_helpers import create_default


@pytest.fixture
def clock():
    return FixedClock(date(2025, 1, 1))


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage, clock):
    return InvoiceStore(storage, clock=clock)


@pytest.fixture(autouse=True)
def _reset_store_cache():
    get_invoice_store.cache_clear()
    yield
    get_invoice_store.cache_clear()


def make_invoice(invoice_id: str = "inv-1", **overrides) -> Invoice:
    """Build a fully populated invoice with two items totalling 200000."""
    values = dict(
        id=invoice_id,
        invoice_number="2025-7",
        status="draft",
        issued_date="2025-01-01",
        due_date="2025-01-15",
        late_fee=1,
        notes="Thank you\nfor your business",
        from_=CompanyInfo(
            name="CV Sender",
            address="Jl. Sudirman 1, Jakarta",
            email="billing@sender.example",
            phone="0811111111",
            website="https://sender.example",
        ),
        to=CompanyInfo(
            name="PT Client",
            address="Jl. Thamrin 2, Jakarta",
            email="ap@client.example",
        ),
        items=[
            InvoiceItem(id="item-1", description="AC service", quantity=2, unit_price=50000),
            InvoiceItem(id="item-2", description="Freon refill", quantity=1, unit_price=100000),
        ],
    )
    values.update(overrides)
    invoice = Invoice(**values)
    invoice.bank_details.bank = "Bank BCA"
    invoice.bank_details.account_number = "0123456789"
    return invoice


@pytest.fixture
def invoice():
    return make_invoice()


@pytest.fixture
def default_invoice(clock):
    return create_default(clock=clock)


@pytest.fixture
def invoice_factory():
    return make_invoice
