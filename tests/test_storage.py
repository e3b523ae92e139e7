import pytest

from invoice_manager.errors import StorageUnavailableError
from invoice_manager.lib.storage import DiskStorage, MemoryStorage, UnavailableStorage


def test_memory_storage_get_set_remove():
    storage = MemoryStorage()
    assert storage.available
    assert storage.get("k") is None
    storage.set("k", "v")
    assert storage.get("k") == "v"
    storage.set("k", "w")
    assert storage.get("k") == "w"
    storage.remove("k")
    assert storage.get("k") is None
    storage.remove("k")


def test_memory_storage_initial_data_is_copied():
    initial = {"k": "v"}
    storage = MemoryStorage(initial)
    storage.set("k", "changed")
    assert initial == {"k": "v"}
    assert storage.keys() == ["k"]


def test_disk_storage_persists_across_instances(tmp_path):
    storage = DiskStorage(tmp_path / "store")
    storage.set("invoices_db", '[{"id": "a"}]')
    storage.close()

    reopened = DiskStorage(tmp_path / "store")
    try:
        assert reopened.get("invoices_db") == '[{"id": "a"}]'
        reopened.remove("invoices_db")
        assert reopened.get("invoices_db") is None
        reopened.remove("invoices_db")
    finally:
        reopened.close()


def test_unavailable_storage():
    storage = UnavailableStorage()
    assert not storage.available
    assert storage.get("k") is None
    with pytest.raises(StorageUnavailableError):
        storage.set("k", "v")
    with pytest.raises(StorageUnavailableError):
        storage.remove("k")
