"""
Store factory for the Invoice Manager.

This module provides the get_invoice_store() factory function that returns
an InvoiceStore over the configured persistence medium.

Available media:
- disk: diskcache directory under settings.DATA_DIR (survives restarts)
- memory: in-process dict (lost on exit; handy for demos and tests)

The store is cached at the module level, so the same instance is reused
across all requests. Configure via INVOICE_MANAGER_STORE environment variable.
"""

import sqlite3
from functools import cache
from typing import Callable, Dict

from invoice_manager import settings
from invoice_manager.lib import logs
from invoice_manager.lib.storage import (
    DiskStorage,
    MemoryStorage,
    Storage,
    UnavailableStorage,
)
from invoice_manager.services.invoice_store import InvoiceStore

LOG = logs.logger(__file__)


def _disk_storage() -> Storage:
    try:
        return DiskStorage(settings.DATA_DIR)
    except (OSError, sqlite3.Error) as exc:
        LOG.warning("Disk storage unavailable at %s: %s", settings.DATA_DIR, exc)
        return UnavailableStorage()


_STORAGE_REGISTRY: Dict[str, Callable[[], Storage]] = {
    "disk": _disk_storage,
    "memory": lambda: MemoryStorage(),
}


@cache
def get_invoice_store(kind: str | None = None) -> InvoiceStore:
    """Return the configured invoice store implementation."""
    resolved_kind = (kind or settings.STORE_KIND).lower()
    LOG.info("get_invoice_store - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _STORAGE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown invoice store kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return InvoiceStore(factory())


__all__ = ["InvoiceStore", "get_invoice_store"]
