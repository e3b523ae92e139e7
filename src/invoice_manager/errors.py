"""
Exception types raised by the Invoice Manager.

Not-found conditions are never raised: lookups return None and deletes of
an absent id are no-ops. Everything else that can go wrong surfaces as a
subclass of InvoiceManagerError so the presentation layer can report it
with a single except clause.
"""


class InvoiceManagerError(Exception):
    """Base class for all Invoice Manager errors."""


class StorageUnavailableError(InvoiceManagerError):
    """Raised when writing to a persistence medium that is not available."""


class CorruptStoreError(InvoiceManagerError):
    """
    Raised when the persisted invoice collection cannot be deserialized.

    The offending blob is left in storage untouched.

    Attributes:
        key: Storage key holding the malformed value.
    """

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Malformed data under storage key {key!r}: {reason}")
        self.key = key
        self.reason = reason


class ExportError(InvoiceManagerError):
    """Raised when an invoice document cannot be rendered or written."""
