"""
Identifier generation for invoices and line items.

Identifiers are random UUID4 values rendered as 32 hex characters. With
122 random bits the probability of any collision stays below 1e-18 for a
collection of a million ids, far beyond a single-user invoice book.
"""

import uuid


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return uuid.uuid4().hex
