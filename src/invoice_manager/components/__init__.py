"""
Reflex UI components for the Invoice Manager.

- invoice_list: Table of stored invoices with delete confirmation
- invoice_editor: Invoice form with line items and live document preview
- confirm_dialog: Alert dialog used before destructive actions
"""

from invoice_manager.components.invoice_editor import invoice_editor
from invoice_manager.components.invoice_list import invoice_list, status_badge

__all__ = ["invoice_editor", "invoice_list", "status_badge"]
