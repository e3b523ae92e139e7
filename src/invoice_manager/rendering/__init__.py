"""
Document rendering for invoices.

- document: shared display context plus HTML for preview and print
- export: HTML and PDF files for download
"""

from invoice_manager.rendering.document import (
    build_document_context,
    document_filename,
    render_invoice_html,
    render_print_html,
)
from invoice_manager.rendering.export import export_html, export_pdf, render_pdf

__all__ = [
    "build_document_context",
    "document_filename",
    "export_html",
    "export_pdf",
    "render_invoice_html",
    "render_pdf",
    "render_print_html",
]
