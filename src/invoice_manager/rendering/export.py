"""
Invoice export to HTML and PDF files.

PDFs are produced by WeasyPrint from the same HTML used for the preview.
Remote images (the sender logo) are fetched with a fixed timeout so a slow
or unreachable image host cannot stall an export.
"""

from io import BytesIO
from pathlib import Path

from invoice_manager import settings
from invoice_manager.errors import ExportError
from invoice_manager.lib import logs
from invoice_manager.models.invoice import Invoice
from invoice_manager.rendering.document import document_filename, render_invoice_html

LOG = logs.logger(__file__)


def _html_to_pdf(html: str, base_url: str | None = None) -> bytes:
    """Render an HTML string to a PDF byte string."""
    # WeasyPrint loads native libraries on import
    from weasyprint import HTML, URLFetcher

    url_fetcher = URLFetcher(timeout=settings.IMAGE_FETCH_TIMEOUT)
    output = BytesIO()
    try:
        HTML(string=html, base_url=base_url, url_fetcher=url_fetcher).write_pdf(output)
        return output.getvalue()
    finally:
        output.close()


def render_pdf(invoice: Invoice) -> bytes:
    """
    Render the invoice document as an A4 PDF.

    Raises:
        ExportError: If the PDF cannot be produced.
    """
    try:
        return _html_to_pdf(render_invoice_html(invoice))
    except Exception as exc:
        LOG.error("render_pdf - invoice:%s failed: %s", invoice.id, exc)
        raise ExportError(f"Failed to render PDF for invoice {invoice.invoice_number}") from exc


def export_html(invoice: Invoice, directory: str | Path) -> Path:
    """Write the invoice HTML document into directory and return its path."""
    path = Path(directory) / document_filename(invoice, "html")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_invoice_html(invoice), encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Failed to write {path}") from exc
    LOG.info("export_html - invoice:%s path:%s", invoice.id, path)
    return path


def export_pdf(invoice: Invoice, directory: str | Path) -> Path:
    """
    Write the invoice PDF into directory and return its path.

    Raises:
        ExportError: If rendering or writing fails.
    """
    path = Path(directory) / document_filename(invoice, "pdf")
    data = render_pdf(invoice)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise ExportError(f"Failed to write {path}") from exc
    LOG.info("export_pdf - invoice:%s path:%s bytes:%s", invoice.id, path, len(data))
    return path
