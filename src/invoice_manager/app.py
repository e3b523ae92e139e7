"""
Reflex application entry point for the Invoice Manager.

This module initializes the Reflex app and registers the list and editor
pages.
"""

import reflex as rx

from invoice_manager import settings
from invoice_manager.components import invoice_editor, invoice_list
from invoice_manager.lib import logs
from invoice_manager.state import InvoiceEditorState, InvoiceListState

LOG = logs.logger(__file__)
LOG.info("store: %s data_dir: %s", settings.STORE_KIND, settings.DATA_DIR)

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"


def page_header(subtitle: str) -> rx.Component:
    """Build the title area at the top of each page."""
    return rx.box(
        rx.heading(settings.APP_TITLE, size="6", as_="h1"),
        rx.text(subtitle, class_name="muted"),
        class_name="page-header",
    )


def _shell(*children: rx.Component) -> rx.Component:
    return rx.box(
        rx.box(*children, class_name="app-container"),
        class_name="app-shell",
    )


def index() -> rx.Component:
    """Invoice list page."""
    return _shell(page_header("Create, print and export invoices."), invoice_list())


def editor() -> rx.Component:
    """Invoice editor page, used for both new and existing invoices."""
    return _shell(page_header("Edit invoice"), invoice_editor())


app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(index, route="/", title=settings.APP_TITLE, on_load=InvoiceListState.on_load)
# Registered before the dynamic route so "new" is not taken for an id
app.add_page(
    editor,
    route="/invoice/new",
    title="New invoice",
    on_load=InvoiceEditorState.load_new,
)
app.add_page(
    editor,
    route="/invoice/[invoice_id]",
    title="Invoice",
    on_load=InvoiceEditorState.load_existing,
)


def main() -> None:
    """Entrypoint used by `uv run invoice_manager`."""
    import subprocess
    import sys

    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--frontend-port", str(settings.APP_PORT)]
    )


if __name__ == "__main__":
    main()
