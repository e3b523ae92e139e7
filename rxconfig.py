"""Reflex configuration for the Invoice Manager application."""

import reflex as rx

config = rx.Config(
    app_name="invoice_manager",
    # Use the src directory structure
    app_module_import="invoice_manager.app",
)
