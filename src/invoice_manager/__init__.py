"""
Invoice Manager: create, edit, list, print and export invoices.

All invoices of a single user live as one serialized collection in a
string-keyed persistence medium (a diskcache directory by default).

Subpackages:
- lib: Logging, storage media, clock and id helpers
- models: Invoice domain models and serialization
- utils: Formatting and invoice aggregate logic
- services: The invoice store and its factory
- rendering: HTML/PDF documents for preview, print and export
- components: Reflex UI components

Main entry points:
- app.main(): Start the development server
- services.get_invoice_store(): The configured store
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
