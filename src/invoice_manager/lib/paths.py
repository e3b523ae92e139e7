"""
Path utilities for the Invoice Manager.

Provides convenience functions for common path operations like
getting temporary directories.
"""

import tempfile
from pathlib import Path


def temp_dir() -> Path:
    """
    Return the system temporary directory as a Path.

    Returns:
        Path object pointing to the system temp directory.
    """
    return Path(tempfile.gettempdir())


def default_data_dir() -> Path:
    """Return the default directory for the disk-backed invoice store."""
    return temp_dir() / "invoice_manager"
