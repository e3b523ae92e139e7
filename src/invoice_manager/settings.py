"""
Environment-driven configuration for the Invoice Manager.

All values are read once at import time. Sender and bank defaults pre-fill
every new invoice; the user overwrites them per invoice in the editor.
"""

import os
from pathlib import Path

from invoice_manager.lib import paths

_TRUTHY = {"1", "true", "yes"}

# Store backend: "disk" or "memory"
STORE_KIND = os.getenv("INVOICE_MANAGER_STORE", "disk").lower()
DATA_DIR = Path(
    os.getenv("INVOICE_MANAGER_DATA_DIR", "") or paths.default_data_dir()
)

APP_PORT = int(os.getenv("INVOICE_MANAGER_APP_PORT", "8000"))
APP_TITLE = os.getenv("INVOICE_MANAGER_TITLE", "Invoices")

DEFAULT_DUE_DAYS = int(os.getenv("INVOICE_MANAGER_DUE_DAYS", "14"))
DEFAULT_LATE_FEE = float(os.getenv("INVOICE_MANAGER_LATE_FEE", "1"))

SENDER_NAME = os.getenv("INVOICE_MANAGER_SENDER_NAME", "CV Zen`cool")
SENDER_ADDRESS = os.getenv(
    "INVOICE_MANAGER_SENDER_ADDRESS",
    "Jl. Gang Bona 3 No. 103, Jakarta Timur, Cakung 13940",
)
SENDER_EMAIL = os.getenv("INVOICE_MANAGER_SENDER_EMAIL", "aczencool@gmail.com")
SENDER_PHONE = os.getenv("INVOICE_MANAGER_SENDER_PHONE", "085285564117")
SENDER_WEBSITE = os.getenv(
    "INVOICE_MANAGER_SENDER_WEBSITE", "https://zencool-conditioning.vercel.app/"
)

BANK_NAME = os.getenv("INVOICE_MANAGER_BANK", "Bank BCA")
BANK_ACCOUNT_NUMBER = os.getenv("INVOICE_MANAGER_ACCOUNT_NUMBER", "0123456789")

LOGO_URL = os.getenv(
    "INVOICE_MANAGER_LOGO_URL",
    "https://res.cloudinary.com/dr5pehdsw/image/upload/v1769828376/Logo_Zencool_pmyw1u.jpg",
)
# Seconds to wait for remote images while exporting a PDF
IMAGE_FETCH_TIMEOUT = int(os.getenv("INVOICE_MANAGER_IMAGE_TIMEOUT", "3"))

SHOW_AMOUNT_IN_WORDS = os.getenv(
    "INVOICE_MANAGER_AMOUNT_IN_WORDS", "true"
).lower() in _TRUTHY
