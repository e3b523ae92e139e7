"""
Formatting helpers for amounts, dates and numbers.

Amounts follow Indonesian conventions (IDR, ``.`` as thousands separator,
``,`` as decimal separator). Dates are rendered in the short English form
used on invoice documents, e.g. ``Jan 15, 2025``.

All functions are pure and never mutate their inputs.
"""

import math
import re
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Context, Decimal

CURRENCY_SYMBOL = "Rp"
INVALID_DATE = "Invalid Date"

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_ONES = ("", "satu", "dua", "tiga", "empat", "lima", "enam", "tujuh", "delapan", "sembilan")
_TEENS = (
    "sepuluh", "sebelas", "dua belas", "tiga belas", "empat belas",
    "lima belas", "enam belas", "tujuh belas", "delapan belas", "sembilan belas",
)
_TENS = (
    "", "", "dua puluh", "tiga puluh", "empat puluh",
    "lima puluh", "enam puluh", "tujuh puluh", "delapan puluh", "sembilan puluh",
)
_SCALES = ("", "ribu", "juta", "miliar", "triliun")
_ZERO_WORD = "nol"
SPELLABLE_LIMIT = 1000 ** len(_SCALES)

_NON_NUMERIC = re.compile(r"[^\d.,]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _round_half_up(value: float, fraction_digits: int = 0) -> Decimal:
    exact = Decimal(str(value))
    # quantize fails when the result has more digits than the context precision
    precision = max(28, exact.adjusted() + fraction_digits + 2)
    return exact.quantize(
        Decimal(1).scaleb(-fraction_digits),
        rounding=ROUND_HALF_UP,
        context=Context(prec=precision),
    )


def format_number(value: float, fraction_digits: int = 3) -> str:
    """
    Format a number with Indonesian digit grouping.

    Trailing zero fraction digits are dropped, so ``200000`` renders as
    ``200.000`` and ``1234.5`` as ``1.234,5``.

    Args:
        value: Number to format.
        fraction_digits: Maximum number of fraction digits to keep.
    """
    if not math.isfinite(value):
        return _non_finite_text(value)
    rounded = _round_half_up(value, fraction_digits)
    sign = "-" if rounded < 0 else ""
    integer, _, fraction = f"{abs(rounded):f}".partition(".")
    grouped = f"{int(integer):,}".replace(",", ".")
    fraction = fraction.rstrip("0")
    return f"{sign}{grouped},{fraction}" if fraction else f"{sign}{grouped}"


def _non_finite_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "-\u221e" if value < 0 else "\u221e"


def format_currency(value: float) -> str:
    """
    Format a number as Indonesian Rupiah with no fraction digits.

    Rounding only affects the returned text, e.g. ``200000 -> "Rp200.000"``
    and ``0 -> "Rp0"``.
    """
    text = format_number(value, fraction_digits=0)
    if text.startswith("-"):
        return f"-{CURRENCY_SYMBOL}{text[1:]}"
    return f"{CURRENCY_SYMBOL}{text}"


def parse_iso_date(value: str | date | None) -> date | None:
    """Parse an ISO date or datetime string, returning None when invalid."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None


def format_date(value: str | date | None) -> str:
    """
    Render an ISO date string as ``Mon D, YYYY``.

    Returns the ``Invalid Date`` literal for text that cannot be parsed.
    """
    parsed = parse_iso_date(value)
    if parsed is None:
        return INVALID_DATE
    return f"{_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def format_date_for_form(value: str | date) -> str:
    """Return a date as ``YYYY-MM-DD``; strings are passed through as-is."""
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def calculate_due_date(issued_date: str | date, days: int = 14) -> str:
    """
    Add days to an issued date.

    Raises:
        ValueError: If issued_date cannot be parsed.
    """
    parsed = parse_iso_date(issued_date)
    if parsed is None:
        raise ValueError(f"Invalid issued date: {issued_date!r}")
    return format_date_for_form(parsed + timedelta(days=days))


def parse_currency(text: str | None) -> float:
    """
    Parse a user-typed amount, defaulting to zero.

    Everything except digits, ``.`` and ``,`` is dropped and the first
    comma becomes a decimal point; the longest leading number wins, so
    ``"Rp 1,5"`` parses as ``1.5``. Digit runs too long for a float give
    zero as well.
    """
    if not text:
        return 0.0
    cleaned = _NON_NUMERIC.sub("", str(text))
    normalized = cleaned.replace(",", ".", 1)
    match = _LEADING_NUMBER.match(normalized)
    if not match:
        return 0.0
    value = float(match.group(0))
    return value if math.isfinite(value) else 0.0


def truncate(text: str, length: int) -> str:
    """Shorten text to length characters, appending an ellipsis when cut."""
    if len(text) <= length:
        return text
    return text[:length] + "..."


def number_to_words(number: int | float) -> str:
    """
    Spell out a non-negative integer in Indonesian.

    Digits are processed in chunks of three, each followed by its scale
    word (ribu, juta, miliar, triliun). Floats are truncated toward zero.

    One thousand is spelled "seribu", the everyday Indonesian form, and not
    "satu ribu"; larger multiples keep the count word ("dua ribu").

    Raises:
        ValueError: If number is negative or exceeds the triliun scale.
    """
    number = int(number)
    if number < 0:
        raise ValueError(f"Cannot spell a negative number: {number}")
    if number >= SPELLABLE_LIMIT:
        raise ValueError(f"Number too large to spell: {number}")
    if number == 0:
        return _ZERO_WORD

    words: list[str] = []
    scale_index = 0
    while number > 0:
        number, chunk = divmod(number, 1000)
        if chunk:
            if chunk == 1 and scale_index == 1:
                words.insert(0, "seribu")
            else:
                words.insert(0, f"{_chunk_to_words(chunk)} {_SCALES[scale_index]}".strip())
        scale_index += 1
    return " ".join(words)


def _chunk_to_words(number: int) -> str:
    """Spell out a number between 1 and 999."""
    if number < 10:
        return _ONES[number]
    if number < 20:
        return _TEENS[number - 10]
    if number < 100:
        tens, ones = divmod(number, 10)
        return f"{_TENS[tens]} {_ONES[ones]}" if ones else _TENS[tens]
    hundreds, remainder = divmod(number, 100)
    hundred_word = "seratus" if hundreds == 1 else f"{_ONES[hundreds]} ratus"
    if remainder == 0:
        return hundred_word
    return f"{hundred_word} {_chunk_to_words(remainder)}"


def amount_in_words(value: float) -> str:
    """Spell out a rounded rupiah amount, e.g. ``"dua ratus ribu rupiah"``."""
    rounded = int(_round_half_up(value))
    words = number_to_words(abs(rounded))
    if rounded < 0:
        words = f"minus {words}"
    return f"{words} rupiah"


def can_spell_amount(value: float) -> bool:
    """Check whether amount_in_words() can spell the rounded value."""
    if not math.isfinite(value):
        return False
    return abs(int(_round_half_up(value))) < SPELLABLE_LIMIT
