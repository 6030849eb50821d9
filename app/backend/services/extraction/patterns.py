"""
Field patterns for illustration documents.

Each field maps to an ordered tuple of ``FieldPattern`` entries. Patterns are
tried in order and the first one that captures a non-blank value wins, so
the order below is the priority order. Different issuers lay out the same
figure as quoted key/value rows, plain "Label: value" lines or fixed-width
projection tables, hence several alternatives per field.
"""

import re
from dataclasses import dataclass
from typing import Callable

from .cleaning import clean_currency, identity

# A run of digits and thousands separators ending on a digit
_AMOUNT = r"([\d,]+\d)"
# A numeric column of a fixed-width projection table
_COLUMN = r"[\d,.]+"


@dataclass(frozen=True)
class FieldPattern:
    """A regular expression with exactly one capture group and its cleaner."""

    pattern: re.Pattern[str]
    clean: Callable[[str], str] = identity


def _quoted(label: str) -> str:
    """Pattern for a ``"Label","value"`` row, capturing the value."""
    return rf'"{label}\s*","([^"]+)"'


def _quoted_amount(label: str) -> str:
    """
    Pattern for a ``"Label","...amount"`` row, capturing the first amount.

    Empty cells between the label and the value (``"Label","","250,000"``)
    are skipped.
    """
    return rf'"{label}\s*",(?:"\s*",)*"[^"]*?{_AMOUNT}'


def _year_row(year: int) -> str:
    """Pattern for a ``"Year N","guaranteed","current"`` row, capturing current."""
    return rf'"Year {year}\s*","[^"]*?",\s*"([^"]+)"'


def _projection_row(prefix: str) -> str:
    """
    Pattern for a fixed-width projection row.

    The row starts with ``prefix`` (policy year and attained age) followed by
    five numeric columns; the sixth column is captured and one more numeric
    column must follow it.
    """
    leading = r"\s+".join([_COLUMN] * 5)
    return rf"{prefix}\s+{leading}\s+({_COLUMN})\s+{_COLUMN}"


def _patterns(*regexes: str, clean: Callable[[str], str] = identity) -> tuple[FieldPattern, ...]:
    return tuple(FieldPattern(re.compile(regex), clean) for regex in regexes)


FIELD_PATTERNS: dict[str, tuple[FieldPattern, ...]] = {
    "product_code": _patterns(_quoted("Product Code")),
    "currency": _patterns(_quoted("Currency")),
    "face_amount": _patterns(
        _quoted_amount("Face Amount"),
        rf"Sum Assured:\s*.*?{_AMOUNT}",
        rf"Initial Death Benefit:\s*.*?{_AMOUNT}",
        rf"SPECIFIED FACE AMOUNT:\s*.*?{_AMOUNT}",
        rf"SUM ASSURED:\s*.*?{_AMOUNT}",
        clean=clean_currency,
    ),
    "annual_premium": _patterns(
        _quoted_amount("10 Pay"),
        rf"Annualised Premium:\s*.*?{_AMOUNT}",
        r"Initial Planned Premium:\s*.*?([\d,]+\.\d{2})",
        rf"INITIAL PREMIUM:\s*.*?{_AMOUNT}",
        rf"Initial Premium:\s*.*?{_AMOUNT}",
        clean=clean_currency,
    ),
    "total_10_pay_premium": _patterns(
        r"Total 10 Pay Premium\s*([,\d]+)",
        clean=clean_currency,
    ),
    "cash_value_year_10": _patterns(
        _year_row(10),
        _projection_row(r"10\s+60"),
        clean=clean_currency,
    ),
    "cash_value_year_20": _patterns(
        _year_row(20),
        _projection_row(r"#20\s+70"),
        clean=clean_currency,
    ),
    "cash_value_year_30": _patterns(
        _year_row(30),
        _projection_row(r"#30\s+80"),
        clean=clean_currency,
    ),
    "guaranteed_interest_rate": _patterns(_quoted("Guaranteed Interest Rate")),
    "surrender_penalty_period": _patterns(_quoted("Surrender Penalty Period")),
    "sp_rating": _patterns(_quoted(r"\(S&P\) Financial Strength Rating")),
}
