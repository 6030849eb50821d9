"""
Value cleaners applied to a captured field value before it is stored.
"""

import re

_CURRENCY_NOISE = re.compile(r"[$,]")


def identity(value: str) -> str:
    return value


def clean_currency(value: str) -> str:
    """Remove dollar signs and thousands separators, then trim whitespace."""
    return _CURRENCY_NOISE.sub("", value).strip()
