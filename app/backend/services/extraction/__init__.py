"""
Field extraction package for illustration documents.

This package provides:
- patterns: Ordered candidate patterns per field
- cleaning: Value cleaners applied to captured values
- extractor: First-valid-match evaluation producing extracted records
"""

from .cleaning import clean_currency, identity
from .extractor import extract_fields, extract_record, first_match
from .patterns import FIELD_PATTERNS, FieldPattern

__all__ = [
    "FIELD_PATTERNS",
    "FieldPattern",
    "clean_currency",
    "extract_fields",
    "extract_record",
    "first_match",
    "identity",
]
