"""
Pattern-based field extraction from illustration text.

Works on the plain text produced by the PDF text service and never raises
for missing data: a field no pattern can locate is reported as "N/A".
"""

import logging
from collections.abc import Iterable

# Handle both package imports and standalone imports
try:
    from ...models import NOT_AVAILABLE, ExtractedRecord
except ImportError:
    from models import NOT_AVAILABLE, ExtractedRecord

from .patterns import FIELD_PATTERNS, FieldPattern

logger = logging.getLogger(__name__)


def first_match(text: str, patterns: Iterable[FieldPattern]) -> str:
    """
    Return the cleaned value of the first pattern that matches ``text``.

    A pattern only counts as a match if its captured group is non-empty
    after trimming whitespace; otherwise the next pattern is tried.

    Args:
        text: Full document text.
        patterns: Candidate patterns in priority order.

    Returns:
        The cleaned captured value, or "N/A" when nothing matched.
    """
    for field_pattern in patterns:
        match = field_pattern.pattern.search(text)
        if match and match.group(1) and match.group(1).strip():
            return field_pattern.clean(match.group(1))
    return NOT_AVAILABLE


def extract_fields(text: str) -> dict[str, str]:
    """
    Extract every known field from a document's text.

    Args:
        text: Full document text (pages joined by newlines).

    Returns:
        Mapping of record attribute name to value for all fields except
        the file name, which the caller attaches.
    """
    fields = {name: first_match(text, patterns) for name, patterns in FIELD_PATTERNS.items()}
    logger.debug(
        "Resolved %d of %d fields",
        sum(1 for value in fields.values() if value != NOT_AVAILABLE),
        len(fields),
    )
    return fields


def extract_record(file_name: str, text: str) -> ExtractedRecord:
    """Build the record for one document from its name and text."""
    return ExtractedRecord(file_name=file_name, **extract_fields(text))
