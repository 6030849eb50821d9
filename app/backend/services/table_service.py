"""
Sorting and filtering of extracted records for the comparison table.

Everything here is a pure function of its inputs. The records passed in are
never reordered or modified; a new list is returned.
"""

import logging
import re
from collections.abc import Sequence

# Handle both package imports and standalone imports
try:
    from ..models import FIELD_ATTRIBUTES, ExtractedRecord, SortConfig, SortDirection
except ImportError:
    from models import FIELD_ATTRIBUTES, ExtractedRecord, SortConfig, SortDirection

logger = logging.getLogger(__name__)

# Fields compared as numbers rather than text
NUMERIC_FIELDS = frozenset(
    {
        "faceAmount",
        "annualPremium",
        "total10PayPremium",
        "cashValueYear10",
        "cashValueYear20",
        "cashValueYear30",
    }
)

_LEADING_NUMBER = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class InvalidSortKeyError(Exception):
    """Raised when a sort key does not name a record field."""

    pass


def parse_number(value: str | None) -> float:
    """
    Read the leading number of a value, treating anything unparseable as 0.

    Only the numeric prefix is considered, so "12.5%" reads as 12.5 while
    "N/A" and empty values read as 0. A signed "Infinity" prefix reads as
    infinite.
    """
    if value is None:
        return 0.0
    match = _LEADING_NUMBER.match(str(value).strip())
    if not match:
        return 0.0
    return float(match.group(0))


def validate_sort_key(key: str) -> str:
    if key not in FIELD_ATTRIBUTES:
        raise InvalidSortKeyError(
            f"Unknown sort key '{key}'. Expected one of: {', '.join(FIELD_ATTRIBUTES)}"
        )
    return key


def toggle_sort(current: SortConfig, key: str) -> SortConfig:
    """
    Apply a column selection to the active sort.

    Selecting the active column flips its direction; selecting any other
    column sorts by it ascending.
    """
    validate_sort_key(key)
    if current.key == key and current.direction == SortDirection.ASCENDING:
        return SortConfig(key=key, direction=SortDirection.DESCENDING)
    return SortConfig(key=key, direction=SortDirection.ASCENDING)


def sort_records(
    records: Sequence[ExtractedRecord], sort_config: SortConfig
) -> list[ExtractedRecord]:
    """
    Stable-sort a copy of the records by the configured field.

    Descending order only swaps non-equal pairs: records with equal keys keep
    their input order in both directions.
    """
    attribute = FIELD_ATTRIBUTES[validate_sort_key(sort_config.key)]

    if sort_config.key in NUMERIC_FIELDS:
        def sort_value(record: ExtractedRecord):
            return parse_number(getattr(record, attribute, None))
    else:
        def sort_value(record: ExtractedRecord):
            value = getattr(record, attribute, None)
            return str(value).lower() if value is not None else ""

    return sorted(
        records,
        key=sort_value,
        reverse=sort_config.direction == SortDirection.DESCENDING,
    )


def matches_filter(record: ExtractedRecord, filter_text: str) -> bool:
    """Whether any field of the record contains the text, ignoring case."""
    needle = filter_text.lower()
    return any(
        needle in str(value).lower()
        for value in record.model_dump().values()
        if value is not None
    )


def filter_records(
    records: Sequence[ExtractedRecord], filter_text: str
) -> list[ExtractedRecord]:
    if not filter_text:
        return list(records)
    return [record for record in records if matches_filter(record, filter_text)]


def build_view(
    records: Sequence[ExtractedRecord],
    sort_config: SortConfig,
    filter_text: str,
) -> list[ExtractedRecord]:
    """
    Derive the displayed table from the current batch.

    Args:
        records: Records of the current batch in extraction order.
        sort_config: Active sort key and direction.
        filter_text: Free-text filter; empty keeps every record.

    Returns:
        Sorted records that pass the filter.
    """
    view = filter_records(sort_records(records, sort_config), filter_text)
    logger.debug(
        "Built view: %d of %d records (sort=%s %s, filter=%r)",
        len(view),
        len(records),
        sort_config.key,
        sort_config.direction.value,
        filter_text,
    )
    return view
