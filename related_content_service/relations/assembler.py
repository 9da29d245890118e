"""Merge manual and automatic related content into the final list."""
from typing import Iterable, List, Optional

from related_content_service.models import Record


def unique_records(records: Iterable[Optional[Record]]) -> List[Record]:
    """First occurrence of every identity key, skipping missing records."""
    seen = set()
    unique = []
    for record in records:
        if record is None or record.key in seen:
            continue
        seen.add(record.key)
        unique.append(record)
    return unique


def remove_duplicates(manual: Iterable[Record], auto: Iterable[Optional[Record]]) -> List[Record]:
    """Automatic records whose identity is not already in the manual list."""
    manual_keys = {record.key for record in manual if record is not None}
    return [record for record in unique_records(auto) if record.key not in manual_keys]


def exclude_record(records: Iterable[Record], current: Record) -> List[Record]:
    return [record for record in records if record.key != current.key]


def assemble(
        manual: List[Record],
        auto: List[Record],
        current: Record,
        limit: int
) -> List[Record]:
    """
    Build the final related content list.

    Manual records come first in their resolved order, followed by automatic
    records not already present. The source record is removed and the list
    is cut to ``limit`` entries.

    Args:
        manual: Manually related records
        auto: Automatically related records, heaviest first
        current: Source record
        limit: Maximum number of records to return

    Returns:
        List of related records
    """
    if limit <= 0:
        return []

    manual = unique_records(manual)
    merged = manual + remove_duplicates(manual, auto)

    return exclude_record(merged, current)[:limit]
