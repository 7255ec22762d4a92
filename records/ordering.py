"""Chronological ordering and date lookup over appointment records.

Dates and times are compared as plain strings. That matches chronological
order only for zero-padded ``YYYY-MM-DD`` and ``HH:MM`` values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from records import AppointmentRecord


def composite_key(record: "AppointmentRecord") -> str:
    return record.composite_key


def sort_by_datetime(records: List["AppointmentRecord"]) -> None:
    """Sort ``records`` in place, ascending by date then time."""

    records.sort(key=composite_key)


def binary_search_by_date(
    records: Sequence["AppointmentRecord"], target_date: str
) -> Optional[int]:
    """Return the index of a record dated ``target_date``, or ``None``.

    ``records`` must already be sorted by date. When several records share the
    date, whichever one the midpoint probes first is returned.
    """

    low = 0
    high = len(records) - 1
    while low <= high:
        mid = low + (high - low) // 2
        current = records[mid].date
        if current == target_date:
            return mid
        if current < target_date:
            low = mid + 1
        else:
            high = mid - 1
    return None


def date_run(records: Sequence["AppointmentRecord"], index: int) -> range:
    """Widen a search hit to every adjacent record sharing its date."""

    target_date = records[index].date
    start = index
    while start > 0 and records[start - 1].date == target_date:
        start -= 1
    end = index + 1
    while end < len(records) and records[end].date == target_date:
        end += 1
    return range(start, end)


__all__ = ["binary_search_by_date", "composite_key", "date_run", "sort_by_datetime"]
