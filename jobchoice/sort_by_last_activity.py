"""Ordering of choices by the most recent activity of each item."""

from collections.abc import Iterable

from jobchoice.item_record import ItemRecord


def sort_by_last_activity(records: Iterable[ItemRecord]) -> list[str]:
    """Return short names, least recently active first.

    Items that never ran sort before all others. The sort is stable, so
    equal timestamps keep enumeration order.
    """
    ordered = sorted(
        records,
        key=lambda r: (r.last_activity is not None, r.last_activity),
    )
    return [r.short_name for r in ordered]
