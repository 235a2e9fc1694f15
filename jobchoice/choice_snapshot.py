"""Immutable result of one enumeration of the configured folder."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from jobchoice.item_record import ItemRecord
from jobchoice.sort_by_last_activity import sort_by_last_activity


@dataclass(frozen=True)
class ChoiceSnapshot:
    """Short name to full name mapping plus the display order of the short names."""

    paths: Mapping[str, str]
    choices: tuple[str, ...]

    # Unhashable: paths is a mappingproxy
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_records(cls, records: Iterable[ItemRecord]) -> "ChoiceSnapshot":
        """Build a snapshot, letting later duplicates of a short name win."""
        latest: dict[str, ItemRecord] = {}
        for record in records:
            # Re-insert so a duplicate takes the position of its last occurrence
            latest.pop(record.short_name, None)
            latest[record.short_name] = record

        paths = {name: record.full_name for name, record in latest.items()}
        choices = tuple(sort_by_last_activity(latest.values()))
        return cls(MappingProxyType(paths), choices)

    def lookup(self, short_name: str) -> str | None:
        """Return the full name for a short name, or None if it is not a choice."""
        return self.paths.get(short_name)
