"""Data model for an enumerated registry item."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ItemRecord:
    """A job or folder found under the configured path."""

    short_name: str
    full_name: str
    last_activity: datetime | None = None  # None if the item never ran
