"""Protocols describing the hierarchical job registry consumed by the resolver."""

from collections.abc import Iterable
from datetime import datetime
from enum import Enum
from typing import Protocol, runtime_checkable


class Permission(Enum):
    """Permissions checked against the calling identity."""

    READ = "read"


@runtime_checkable
class Item(Protocol):
    """A named entity in the registry (folder or job)."""

    name: str
    full_name: str  # slash-delimited path from the registry root

    def has_permission(self, permission: Permission) -> bool:
        """Return whether the current caller holds the permission on this item."""
        ...


@runtime_checkable
class ItemGroup(Protocol):
    """A node that contains child items (the root or a folder)."""

    def get_item(self, name: str) -> Item | None:
        """Return the direct child with the exact name, if any."""
        ...

    def get_all_items(self) -> Iterable[object]:
        """Return every item transitively contained in this group."""
        ...


@runtime_checkable
class Folder(Item, ItemGroup, Protocol):
    """An item that is itself a group."""


@runtime_checkable
class Build(Protocol):
    """A completed activity of a job."""

    timestamp: datetime


@runtime_checkable
class Job(Item, Protocol):
    """An item that records builds."""

    def get_last_build(self) -> Build | None:
        """Return the most recent build, or None if the job never ran."""
        ...


class RegistryClient(Protocol):
    """Entry point into the registry."""

    def get_root(self) -> ItemGroup | None:
        """Return the root group, or None if no registry is initialized."""
        ...
