"""Resolution of a configured path to a folder in the job registry."""

import logging

from jobchoice.errors import EmptyPathError, PathNotFoundError
from jobchoice.namespace_path import parse_namespace_path
from jobchoice.registry import Folder, ItemGroup, Permission, RegistryClient

logger = logging.getLogger(__name__)


class PathResolver:
    """Walks a path through the registry, checking read access on the way down."""

    def __init__(self, registry: RegistryClient) -> None:
        """Initialize the resolver with the registry to walk."""
        self.registry = registry

    def resolve(self, path: str) -> ItemGroup:
        """Return the folder the path points to.

        Every intermediate segment must be a folder the caller can read. The
        terminal segment must be a folder; its permissions are left to the
        registry's own item enumeration. Missing and unreadable segments raise
        the same error so callers cannot probe for hidden folders.
        """
        segments = parse_namespace_path(path)
        if not segments:
            raise EmptyPathError(path)

        parent = self.registry.get_root()
        if parent is None:
            logger.debug("No registry root available while resolving '%s'", path)
            raise PathNotFoundError(path)

        *intermediate, last = segments
        for segment in intermediate:
            item = parent.get_item(segment)
            if not isinstance(item, Folder):
                logger.debug("Segment '%s' of '%s' is not a folder", segment, path)
                raise PathNotFoundError(path)
            if not item.has_permission(Permission.READ):
                logger.debug("Segment '%s' of '%s' is not readable", segment, path)
                raise PathNotFoundError(path)
            parent = item

        terminal = parent.get_item(last)
        if not isinstance(terminal, ItemGroup):
            logger.debug("Terminal segment '%s' of '%s' is not a folder", last, path)
            raise PathNotFoundError(path)
        return terminal
