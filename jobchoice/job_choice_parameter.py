"""A build parameter whose choices are the jobs below a registry folder."""

import time
from collections.abc import Callable

from jobchoice.choice_cache import DEFAULT_TTL_SECONDS, ChoiceCache
from jobchoice.choice_snapshot import ChoiceSnapshot
from jobchoice.errors import InvalidChoiceError, InvalidPathError
from jobchoice.path_resolver import PathResolver
from jobchoice.registry import RegistryClient
from jobchoice.string_parameter_value import StringParameterValue


class JobChoiceParameterDefinition:
    """Offers the jobs under a folder as choices, ordered by last build time.

    The selected short name is turned back into the job's full name. Choices
    are computed on construction, so a path that does not resolve fails
    immediately.
    """

    def __init__(
        self,
        name: str,
        path: str,
        registry: RegistryClient,
        *,
        description: str | None = None,
        default_value: str | None = None,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the parameter and compute its first set of choices."""
        self.name = name
        self.path = path
        self.description = description
        self.default_value = default_value
        self.cache = ChoiceCache(path, PathResolver(registry), ttl_seconds, clock)
        self._snapshot()

    def _snapshot(self, now: float | None = None) -> ChoiceSnapshot:
        """Return the cached snapshot, naming this parameter in path errors."""
        try:
            return self.cache.get_snapshot(now)
        except InvalidPathError as e:
            raise e.with_parameter(self.name) from e

    @property
    def choices(self) -> list[str]:
        """Current choices, least recently built first."""
        return self.list_choices()

    def list_choices(self, now: float | None = None) -> list[str]:
        """Return the current choices, refreshing them if they are stale."""
        return list(self._snapshot(now).choices)

    def resolve_value(self, short_name: str, now: float | None = None) -> str:
        """Return the full name of the chosen job."""
        full_name = self._snapshot(now).lookup(short_name)
        if full_name is None:
            raise InvalidChoiceError(short_name, self.name)
        return full_name

    def create_value(self, short_name: str) -> str:
        """Return the full name for a selection made by a user."""
        return self.resolve_value(short_name)

    def create_parameter_value(self, short_name: str) -> StringParameterValue:
        """Return the parameter value for a selection made by a user."""
        return StringParameterValue(
            self.name, self.resolve_value(short_name), self.description
        )

    def default_parameter_value(self) -> StringParameterValue | None:
        """Return the value for the configured default, if one is set."""
        if self.default_value is None:
            return None
        return self.create_parameter_value(self.default_value)
