"""Creation of job choice parameters from a loaded configuration."""

import logging
import time
from collections.abc import Callable
from typing import Any

from jobchoice.job_choice_parameter import JobChoiceParameterDefinition
from jobchoice.parameter_config import ParameterConfig
from jobchoice.registry import RegistryClient

logger = logging.getLogger(__name__)


def build_parameters(
    config: dict[str, Any],
    registry: RegistryClient,
    clock: Callable[[], float] = time.time,
) -> dict[str, JobChoiceParameterDefinition]:
    """Create every configured parameter, keyed by name.

    Raises the first path error encountered; no parameters are returned in
    that case.
    """
    cache = config.get("cache")
    if not isinstance(cache, dict):
        msg = f"The cache section must be a mapping, got {cache!r}"
        raise ValueError(msg)
    ttl = float(cache["ttl_seconds"])
    parameters: dict[str, JobChoiceParameterDefinition] = {}
    for raw in config.get("parameters") or []:
        entry = ParameterConfig.from_dict(raw)
        if entry.name in parameters:
            msg = f"Duplicate parameter name: {entry.name}"
            raise ValueError(msg)
        parameters[entry.name] = JobChoiceParameterDefinition(
            entry.name,
            entry.path,
            registry,
            description=entry.description,
            default_value=entry.default_value,
            ttl_seconds=ttl,
            clock=clock,
        )
        logger.info("Created parameter '%s' for path '%s'", entry.name, entry.path)
    return parameters
