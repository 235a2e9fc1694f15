"""Data model for the value produced by a job choice parameter."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StringParameterValue:
    """A resolved parameter value handed to the pipeline."""

    name: str
    value: str  # full name of the selected job
    description: str | None = None
