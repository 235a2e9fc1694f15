"""Exceptions raised while resolving job choices."""

from typing import Self


class JobChoiceError(ValueError):
    """Base exception for job choice parameter errors."""


class InvalidPathError(JobChoiceError):
    """The configured path does not resolve to an accessible folder."""

    def __init__(self, path: str, parameter_name: str | None = None) -> None:
        """Store the offending path and, if known, the parameter name."""
        self.path = path
        self.parameter_name = parameter_name
        if parameter_name is None:
            msg = f"Path '{path}' does not resolve to an accessible folder"
        else:
            msg = (
                f"Path '{path}' of parameter '{parameter_name}' does not resolve "
                "to an accessible folder"
            )
        super().__init__(msg)

    def with_parameter(self, parameter_name: str) -> Self:
        """Return a copy of this error naming the parameter it belongs to."""
        return type(self)(self.path, parameter_name)


class EmptyPathError(InvalidPathError):
    """The configured path has no segments."""


class PathNotFoundError(InvalidPathError):
    """A segment is missing, unreadable, or not a folder."""


class InvalidChoiceError(JobChoiceError):
    """The selected short name is not among the current choices."""

    def __init__(self, value: str, parameter_name: str) -> None:
        """Store the offending value and the parameter name."""
        self.value = value
        self.parameter_name = parameter_name
        super().__init__(f"Illegal choice '{value}' for parameter '{parameter_name}'")
