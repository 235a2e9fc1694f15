"""Tests for the public job choice parameter."""

import pytest

from jobchoice.errors import (
    EmptyPathError,
    InvalidChoiceError,
    InvalidPathError,
    PathNotFoundError,
)
from jobchoice.job_choice_parameter import JobChoiceParameterDefinition
from jobchoice.string_parameter_value import StringParameterValue
from registry_doubles import FakeClock, FakeFolder, FakeJob, FakeRegistry, at


def test_construction_resolves_eagerly(
    registry: FakeRegistry, services: FakeFolder, clock: FakeClock
) -> None:
    """Verify that choices are computed when the parameter is created."""
    JobChoiceParameterDefinition("TARGET", "team/services", registry, clock=clock)
    assert services.listings == 1


def test_list_choices_orders_by_last_build(
    registry: FakeRegistry, clock: FakeClock
) -> None:
    """Verify that choices are ordered least recently built first."""
    param = JobChoiceParameterDefinition(
        "TARGET", "team/services", registry, clock=clock
    )
    assert param.list_choices() == ["worker", "web", "api"]
    assert param.choices == ["worker", "web", "api"]


def test_list_choices_within_ttl_enumerates_once(
    registry: FakeRegistry, services: FakeFolder, clock: FakeClock
) -> None:
    """Verify that listing twice within the TTL enumerates once."""
    param = JobChoiceParameterDefinition(
        "TARGET", "team/services", registry, clock=clock
    )
    first = param.list_choices()
    clock.advance(10)
    assert param.list_choices() == first
    assert services.listings == 1

    clock.advance(60)
    param.list_choices()
    assert services.listings == 2


def test_round_trip(registry: FakeRegistry, clock: FakeClock) -> None:
    """Verify that every choice resolves to a path ending in that choice."""
    param = JobChoiceParameterDefinition("TARGET", "team", registry, clock=clock)
    choices = param.list_choices()
    assert choices
    for choice in choices:
        assert param.resolve_value(choice).split("/")[-1] == choice


def test_resolve_value(registry: FakeRegistry, clock: FakeClock) -> None:
    """Verify that a short name maps to the job's full name."""
    param = JobChoiceParameterDefinition(
        "TARGET", "team/services", registry, clock=clock
    )
    assert param.resolve_value("web") == "team/services/web"
    assert param.create_value("api") == "team/services/api"


def test_invalid_choice(registry: FakeRegistry, clock: FakeClock) -> None:
    """Verify that an unknown short name names the value and the parameter."""
    param = JobChoiceParameterDefinition(
        "TARGET", "team/services", registry, clock=clock
    )
    with pytest.raises(InvalidChoiceError) as exc:
        param.resolve_value("doesNotExist")
    assert exc.value.value == "doesNotExist"
    assert exc.value.parameter_name == "TARGET"
    assert "doesNotExist" in str(exc.value)
    assert "TARGET" in str(exc.value)


def test_choice_that_disappeared_is_invalid(
    registry: FakeRegistry, services: FakeFolder, clock: FakeClock
) -> None:
    """Verify that a name removed from the registry is rejected after refresh."""
    param = JobChoiceParameterDefinition(
        "TARGET", "team/services", registry, clock=clock
    )
    assert param.resolve_value("web") == "team/services/web"
    services.children = [c for c in services.children if c.name != "web"]
    clock.advance(60)
    with pytest.raises(InvalidChoiceError):
        param.resolve_value("web")


def test_empty_path_fails_construction(registry: FakeRegistry) -> None:
    """Verify that an empty path is rejected when the parameter is created."""
    with pytest.raises(EmptyPathError) as exc:
        JobChoiceParameterDefinition("TARGET", "", registry)
    assert exc.value.parameter_name == "TARGET"


def test_unknown_path_fails_construction(registry: FakeRegistry) -> None:
    """Verify that an unresolvable path names the path and the parameter."""
    with pytest.raises(PathNotFoundError) as exc:
        JobChoiceParameterDefinition("TARGET", "team/missing", registry)
    assert "team/missing" in str(exc.value)
    assert "TARGET" in str(exc.value)


def test_path_removed_after_construction(clock: FakeClock) -> None:
    """Verify that listing fails with an invalid path once the folder is gone."""
    services = FakeFolder("services", children=[FakeJob("api", at(1))])
    root = FakeFolder("root", children=[services])
    param = JobChoiceParameterDefinition(
        "TARGET", "services", FakeRegistry(root), clock=clock
    )
    root.children = []
    clock.advance(60)
    with pytest.raises(InvalidPathError) as exc:
        param.list_choices()
    assert exc.value.parameter_name == "TARGET"


def test_create_parameter_value(registry: FakeRegistry, clock: FakeClock) -> None:
    """Verify that the parameter value carries name, path and description."""
    param = JobChoiceParameterDefinition(
        "TARGET",
        "team/services",
        registry,
        description="Service to deploy",
        clock=clock,
    )
    assert param.create_parameter_value("api") == StringParameterValue(
        "TARGET", "team/services/api", "Service to deploy"
    )


def test_default_parameter_value(registry: FakeRegistry, clock: FakeClock) -> None:
    """Verify that the default short name resolves like a selection."""
    param = JobChoiceParameterDefinition(
        "TARGET",
        "team/services",
        registry,
        default_value="worker",
        clock=clock,
    )
    default = param.default_parameter_value()
    assert default is not None
    assert default.value == "team/services/worker"


def test_no_default_parameter_value(registry: FakeRegistry, clock: FakeClock) -> None:
    """Verify that no default yields no value."""
    param = JobChoiceParameterDefinition(
        "TARGET", "team/services", registry, clock=clock
    )
    assert param.default_parameter_value() is None
