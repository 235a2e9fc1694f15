"""Shared fixtures for the job choice tests."""

import pytest

from registry_doubles import FakeClock, FakeFolder, FakeJob, FakeRegistry, at


@pytest.fixture
def clock() -> FakeClock:
    """Fixture providing a manually advanced clock."""
    return FakeClock()


@pytest.fixture
def services() -> FakeFolder:
    """Fixture providing the team/services folder."""
    return FakeFolder(
        "services",
        children=[
            FakeJob("api", at(300)),
            FakeJob("worker", at(100)),
            FakeJob("web", at(200)),
        ],
    )


@pytest.fixture
def registry(services: FakeFolder) -> FakeRegistry:
    """Fixture providing a registry with a team folder holding services."""
    team = FakeFolder("team", children=[services, FakeJob("deploy", at(50))])
    return FakeRegistry(FakeFolder("root", children=[team]))
