from __future__ import annotations

import pytest

from src.domain.models import Route, Service, Station


@pytest.fixture
def a() -> Station:
    return Station(name="A")


@pytest.fixture
def b() -> Station:
    return Station(name="B")


@pytest.fixture
def c() -> Station:
    return Station(name="C")


@pytest.fixture
def r1(a: Station, b: Station, c: Station) -> Route:
    return Route(name="R1", stops=[a, b, c])


@pytest.fixture
def two_route_timetable(a: Station, b: Station, c: Station) -> dict[Route, list[Service]]:
    """R1: A -> B at 0-10, R2: B -> C at 15-30."""

    r1 = Route(name="R1", stops=[a, b])
    r2 = Route(name="R2", stops=[b, c])
    return {
        r1: [Service(route=r1, times=[0, 10])],
        r2: [Service(route=r2, times=[15, 30])],
    }
