from __future__ import annotations

import pytest

from src.domain.exceptions import InvalidServiceError, MissingInputError
from src.domain.models import (
    Route,
    Service,
    Station,
    check_timetable,
    find_station,
    routes_by_station,
    stations_of,
)


def test_routes_by_station_indexes_every_stop(two_route_timetable, a: Station, b: Station, c: Station) -> None:
    index = routes_by_station(two_route_timetable)
    assert set(index) == {a, b, c}
    assert [r.name for r in index[b]] == ["R1", "R2"]
    assert stations_of(two_route_timetable) == [a, b, c]


def test_find_station(two_route_timetable, b: Station) -> None:
    assert find_station(two_route_timetable, "B") == b
    assert find_station(two_route_timetable, "b") is None


def test_check_timetable_accepts_valid(two_route_timetable) -> None:
    check_timetable(two_route_timetable)


def test_check_timetable_rejects_overtaking(r1: Route) -> None:
    timetable = {
        r1: [Service(route=r1, times=[0, 10, 30]), Service(route=r1, times=[5, 15, 25])]
    }
    with pytest.raises(InvalidServiceError):
        check_timetable(timetable)


def test_check_timetable_rejects_shared_departure(r1: Route) -> None:
    timetable = {
        r1: [Service(route=r1, times=[0, 10, 20]), Service(route=r1, times=[0, 12, 22])]
    }
    with pytest.raises(InvalidServiceError):
        check_timetable(timetable)


def test_check_timetable_rejects_service_of_other_route(r1: Route, a: Station, b: Station) -> None:
    other = Route(name="R9", stops=[a, b])
    with pytest.raises(InvalidServiceError):
        check_timetable({r1: [Service(route=other, times=[0, 10])]})


def test_check_timetable_rejects_missing_input(r1: Route) -> None:
    with pytest.raises(MissingInputError):
        check_timetable(None)  # type: ignore[arg-type]
    with pytest.raises(MissingInputError):
        check_timetable({r1: [None]})  # type: ignore[list-item]
