from __future__ import annotations

import pytest

from src.domain.exceptions import InvalidRouteError, MissingInputError, NoSuchStopError
from src.domain.models import Route, Station


def test_station_equality_is_by_exact_name() -> None:
    assert Station(name="Museum") == Station(name="Museum")
    assert Station(name="Museum") != Station(name="museum")
    assert hash(Station(name="Museum")) == hash(Station(name="Museum"))
    assert str(Station(name="Museum")) == "Museum"
    assert Station(name="Museum").check_invariant()


def test_station_rejects_none_name() -> None:
    with pytest.raises(MissingInputError):
        Station(name=None)  # type: ignore[arg-type]


def test_route_stop_numbers_are_one_based(r1: Route, a: Station, b: Station, c: Station) -> None:
    assert r1.num_stops == 3
    assert r1.get_stop_number(a) == 1
    assert r1.get_stop_number(c) == 3
    assert r1.get_stop(2) == b
    assert r1.first_stop == a
    assert r1.last_stop == c
    assert r1.check_invariant()


def test_route_next_stop(r1: Route, a: Station, b: Station, c: Station) -> None:
    assert r1.get_next_stop(a) == b
    assert r1.get_next_stop(b) == c
    assert r1.get_next_stop(c) is None


@pytest.mark.parametrize("number", [0, 4, -1])
def test_route_get_stop_out_of_range(r1: Route, number: int) -> None:
    with pytest.raises(NoSuchStopError):
        r1.get_stop(number)


def test_route_unknown_station_lookups_fail(r1: Route) -> None:
    z = Station(name="Z")
    assert not r1.stops_at(z)
    with pytest.raises(NoSuchStopError):
        r1.get_stop_number(z)
    with pytest.raises(NoSuchStopError):
        r1.get_next_stop(z)


def test_route_can_travel_only_forward(r1: Route, a: Station, b: Station, c: Station) -> None:
    assert r1.can_travel_from(a, c)
    assert r1.can_travel_from(b, c)
    assert not r1.can_travel_from(c, a)
    assert not r1.can_travel_from(b, b)
    assert not r1.can_travel_from(a, Station(name="Z"))


def test_route_can_travel_from_is_antisymmetric(r1: Route) -> None:
    for x in r1.stops:
        for y in r1.stops:
            assert not (r1.can_travel_from(x, y) and r1.can_travel_from(y, x))


@pytest.mark.parametrize("names", [[], ["A"], ["A", "B", "A"], ["A", "A"]])
def test_route_rejects_short_or_repeating_stops(names: list[str]) -> None:
    with pytest.raises(InvalidRouteError):
        Route(name="R", stops=[Station(name=n) for n in names])


def test_route_rejects_missing_input(a: Station) -> None:
    with pytest.raises(MissingInputError):
        Route(name="R", stops=None)  # type: ignore[arg-type]
    with pytest.raises(MissingInputError):
        Route(name=None, stops=[a, Station(name="B")])  # type: ignore[arg-type]
    with pytest.raises(MissingInputError):
        Route(name="R", stops=[a, None])  # type: ignore[list-item]


def test_route_rejects_blank_name(a: Station, b: Station) -> None:
    with pytest.raises(InvalidRouteError):
        Route(name="  ", stops=[a, b])


def test_route_equality_is_structural(a: Station, b: Station) -> None:
    r = Route(name="R", stops=[a, b])
    assert r == Route(name="R", stops=(Station(name="A"), Station(name="B")))
    assert r != Route(name="R", stops=[b, a])
    assert {r: 1}[Route(name="R", stops=[a, b])] == 1


def test_route_str(r1: Route) -> None:
    assert str(r1) == "R1: A, B, C"
