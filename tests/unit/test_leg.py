from __future__ import annotations

import pytest

from src.domain.exceptions import InvalidJourneyError, MissingInputError
from src.domain.models import Leg, Route, Service, Station


def test_leg_times_come_from_service(r1: Route, a: Station, b: Station, c: Station) -> None:
    s = Service(route=r1, times=[0, 10, 20])
    leg = Leg(start=b, end=c, service=s)
    assert leg.start_time == 10
    assert leg.end_time == 20
    assert leg.route_name == "R1"
    assert leg.check_invariant()
    assert str(leg) == "10 - 20: catch route R1 from B to C"


@pytest.mark.parametrize(("start", "end"), [("C", "A"), ("A", "A"), ("A", "Z")])
def test_leg_rejects_untravellable_segment(r1: Route, start: str, end: str) -> None:
    s = Service(route=r1, times=[0, 10, 20])
    with pytest.raises(InvalidJourneyError):
        Leg(start=Station(name=start), end=Station(name=end), service=s)


def test_leg_rejects_missing_input(r1: Route, a: Station) -> None:
    with pytest.raises(MissingInputError):
        Leg(start=a, end=None, service=Service(route=r1, times=[0, 10, 20]))  # type: ignore[arg-type]


def test_leg_equality(r1: Route, a: Station, c: Station) -> None:
    s = Service(route=r1, times=[0, 10, 20])
    assert Leg(start=a, end=c, service=s) == Leg(start=a, end=c, service=s)
    assert Leg(start=a, end=c, service=s) != Leg(
        start=a, end=c, service=Service(route=r1, times=[5, 15, 25])
    )
