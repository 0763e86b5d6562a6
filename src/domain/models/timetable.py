from __future__ import annotations

from typing import Mapping, Sequence

from src.domain.exceptions import InvalidServiceError, MissingInputError

from .route import Route
from .service import Service
from .station import Station

Timetable = Mapping[Route, Sequence[Service]]


def routes_by_station(timetable: Timetable) -> dict[Station, list[Route]]:
    """Index every station on any route to the routes that stop there.

    Routes keep the timetable's iteration order.
    """

    out: dict[Station, list[Route]] = {}
    for route in timetable:
        for stop in route.stops:
            out.setdefault(stop, []).append(route)
    return out


def stations_of(timetable: Timetable) -> list[Station]:
    return sorted(routes_by_station(timetable))


def find_station(timetable: Timetable, name: str) -> Station | None:
    station = Station(name=name)
    for route in timetable:
        if route.stops_at(station):
            return station
    return None


def check_timetable(timetable: Timetable) -> None:
    """Validate the preconditions the earliest-arrival search relies on.

    Per route: every service runs on that route, services are distinct, no two
    depart the first stop at the same time, and none overtakes another.
    """

    if timetable is None:
        raise MissingInputError("Timetable cannot be None")

    for route, services in timetable.items():
        if services is None:
            raise MissingInputError(f"Route {route.name} has no service list")
        for service in services:
            if service is None:
                raise MissingInputError(f"Route {route.name} lists a None service")
            if service.route != route:
                raise InvalidServiceError(
                    f"Service {service} is listed under route {route.name}"
                )

        ordered = sorted(services, key=lambda s: s.departure_time)
        for earlier, later in zip(ordered, ordered[1:]):
            if earlier.departure_time == later.departure_time:
                raise InvalidServiceError(
                    f"Two services of route {route.name} depart "
                    f"{route.first_stop} at {earlier.departure_time}"
                )
            if any(a >= b for a, b in zip(earlier.times, later.times)):
                raise InvalidServiceError(
                    f"Service departing {route.first_stop} at {later.departure_time} "
                    f"overtakes the one departing at {earlier.departure_time} "
                    f"on route {route.name}"
                )
