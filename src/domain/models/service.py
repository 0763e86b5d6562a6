from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from src.domain.exceptions import (
    InvalidServiceError,
    MissingInputError,
    NoSuchStopError,
)

from .route import Route
from .station import Station


def _is_time(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Service:
    """One scheduled run of a route.

    ``times[i]`` is the time the service stops at stop number ``i + 1``. Times
    are non-negative integers, strictly ascending, one per stop.
    """

    route: Route
    times: Sequence[int]

    def __post_init__(self) -> None:
        if self.route is None or self.times is None:
            raise MissingInputError("Service route and times cannot be None")

        times = tuple(self.times)
        if any(t is None for t in times):
            raise MissingInputError("Service times cannot contain None")
        if not all(_is_time(t) for t in times):
            raise InvalidServiceError("Service times must be integers")
        if len(times) != self.route.num_stops:
            raise InvalidServiceError(
                f"Route {self.route.name} has {self.route.num_stops} stops "
                f"but {len(times)} times were given"
            )
        if any(t < 0 for t in times):
            raise InvalidServiceError("Service times cannot be negative")
        if any(b <= a for a, b in zip(times, times[1:])):
            raise InvalidServiceError("Service times must be strictly ascending")

        object.__setattr__(self, "times", times)

    @property
    def departure_time(self) -> int:
        """Time the service leaves the first stop of its route."""

        return self.times[0]

    def get_stop_time(self, stop: int | Station) -> int:
        """Scheduled time at a stop number (1-based) or a station."""

        if isinstance(stop, Station):
            return self.times[self.route.get_stop_number(stop) - 1]
        if not _is_time(stop) or not 1 <= stop <= len(self.times):
            raise NoSuchStopError(
                f"Stop number {stop} does not exist on route {self.route.name}"
            )
        return self.times[stop - 1]

    def can_travel_from(
        self, origin: Station, destination: Station, not_before: int
    ) -> bool:
        return (
            self.route.can_travel_from(origin, destination)
            and self.get_stop_time(origin) >= not_before
        )

    def check_invariant(self) -> bool:
        if not isinstance(self.route, Route) or not self.route.check_invariant():
            return False
        if not isinstance(self.times, tuple):
            return False
        if len(self.times) != self.route.num_stops:
            return False
        if not all(_is_time(t) and t >= 0 for t in self.times):
            return False
        return all(a < b for a, b in zip(self.times, self.times[1:]))

    def __str__(self) -> str:
        stops = ", ".join(
            f"{station} {time}" for station, time in zip(self.route.stops, self.times)
        )
        return f"{self.route.name}: {stops}"
