from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from src.domain.exceptions import InvalidRouteError, MissingInputError, NoSuchStopError

from .station import Station


@dataclass(frozen=True, slots=True)
class Route:
    """An ordered, duplicate-free sequence of at least two stations.

    Stop numbers are 1-based. Travel only moves forward along the route.
    Equality and hashing are structural (name + stop sequence), so routes can
    key a timetable mapping.
    """

    name: str
    stops: Sequence[Station]

    _stop_numbers: dict[Station, int] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        if self.name is None or self.stops is None:
            raise MissingInputError("Route name and stops cannot be None")

        stops = tuple(self.stops)
        if any(stop is None for stop in stops):
            raise MissingInputError("Route stops cannot contain None")
        if not self.name.strip():
            raise InvalidRouteError("Route name cannot be empty")
        if len(stops) < 2:
            raise InvalidRouteError(
                f"Route {self.name} must have at least two stops, got {len(stops)}"
            )
        if len(set(stops)) != len(stops):
            raise InvalidRouteError(f"Route {self.name} stops at a station twice")

        object.__setattr__(self, "stops", stops)
        object.__setattr__(
            self,
            "_stop_numbers",
            {stop: number for number, stop in enumerate(stops, start=1)},
        )

    @property
    def num_stops(self) -> int:
        return len(self.stops)

    @property
    def first_stop(self) -> Station:
        return self.stops[0]

    @property
    def last_stop(self) -> Station:
        return self.stops[-1]

    def stops_at(self, station: Station) -> bool:
        return station in self._stop_numbers

    def get_stop_number(self, station: Station) -> int:
        try:
            return self._stop_numbers[station]
        except KeyError:
            raise NoSuchStopError(f"{station} is not on route {self.name}") from None

    def get_stop(self, number: int) -> Station:
        if not 1 <= number <= len(self.stops):
            raise NoSuchStopError(
                f"Stop number {number} does not exist on route {self.name}"
            )
        return self.stops[number - 1]

    def get_next_stop(self, station: Station) -> Station | None:
        """Return the stop after ``station``, or None if it is the final stop."""

        number = self.get_stop_number(station)
        if number == len(self.stops):
            return None
        return self.stops[number]

    def can_travel_from(self, origin: Station, destination: Station) -> bool:
        if origin == destination:
            return False
        a = self._stop_numbers.get(origin)
        b = self._stop_numbers.get(destination)
        if a is None or b is None:
            return False
        return a < b

    def check_invariant(self) -> bool:
        if not isinstance(self.name, str) or not self.name.strip():
            return False
        if not isinstance(self.stops, tuple) or len(self.stops) < 2:
            return False
        if any(not isinstance(stop, Station) for stop in self.stops):
            return False
        if len(set(self.stops)) != len(self.stops):
            return False
        return all(
            self._stop_numbers.get(stop) == number
            for number, stop in enumerate(self.stops, start=1)
        )

    def __str__(self) -> str:
        return f"{self.name}: " + ", ".join(str(stop) for stop in self.stops)
