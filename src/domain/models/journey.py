from __future__ import annotations

from typing import Iterable, Iterator

from src.domain.exceptions import InvalidJourneyError, MissingInputError

from .leg import Leg
from .service import Service
from .station import Station


class Journey:
    """A traveller itinerary: a non-empty chain of legs.

    Each leg departs from the station its predecessor arrives at, no earlier
    than that arrival. No two adjacent legs use an equal service; extending a
    journey with the service of its trailing leg lengthens that leg instead of
    appending a new one.

    A journey grows in place through :meth:`extend_journey`. Take a
    :meth:`copy` first when the unextended journey must stay untouched.
    """

    __slots__ = ("_legs", "_total_travel_time")

    def __init__(self, start: Station, end: Station, service: Service) -> None:
        self._legs: list[Leg] = [Leg(start=start, end=end, service=service)]
        self._total_travel_time = 0
        self._update_total_travel_time()

    @classmethod
    def from_legs(cls, legs: Iterable[Leg]) -> Journey:
        """Rebuild a journey by replaying ``legs`` through :meth:`extend_journey`."""

        it = iter(legs)
        first = next(it, None)
        if first is None:
            raise InvalidJourneyError("A journey needs at least one leg")
        journey = cls(first.start, first.end, first.service)
        for leg in it:
            if leg.start != journey.end_station:
                raise InvalidJourneyError(
                    f"Leg from {leg.start} does not continue from {journey.end_station}"
                )
            journey.extend_journey(leg.service, leg.end)
        return journey

    def copy(self) -> Journey:
        clone = Journey.__new__(Journey)
        clone._legs = list(self._legs)
        clone._total_travel_time = self._total_travel_time
        return clone

    @property
    def legs(self) -> tuple[Leg, ...]:
        return tuple(self._legs)

    @property
    def start_station(self) -> Station:
        return self._legs[0].start

    @property
    def end_station(self) -> Station:
        return self._legs[-1].end

    @property
    def start_time(self) -> int:
        return self._legs[0].start_time

    @property
    def end_time(self) -> int:
        return self._legs[-1].end_time

    @property
    def transfers(self) -> int:
        return len(self._legs) - 1

    @property
    def total_travel_time(self) -> int:
        return self._total_travel_time

    def extend_journey(self, service: Service, next_station: Station) -> None:
        """Catch ``service`` from the current end station to ``next_station``.

        Raises:
            MissingInputError: if either argument is None.
            InvalidJourneyError: if ``next_station`` is the current end station,
                or ``service`` cannot take the traveller there departing no
                earlier than the current end time. The journey is unchanged.
        """

        if service is None or next_station is None:
            raise MissingInputError("Service and next station cannot be None")

        last = self._legs[-1]
        if next_station == last.end:
            raise InvalidJourneyError(
                f"{next_station} is already the last station of the journey"
            )
        if not service.can_travel_from(last.end, next_station, last.end_time):
            raise InvalidJourneyError(
                f"Cannot use route {service.route.name} to travel from "
                f"{last.end} to {next_station} departing at or after {last.end_time}"
            )

        if last.service == service:
            self._legs[-1] = Leg(start=last.start, end=next_station, service=service)
        else:
            self._legs.append(Leg(start=last.end, end=next_station, service=service))
        self._update_total_travel_time()

    def extended(self, service: Service, next_station: Station) -> Journey:
        """Return an extended copy, leaving this journey unchanged."""

        journey = self.copy()
        journey.extend_journey(service, next_station)
        return journey

    def _update_total_travel_time(self) -> None:
        self._total_travel_time = self._legs[-1].end_time - self._legs[0].start_time

    def check_invariant(self) -> bool:
        if not isinstance(self._legs, list) or not self._legs:
            return False
        if any(not isinstance(leg, Leg) or not leg.check_invariant() for leg in self._legs):
            return False
        if self._total_travel_time != self.end_time - self.start_time:
            return False
        if self._total_travel_time < 0:
            return False

        for prev, leg in zip(self._legs, self._legs[1:]):
            if leg.start != prev.end:
                return False
            if leg.service == prev.service:
                return False
            if not leg.service.can_travel_from(leg.start, leg.end, prev.end_time):
                return False
        return True

    def __iter__(self) -> Iterator[Leg]:
        return iter(tuple(self._legs))

    def __len__(self) -> int:
        return len(self._legs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Journey):
            return NotImplemented
        return self._legs == other._legs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Journey(legs={self._legs!r})"

    def __str__(self) -> str:
        lines = [f"Total travel time: {self._total_travel_time}\tTransfers: {self.transfers}"]
        lines.extend(str(leg) for leg in self._legs)
        return "\n".join(lines) + "\n"
