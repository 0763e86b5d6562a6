from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from src.domain.exceptions import InvalidJourneyError, MissingInputError
from src.domain.models import Journey, Service, Station, Timetable, routes_by_station

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Departure:
    """Zero-length arrival at the origin: ready to leave ``station`` at ``time``."""

    station: Station
    time: int

    @property
    def end_time(self) -> int:
        return self.time

    def extended(self, service: Service, next_station: Station) -> Journey:
        if not service.can_travel_from(self.station, next_station, self.time):
            raise InvalidJourneyError(
                f"Cannot use route {service.route.name} to travel from "
                f"{self.station} to {next_station} departing at or after {self.time}"
            )
        return Journey(self.station, next_station, service)


Arrival = Union[Departure, Journey]


class LabelStatus(str, Enum):
    UNVISITED = "unvisited"
    CANDIDATE = "candidate"
    FINALIZED = "finalized"


@dataclass(slots=True)
class StationLabel:
    """Search state of one station.

    ``arrival`` is set for CANDIDATE and FINALIZED labels: the best known way
    of reaching the station (a :class:`Departure` for the origin).
    """

    status: LabelStatus = LabelStatus.UNVISITED
    arrival: Arrival | None = None


def earliest_service(
    services: Iterable[Service], station: Station, not_before: int
) -> Service | None:
    """Pick the service stopping at ``station`` soonest at or after ``not_before``.

    With non-overtaking services this is also the service that reaches every
    later stop of the route first, so no other candidate needs keeping.
    """

    best: Service | None = None
    best_time = 0
    for service in services:
        t = service.get_stop_time(station)
        if t >= not_before and (best is None or t < best_time):
            best = service
            best_time = t
    return best


def find_journey(
    start: Station, end: Station, min_depart_time: int, timetable: Timetable
) -> Journey | None:
    """Earliest-arrival search over a timetable.

    Returns a journey from ``start`` to ``end`` whose first leg departs no
    earlier than ``min_depart_time`` and that arrives at ``end`` no later than
    any other such journey, or None if none exists.

    This assumes (see ``check_timetable``):
        - no two services of a route depart its first stop at the same time
        - services of a route never overtake one another

    Stations are finalized in order of (arrival time, station name); a label
    is only replaced by a strictly earlier arrival.
    """

    if start is None or end is None or min_depart_time is None or timetable is None:
        raise MissingInputError("start, end, min_depart_time and timetable are required")

    if start == end:
        logger.info("No journey: start and end are both %s", start)
        return None

    routes_at = routes_by_station(timetable)
    if start not in routes_at or end not in routes_at:
        logger.info("No journey: %s or %s is not on any route", start, end)
        return None

    labels: dict[Station, StationLabel] = {s: StationLabel() for s in routes_at}
    labels[start] = StationLabel(
        status=LabelStatus.CANDIDATE, arrival=Departure(start, min_depart_time)
    )
    frontier: list[tuple[int, str, Station]] = [(min_depart_time, start.name, start)]
    finalized = 0

    while frontier:
        time, _, station = heapq.heappop(frontier)
        label = labels[station]
        # Stale heap entry: already finalized or since improved.
        if label.status is LabelStatus.FINALIZED or label.arrival.end_time != time:
            continue

        label.status = LabelStatus.FINALIZED
        finalized += 1
        logger.debug("Finalized %s at %s", station, time)

        if station == end:
            logger.info(
                "Found journey %s -> %s departing >= %s arriving %s (%s stations finalized)",
                start,
                end,
                min_depart_time,
                time,
                finalized,
            )
            return label.arrival

        for route in routes_at[station]:
            next_stop = route.get_next_stop(station)
            if next_stop is None:
                continue

            service = earliest_service(timetable[route], station, time)
            if service is None:
                continue

            _relax(labels[next_stop], label.arrival.extended(service, next_stop), frontier)

    logger.info(
        "No journey %s -> %s departing >= %s (%s stations finalized)",
        start,
        end,
        min_depart_time,
        finalized,
    )
    return None


def _relax(
    label: StationLabel, journey: Journey, frontier: list[tuple[int, str, Station]]
) -> None:
    if label.status is LabelStatus.FINALIZED:
        return
    if label.status is LabelStatus.CANDIDATE and journey.end_time >= label.arrival.end_time:
        return

    station = journey.end_station
    logger.debug("Relaxed %s to %s", station, journey.end_time)
    label.status = LabelStatus.CANDIDATE
    label.arrival = journey
    heapq.heappush(frontier, (journey.end_time, station.name, station))


def modify_journey(
    journey: Journey, interchange_index: int, min_depart_time: int, timetable: Timetable
) -> Journey | None:
    """Re-plan ``journey`` from one of its interchanges.

    Legs ``0..interchange_index`` are kept; the rest is replaced by the
    earliest-arrival journey from the end of leg ``interchange_index`` to the
    original destination departing no earlier than ``min_depart_time``.
    Returns None if no such journey exists. ``journey`` is never modified.
    """

    if journey is None or interchange_index is None or min_depart_time is None:
        raise MissingInputError("journey, interchange_index and min_depart_time are required")

    legs = journey.legs
    if not 0 <= interchange_index < len(legs) - 1:
        raise InvalidJourneyError(
            f"Interchange index {interchange_index} is out of range "
            f"for a journey with {journey.transfers} transfers"
        )

    modified = Journey.from_legs(legs[: interchange_index + 1])
    if min_depart_time < modified.end_time:
        raise InvalidJourneyError(
            f"Cannot depart {modified.end_station} at {min_depart_time}, "
            f"before arriving there at {modified.end_time}"
        )

    tail = find_journey(
        modified.end_station, journey.end_station, min_depart_time, timetable
    )
    if tail is None:
        return None

    for leg in tail:
        modified.extend_journey(leg.service, leg.end)
    return modified
