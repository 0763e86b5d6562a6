from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import ITimetableRepository
from src.domain.algorithms.journey_finder import find_journey, modify_journey
from src.domain.exceptions import NoPathFound, NoSuchStopError
from src.domain.models import Journey, Station, find_station, stations_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Interchange:
    """A transfer point of a journey.

    ``index`` is the leg that arrives at ``station``; the next leg departs at
    ``depart_at``.
    """

    index: int
    station: Station
    depart_at: int


@dataclass(slots=True)
class JourneyPlannerService:
    """Application service (use case) for journey planning.

    This layer orchestrates ports. Domain stays pure.
    """

    timetable_repository: ITimetableRepository

    def list_stations(self) -> list[Station]:
        return stations_of(self.timetable_repository.load_timetable())

    def plan(self, *, start: str, end: str, depart_at: int) -> Journey:
        timetable = self.timetable_repository.load_timetable()
        origin = self._station(timetable, start)
        destination = self._station(timetable, end)

        logger.info("Planning %s -> %s departing >= %s", origin, destination, depart_at)
        journey = find_journey(origin, destination, depart_at, timetable)
        if journey is None:
            raise NoPathFound(
                f"No journey from {origin} to {destination} departing at or after {depart_at}"
            )
        return journey

    def replan(
        self, *, journey: Journey, interchange_index: int, depart_at: int
    ) -> Journey:
        """Re-plan from an interchange, leaving ``journey`` unmodified."""

        timetable = self.timetable_repository.load_timetable()
        logger.info(
            "Re-planning %s -> %s from interchange %s departing >= %s",
            journey.start_station,
            journey.end_station,
            interchange_index,
            depart_at,
        )
        modified = modify_journey(journey, interchange_index, depart_at, timetable)
        if modified is None:
            raise NoPathFound(
                f"No journey to {journey.end_station} from interchange "
                f"{interchange_index} departing at or after {depart_at}"
            )
        return modified

    @staticmethod
    def interchanges(journey: Journey) -> list[Interchange]:
        legs = journey.legs
        return [
            Interchange(index=i, station=leg.end, depart_at=legs[i + 1].start_time)
            for i, leg in enumerate(legs[:-1])
        ]

    @staticmethod
    def _station(timetable, name: str) -> Station:
        station = find_station(timetable, name)
        if station is None:
            raise NoSuchStopError(f"{name} is not on any route")
        return station
