from __future__ import annotations

from functools import lru_cache

from src.adapters.persistence.local_timetable_repository import (
    LocalTimetableRepository,
)
from src.app.services.journey_planner_service import JourneyPlannerService


@lru_cache(maxsize=1)
def _timetable_repository() -> LocalTimetableRepository:
    # One repository per process so the parsed timetable is cached across requests.
    return LocalTimetableRepository()


def get_planner_service() -> JourneyPlannerService:
    return JourneyPlannerService(timetable_repository=_timetable_repository())
