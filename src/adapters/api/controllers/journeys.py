from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_planner_service
from src.adapters.api.schemas.journeys import (
    InterchangeSchema,
    JourneyRequestSchema,
    JourneySchema,
    LegSchema,
    ReplanRequestSchema,
    ReplanResponseSchema,
    StationListSchema,
)
from src.app.services.journey_planner_service import JourneyPlannerService
from src.domain.exceptions import InvalidJourneyError, NoPathFound, NoSuchStopError
from src.domain.models import Journey

router = APIRouter(tags=["journeys"])


def _journey_to_schema(journey: Journey) -> JourneySchema:
    return JourneySchema(
        start_station=journey.start_station.name,
        end_station=journey.end_station.name,
        start_time=journey.start_time,
        end_time=journey.end_time,
        transfers=journey.transfers,
        total_travel_time=journey.total_travel_time,
        legs=[
            LegSchema(
                start_station=leg.start.name,
                end_station=leg.end.name,
                route=leg.route_name,
                start_time=leg.start_time,
                end_time=leg.end_time,
            )
            for leg in journey
        ],
        interchanges=[
            InterchangeSchema(
                index=i.index, station=i.station.name, depart_at=i.depart_at
            )
            for i in JourneyPlannerService.interchanges(journey)
        ],
        text=str(journey),
    )


def _plan(service: JourneyPlannerService, req: JourneyRequestSchema) -> Journey:
    try:
        return service.plan(start=req.start, end=req.end, depart_at=req.depart_at)
    except NoSuchStopError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except NoPathFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/stations", response_model=StationListSchema)
def list_stations(
    service: JourneyPlannerService = Depends(get_planner_service),
) -> StationListSchema:
    return StationListSchema(stations=[s.name for s in service.list_stations()])


@router.post("/journeys", response_model=JourneySchema)
def find_journey(
    req: JourneyRequestSchema,
    service: JourneyPlannerService = Depends(get_planner_service),
) -> JourneySchema:
    return _journey_to_schema(_plan(service, req))


@router.post("/journeys/replan", response_model=ReplanResponseSchema)
def replan_journey(
    req: ReplanRequestSchema,
    service: JourneyPlannerService = Depends(get_planner_service),
) -> ReplanResponseSchema:
    original = _plan(service, req)
    try:
        modified = service.replan(
            journey=original,
            interchange_index=req.interchange_index,
            depart_at=req.new_depart_at,
        )
    except InvalidJourneyError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except NoPathFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return ReplanResponseSchema(
        original=_journey_to_schema(original),
        modified=_journey_to_schema(modified),
    )
