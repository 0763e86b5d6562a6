from __future__ import annotations

from pydantic import BaseModel, Field


class JourneyRequestSchema(BaseModel):
    start: str = Field(..., min_length=1)
    end: str = Field(..., min_length=1)
    depart_at: int = Field(0, ge=0)


class ReplanRequestSchema(JourneyRequestSchema):
    interchange_index: int = Field(..., ge=0)
    new_depart_at: int = Field(..., ge=0)


class LegSchema(BaseModel):
    start_station: str
    end_station: str
    route: str
    start_time: int
    end_time: int


class InterchangeSchema(BaseModel):
    index: int
    station: str
    depart_at: int


class JourneySchema(BaseModel):
    start_station: str
    end_station: str
    start_time: int
    end_time: int
    transfers: int
    total_travel_time: int
    legs: list[LegSchema] = []
    interchanges: list[InterchangeSchema] = []
    text: str


class ReplanResponseSchema(BaseModel):
    original: JourneySchema
    modified: JourneySchema


class StationListSchema(BaseModel):
    stations: list[str] = []
