from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from railfinder.domain.models.reference import is_known_class, is_known_quota


class StationSchema(BaseModel):
    code: str
    name: str


class RouteStopSchema(BaseModel):
    code: str
    name: str
    arrival_time: str | None = None
    departure_time: str | None = None
    distance: float = 0.0


class TrainClassSchema(BaseModel):
    code: str
    name: str
    fare: float = Field(..., ge=0.0)
    available_seats: int = Field(..., ge=0)
    waiting_list: int | None = None
    status: Literal["available", "waiting", "full"]


class TrainSchema(BaseModel):
    train_number: str
    train_name: str
    source: str
    destination: str
    source_code: str | None = None
    destination_code: str | None = None
    departure_time: str
    arrival_time: str
    duration: str
    day_offset: int = 1
    running_days: list[str] = []
    available_classes: list[TrainClassSchema] = []
    stations: list[RouteStopSchema] = []


class SearchRequestSchema(BaseModel):
    """Station fields accept either a station code or its display name."""

    from_station: str = Field(..., min_length=1)
    to_station: str = Field(..., min_length=1)
    journey_date: date
    train_class: str | None = None
    quota: str | None = None
    flexible_with_date: bool = False
    person_with_disability: bool = False
    available_berth: bool = False
    sort_by: Literal["departure", "duration", "fare", "arrival"] | None = None

    @field_validator("train_class", "quota", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().upper()
            return value or None
        return value

    @field_validator("train_class")
    @classmethod
    def _known_class(cls, value: str | None) -> str | None:
        if value is not None and not is_known_class(value):
            raise ValueError(f"Unknown travel class: {value}")
        return value

    @field_validator("quota")
    @classmethod
    def _known_quota(cls, value: str | None) -> str | None:
        if value is not None and not is_known_quota(value):
            raise ValueError(f"Unknown quota: {value}")
        return value


class RouteSegmentSchema(BaseModel):
    train_number: str
    train_name: str
    from_station: StationSchema
    to_station: StationSchema
    departure_time: str
    arrival_time: str
    duration: str
    available_classes: list[str] = []
    is_transfer: bool = False
    transfer_time: str | None = None


class PartialJourneySchema(BaseModel):
    train_number: str
    from_station: StationSchema
    to_station: StationSchema
    intermediate_station: StationSchema
    departure_time: str
    arrival_time: str
    total_duration: str
    total_minutes: int
    available_classes: list[str] = []
    route_segments: list[RouteSegmentSchema]
    transfer_count: int = 1
    is_partial_route: bool = True


class AdvancedSearchResponseSchema(BaseModel):
    direct: list[TrainSchema]
    partial_journeys: list[PartialJourneySchema]


class AvailableDatesSchema(BaseModel):
    train_number: str
    base_date: date
    flexible: bool
    dates: list[date]
