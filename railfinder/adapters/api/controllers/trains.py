from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from railfinder.adapters.api.dependencies import get_train_search_service
from railfinder.adapters.api.schemas.trains import (
    AdvancedSearchResponseSchema,
    AvailableDatesSchema,
    PartialJourneySchema,
    RouteSegmentSchema,
    RouteStopSchema,
    SearchRequestSchema,
    StationSchema,
    TrainClassSchema,
    TrainSchema,
)
from railfinder.app.services.train_search_service import TrainSearchService
from railfinder.domain.algorithms.time_utils import day_offset
from railfinder.domain.models import (
    WEEKDAY_CODES,
    PartialJourney,
    SearchCriteria,
    StationInfo,
    Train,
)

router = APIRouter(prefix="/trains", tags=["trains"])


def _station_to_schema(station: StationInfo) -> StationSchema:
    return StationSchema(code=station.code, name=station.name)


def _train_to_schema(train: Train) -> TrainSchema:
    return TrainSchema(
        train_number=train.train_number,
        train_name=train.train_name,
        source=train.source,
        destination=train.destination,
        source_code=train.source_code,
        destination_code=train.destination_code,
        departure_time=train.departure_time,
        arrival_time=train.arrival_time,
        duration=train.duration,
        day_offset=day_offset(train.departure_time, train.arrival_time),
        running_days=[d for d in WEEKDAY_CODES if d in train.running_days],
        available_classes=[
            TrainClassSchema(
                code=c.code,
                name=c.name,
                fare=c.fare,
                available_seats=c.available_seats,
                waiting_list=c.waiting_list,
                status=c.status.value,
            )
            for c in train.available_classes
        ],
        stations=[
            RouteStopSchema(
                code=s.code,
                name=s.name,
                arrival_time=s.arrival_time,
                departure_time=s.departure_time,
                distance=s.distance,
            )
            for s in train.stations
        ],
    )


def _journey_to_schema(journey: PartialJourney) -> PartialJourneySchema:
    return PartialJourneySchema(
        train_number=journey.train.train_number,
        from_station=_station_to_schema(journey.from_station),
        to_station=_station_to_schema(journey.to_station),
        intermediate_station=_station_to_schema(journey.intermediate_station),
        departure_time=journey.departure_time,
        arrival_time=journey.arrival_time,
        total_duration=journey.total_duration,
        total_minutes=journey.total_minutes,
        available_classes=list(journey.available_classes),
        route_segments=[
            RouteSegmentSchema(
                train_number=seg.train.train_number,
                train_name=seg.train.train_name,
                from_station=_station_to_schema(seg.from_station),
                to_station=_station_to_schema(seg.to_station),
                departure_time=seg.departure_time,
                arrival_time=seg.arrival_time,
                duration=seg.duration,
                available_classes=list(seg.available_classes),
                is_transfer=seg.is_transfer,
                transfer_time=seg.transfer_time,
            )
            for seg in journey.route_segments
        ],
        transfer_count=journey.transfer_count,
        is_partial_route=journey.is_partial_route,
    )


def _criteria_from_request(
    req: SearchRequestSchema, service: TrainSearchService
) -> SearchCriteria:
    origin = service.resolve_station(req.from_station)
    if origin is None:
        raise HTTPException(
            status_code=422, detail=f"Unknown station: {req.from_station}"
        )
    destination = service.resolve_station(req.to_station)
    if destination is None:
        raise HTTPException(
            status_code=422, detail=f"Unknown station: {req.to_station}"
        )

    return SearchCriteria(
        from_station=origin,
        to_station=destination,
        journey_date=req.journey_date,
        train_class=req.train_class,
        quota=req.quota,
        flexible_with_date=req.flexible_with_date,
        person_with_disability=req.person_with_disability,
        available_berth=req.available_berth,
    )


@router.post("/search", response_model=list[TrainSchema])
def search_trains(
    req: SearchRequestSchema,
    service: TrainSearchService = Depends(get_train_search_service),
) -> list[TrainSchema]:
    criteria = _criteria_from_request(req, service)
    return [_train_to_schema(t) for t in service.search(criteria, sort_by=req.sort_by)]


@router.post("/search/advanced", response_model=AdvancedSearchResponseSchema)
def advanced_search(
    req: SearchRequestSchema,
    service: TrainSearchService = Depends(get_train_search_service),
) -> AdvancedSearchResponseSchema:
    criteria = _criteria_from_request(req, service)
    result = service.advanced_search(criteria, sort_by=req.sort_by)
    return AdvancedSearchResponseSchema(
        direct=[_train_to_schema(t) for t in result.direct],
        partial_journeys=[_journey_to_schema(j) for j in result.partial_journeys],
    )


@router.get("/{train_number}/dates", response_model=AvailableDatesSchema)
def available_dates(
    train_number: str,
    base_date: date = Query(..., alias="date"),
    flexible: bool = Query(default=True),
    service: TrainSearchService = Depends(get_train_search_service),
) -> AvailableDatesSchema:
    dates = service.available_dates(
        train_number=train_number, base=base_date, flexible=flexible
    )
    if dates is None:
        raise HTTPException(status_code=404, detail="Train not found")
    return AvailableDatesSchema(
        train_number=train_number, base_date=base_date, flexible=flexible, dates=dates
    )
