from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query

from railfinder.adapters.api.dependencies import get_booking_lookup_service
from railfinder.adapters.api.schemas.bookings import (
    PassengerSummarySchema,
    PNRStatusSchema,
)
from railfinder.app.services.booking_lookup_service import BookingLookupService
from railfinder.domain.models import PNRStatus

router = APIRouter(tags=["bookings"])


def _status_to_schema(status: PNRStatus) -> PNRStatusSchema:
    return PNRStatusSchema(
        pnr=status.pnr,
        train_number=status.train_number,
        train_name=status.train_name,
        journey_date=status.journey_date,
        from_code=status.from_code,
        to_code=status.to_code,
        from_station_name=status.from_station_name,
        to_station_name=status.to_station_name,
        class_code=status.class_code,
        seat_number=status.seat_number,
        fare=status.fare,
        status=status.status,
        passenger=PassengerSummarySchema(
            name=status.passenger.name,
            age=status.passenger.age,
            gender=status.passenger.gender,
        ),
    )


@router.get("/pnr/{pnr}", response_model=PNRStatusSchema)
def get_pnr_status(
    pnr: str,
    service: BookingLookupService = Depends(get_booking_lookup_service),
) -> PNRStatusSchema:
    status = service.lookup(pnr)
    if status is None:
        raise HTTPException(status_code=404, detail="PNR not found")
    return _status_to_schema(status)


@router.get("/bookings", response_model=list[PNRStatusSchema])
def list_bookings(
    status: str | None = Query(default=None),
    q: str | None = Query(default=None),
    sort_by: Literal["date", "fare", "status"] | None = Query(default=None),
    service: BookingLookupService = Depends(get_booking_lookup_service),
) -> list[PNRStatusSchema]:
    return [
        _status_to_schema(b)
        for b in service.list_bookings(status=status, query=q, sort_by=sort_by)
    ]
