from __future__ import annotations

from pydantic import BaseModel


class PassengerSummarySchema(BaseModel):
    name: str
    age: int | None = None
    gender: str | None = None


class PNRStatusSchema(BaseModel):
    pnr: str
    train_number: str
    train_name: str
    journey_date: str
    from_code: str
    to_code: str
    from_station_name: str
    to_station_name: str
    class_code: str
    seat_number: str | None = None
    fare: float
    status: str
    passenger: PassengerSummarySchema
