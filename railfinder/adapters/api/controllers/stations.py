from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from railfinder.adapters.api.dependencies import get_train_search_service
from railfinder.adapters.api.schemas.trains import StationSchema
from railfinder.app.services.train_search_service import TrainSearchService

router = APIRouter(tags=["stations"])


@router.get("/stations", response_model=list[StationSchema])
def list_stations(
    q: str | None = Query(default=None),
    service: TrainSearchService = Depends(get_train_search_service),
) -> list[StationSchema]:
    return [
        StationSchema(code=s.code, name=s.name) for s in service.list_stations(query=q)
    ]
