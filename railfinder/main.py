from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from railfinder.adapters.api.controllers.bookings import router as bookings_router
from railfinder.adapters.api.controllers.stations import router as stations_router
from railfinder.adapters.api.controllers.trains import router as trains_router

app = FastAPI(title="RailFinder")
app.include_router(stations_router)
app.include_router(trains_router)
app.include_router(bookings_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Keep unexpected failures as JSON so clients can always parse `detail`."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("RAILFINDER_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (LookupError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
