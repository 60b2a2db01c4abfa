"""Search router — flight search across all airlines."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, Header, HTTPException, Query

from airgate.dependencies import get_gateway
from airgate.schemas.flight import FlightsResponse
from airgate.services.gateway import AirlinesGateway

logger = logging.getLogger(__name__)

router = APIRouter()


def _accepts_json(accept: str | None) -> bool:
    if not accept:
        return True
    return "application/json" in accept or "*/*" in accept


@router.get("/search", response_model=FlightsResponse)
async def search_flights(
    origin: str | None = Query(None),
    destination: str | None = Query(None),
    day: str | None = Query(None),
    month: str | None = Query(None),
    year: str | None = Query(None),
    accept: str | None = Header(None),
    referer: str | None = Header(None),
    gateway: AirlinesGateway = Depends(get_gateway),
):
    """Search every airline for a flight on a route and date.

    Example: GET /search?origin=lax&destination=sfo&day=03&month=12&year=2027
    """
    if not _accepts_json(accept):
        raise HTTPException(status_code=406, detail="Client needs to support JSON response format")

    if None in (origin, destination, day, month, year):
        raise HTTPException(status_code=400, detail="One of the URL parameters is missing")

    try:
        departure_date = date(int(year), int(month), int(day))
    except (ValueError, OverflowError):
        raise HTTPException(status_code=400, detail="Invalid date")

    logger.info(f"Search request: origin {origin} destination {destination} date {departure_date}")

    flights = await gateway.search(origin, destination, departure_date, referer)
    return FlightsResponse(flights=flights)
