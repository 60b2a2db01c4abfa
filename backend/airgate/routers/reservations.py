"""Reservation router — books tickets with the airline named in the request."""

import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from airgate.dependencies import get_gateway, require_auth_cookie
from airgate.schemas.reservation import ReservationRequest
from airgate.services.gateway import AirlinesGateway

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/reserve", dependencies=[Depends(require_auth_cookie)])
async def reserve_tickets(
    request: Request,
    content_type: str | None = Header(None),
    gateway: AirlinesGateway = Depends(get_gateway),
):
    """Reserve one or more tickets on a flight.

    Body: {"id": 677885206, "airlineName": "Singapore Airlines", "numberOfTickets": 29}
    Responds with the airline's confirmation number as plain text.
    """
    if not content_type or "application/json" not in content_type:
        raise HTTPException(status_code=415, detail="Request body is not in the JSON format")

    try:
        reservation = ReservationRequest.model_validate_json(await request.body())
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid reservation request: {e.error_count()} errors")

    logger.info(f"Reservation request for {reservation.airline_name}")

    confirmation = await gateway.reserve(reservation)
    if confirmation > 0:
        return PlainTextResponse(str(confirmation))

    raise HTTPException(status_code=500, detail="Flight Reservation failed")
