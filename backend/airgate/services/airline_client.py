"""Airline backend client — one outbound search or reservation call per airline.

Every failure (transport error, timeout, bad status, unusable body) is turned into a
value here: ``None`` for a search, ``RESERVATION_FAILED`` for a reservation. Nothing
raised by httpx or by payload parsing escapes to the caller.
"""

import json
import logging
from datetime import date

import httpx
from pydantic import ValidationError

from airgate.schemas.flight import Flight
from airgate.schemas.reservation import ReservationRequest

logger = logging.getLogger(__name__)

SEARCH_ROUTE = "/show_flights"
RESERVE_ROUTE = "/book_flight"

RESERVATION_FAILED = -1


class AirlineClient:
    """Talks to airline backends over a shared ``httpx.AsyncClient``.

    The http client owns the connection pool and the per-request timeout, and is safe
    to share between concurrent searches.
    """

    def __init__(self, http_client: httpx.AsyncClient):
        self._client = http_client

    async def search_flight(
        self,
        address: str,
        origin: str,
        destination: str,
        departure_date: date,
        referer: str | None = None,
    ) -> Flight | None:
        """Ask one airline for a flight on a route and date.

        GET {address}/show_flights?origin=lax&destination=sfo&date=2027-12-03

        Returns None when the airline has nothing usable to offer.
        """
        headers = {"Accept": "application/json"}
        if referer and referer.strip():
            headers["Referer"] = referer

        try:
            resp = await self._client.get(
                _url(address, SEARCH_ROUTE),
                params={
                    "origin": origin,
                    "destination": destination,
                    "date": departure_date.isoformat(),
                },
                headers=headers,
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Search on {address} returned status {e.response.status_code}")
            return None
        except httpx.RequestError as e:
            logger.warning(f"Search request to {address} failed: {e!r}")
            return None

        return self._parse_flight(resp.text, address, departure_date)

    async def reserve(self, address: str, request: ReservationRequest) -> int:
        """Book tickets with one airline.

        Returns the airline's positive confirmation number, or RESERVATION_FAILED.
        """
        try:
            resp = await self._client.post(
                _url(address, RESERVE_ROUTE),
                content=request.model_dump_json(by_alias=True),
                headers={
                    "Content-Type": "application/json",
                    "Accept": "text/plain; charset=UTF-8",
                },
            )
        except httpx.RequestError as e:
            logger.error(f"Reservation request to {address} failed: {e!r}")
            return RESERVATION_FAILED

        if resp.status_code != 200:
            logger.error(f"Reservation on {address} returned status {resp.status_code}")
            return RESERVATION_FAILED

        body = resp.text.strip()
        if not (body.isascii() and body.isdigit()):
            logger.error(f"Reservation on {address} returned a non-numeric body: {resp.text[:100]!r}")
            return RESERVATION_FAILED

        confirmation = int(body)

        if confirmation <= 0:
            logger.error(f"Reservation on {address} returned non-positive code {confirmation}")
            return RESERVATION_FAILED

        return confirmation

    @staticmethod
    def _parse_flight(body: str, address: str, departure_date: date) -> Flight | None:
        """Parse a single JSON flight record. The query date overrides whatever the
        airline sent back."""
        if not body or not body.strip():
            logger.info(f"{address} has no flight for this route")
            return None

        try:
            payload = json.loads(body)
        except ValueError as e:
            logger.error(f"Unparsable flight body from {address}: {e}")
            return None

        if not isinstance(payload, dict):
            logger.error(f"Flight body from {address} is not a JSON object")
            return None

        try:
            return Flight.model_validate({**payload, "date": departure_date})
        except ValidationError as e:
            logger.error(f"Invalid flight record from {address}: {e.error_count()} errors")
            return None


def _url(address: str, route: str) -> str:
    return address.rstrip("/") + route
