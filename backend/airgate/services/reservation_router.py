"""Reservation router — sends a reservation to the one airline it names."""

import logging

from airgate.schemas.reservation import ReservationRequest
from airgate.services.airline_client import RESERVATION_FAILED, AirlineClient
from airgate.services.airline_directory import AirlineDirectory

logger = logging.getLogger(__name__)


class ReservationRouter:
    def __init__(self, directory: AirlineDirectory, client: AirlineClient):
        self._directory = directory
        self._client = client

    async def reserve(self, request: ReservationRequest) -> int:
        """Returns a positive confirmation number, or RESERVATION_FAILED.

        Unknown airlines are rejected without contacting any backend.
        """
        address = self._directory.resolve(request.airline_name)
        if address is None:
            logger.warning(f"Reservation rejected, unknown airline: {request.airline_name!r}")
            return RESERVATION_FAILED

        confirmation = await self._client.reserve(address, request)
        if confirmation > 0:
            logger.info(
                f"Reserved {request.number_of_tickets} ticket(s) on {request.airline_name} "
                f"flight {request.id}, confirmation {confirmation}"
            )
        return confirmation
