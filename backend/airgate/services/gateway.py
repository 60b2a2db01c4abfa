"""Gateway — the search and reserve operations served to the HTTP layer."""

import logging
from datetime import date
from typing import Protocol

import httpx

from airgate.config import Settings
from airgate.schemas.flight import Flight
from airgate.schemas.reservation import ReservationRequest
from airgate.services.airline_client import AirlineClient
from airgate.services.airline_directory import AirlineDirectory
from airgate.services.fake_airlines import FakeGateway
from airgate.services.reservation_router import ReservationRouter
from airgate.services.search_aggregator import SearchAggregator

logger = logging.getLogger(__name__)


class AirlinesGateway(Protocol):
    @property
    def airlines(self) -> list[str]: ...

    async def search(
        self,
        origin: str,
        destination: str,
        departure_date: date,
        referer: str | None = None,
    ) -> list[Flight]: ...

    async def reserve(self, request: ReservationRequest) -> int: ...


class Gateway:
    """Routes searches to every airline and reservations to one."""

    def __init__(
        self,
        directory: AirlineDirectory,
        client: AirlineClient,
        search_deadline_seconds: float,
    ):
        self.directory = directory
        self._aggregator = SearchAggregator(directory, client, search_deadline_seconds)
        self._router = ReservationRouter(directory, client)

    @property
    def airlines(self) -> list[str]:
        return self.directory.names

    async def search(
        self,
        origin: str,
        destination: str,
        departure_date: date,
        referer: str | None = None,
    ) -> list[Flight]:
        return await self._aggregator.search(origin, destination, departure_date, referer)

    async def reserve(self, request: ReservationRequest) -> int:
        return await self._router.reserve(request)


def build_gateway(config: Settings, http_client: httpx.AsyncClient) -> AirlinesGateway:
    """Wire the gateway from settings. Demo mode skips the airline backends entirely."""
    if config.use_fake_airlines:
        logger.warning("USE_FAKE_AIRLINES is set, serving canned flights")
        return FakeGateway()

    directory = AirlineDirectory(config.airline_directory)
    logger.info(f"Airline directory loaded: {', '.join(directory.names) or 'empty'}")
    return Gateway(
        directory,
        AirlineClient(http_client),
        search_deadline_seconds=config.search_deadline_seconds,
    )
