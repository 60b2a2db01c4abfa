"""Search aggregator — fans a search out to every airline and ranks the answers."""

import asyncio
import logging
import time
from datetime import date

from airgate.schemas.flight import Flight
from airgate.services.airline_client import AirlineClient
from airgate.services.airline_directory import AirlineDirectory

logger = logging.getLogger(__name__)


class SearchAggregator:
    """Queries all airlines concurrently and returns their flights, priciest first.

    Airlines that fail, time out or have nothing to offer are left out of the result.
    Airlines still running when the deadline passes are cancelled and ignored.
    """

    def __init__(
        self,
        directory: AirlineDirectory,
        client: AirlineClient,
        deadline_seconds: float,
    ):
        self._directory = directory
        self._client = client
        self._deadline = deadline_seconds

    async def search(
        self,
        origin: str,
        destination: str,
        departure_date: date,
        referer: str | None = None,
    ) -> list[Flight]:
        if len(self._directory) == 0:
            return []

        start_time = time.monotonic()

        tasks = {
            asyncio.create_task(
                self._client.search_flight(address, origin, destination, departure_date, referer),
                name=f"search:{airline}",
            ): airline
            for airline, address in self._directory.items()
        }

        try:
            done, pending = await asyncio.wait(tasks, timeout=self._deadline)
        finally:
            # Also reached when this search is itself cancelled
            for task in tasks:
                if not task.done():
                    task.cancel()

        for task in pending:
            logger.warning(f"{tasks[task]} did not answer within {self._deadline}s, skipping")

        flights: list[Flight] = []
        for task in done:
            if task.cancelled():
                continue
            exc = task.exception()
            if exc is not None:
                logger.error(f"Search task for {tasks[task]} failed: {exc!r}")
                continue
            flight = task.result()
            if flight is not None:
                flights.append(flight)

        # Ties keep no particular order
        flights.sort(key=lambda f: f.price_usd, reverse=True)

        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(
            f"Search {origin}->{destination} on {departure_date}: "
            f"{len(flights)}/{len(tasks)} airlines answered in {elapsed_ms}ms"
        )
        return flights
