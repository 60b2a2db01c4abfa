"""Shared test doubles for the airline gateway."""

from __future__ import annotations

import asyncio
from datetime import date
from decimal import Decimal
from typing import Any

import pytest

from airgate.schemas.flight import Flight
from airgate.schemas.reservation import ReservationRequest
from airgate.services.airline_directory import AirlineDirectory

TRAVEL_DATE = date(2027, 12, 3)


def make_flight(airline: str, price: str | float, flight_id: int = 1) -> Flight:
    return Flight(
        id=flight_id,
        airline_name=airline,
        price_usd=Decimal(str(price)),
        number_of_free_bags=2,
        number_of_available_seats=5,
        date=TRAVEL_DATE,
    )


class StubAirlineClient:
    """Airline client double keyed by backend address.

    ``search_results`` values may be a Flight, None, or an exception to raise.
    """

    def __init__(
        self,
        search_results: dict[str, Any] | None = None,
        delays: dict[str, float] | None = None,
        reserve_result: int = 12345,
    ) -> None:
        self.search_results = search_results or {}
        self.delays = delays or {}
        self.reserve_result = reserve_result
        self.search_calls: list[tuple[str, str, str, date, str | None]] = []
        self.reserve_calls: list[tuple[str, ReservationRequest]] = []

    async def search_flight(
        self,
        address: str,
        origin: str,
        destination: str,
        departure_date: date,
        referer: str | None = None,
    ) -> Flight | None:
        self.search_calls.append((address, origin, destination, departure_date, referer))
        delay = self.delays.get(address)
        if delay:
            await asyncio.sleep(delay)
        result = self.search_results.get(address)
        if isinstance(result, Exception):
            raise result
        return result

    async def reserve(self, address: str, request: ReservationRequest) -> int:
        self.reserve_calls.append((address, request))
        return self.reserve_result


@pytest.fixture
def two_airlines() -> AirlineDirectory:
    return AirlineDirectory({"A Air": "http://a.test", "B Air": "http://b.test"})


@pytest.fixture
def reservation() -> ReservationRequest:
    return ReservationRequest(id=677885206, airline_name="A Air", number_of_tickets=2)
