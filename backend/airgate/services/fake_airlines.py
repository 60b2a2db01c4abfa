"""Canned airline answers for demo mode and local development."""

import random
from datetime import date
from decimal import Decimal

from airgate.schemas.flight import Flight
from airgate.schemas.reservation import ReservationRequest

MAX_CONFIRMATION = 2**63 - 1


class FakeGateway:
    """Same interface as Gateway, no network."""

    @property
    def airlines(self) -> list[str]:
        return ["Lufthansa", "Hawaiian Airlines"]

    async def search(
        self,
        origin: str,
        destination: str,
        departure_date: date,
        referer: str | None = None,
    ) -> list[Flight]:
        flights = [
            Flight(
                id=1,
                airline_name="Lufthansa",
                price_usd=Decimal("300"),
                number_of_free_bags=2,
                number_of_available_seats=4,
                date=departure_date,
            ),
            Flight(
                id=2,
                airline_name="Hawaiian Airlines",
                price_usd=Decimal("340"),
                number_of_free_bags=2,
                number_of_available_seats=7,
                date=departure_date,
            ),
        ]
        return sorted(flights)

    async def reserve(self, request: ReservationRequest) -> int:
        return random.randrange(1, MAX_CONFIRMATION)
