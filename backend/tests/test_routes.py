"""HTTP surface tests with a stub gateway on app.state."""

from __future__ import annotations

import json
from datetime import date

import pytest
from fastapi.testclient import TestClient

from airgate.main import app
from airgate.schemas.flight import Flight
from airgate.schemas.reservation import ReservationRequest

from conftest import TRAVEL_DATE, make_flight

AUTH_COOKIE = {"Cookie": "flight_reservation_auth=abcd"}
RESERVATION_BODY = {"id": 677885206, "airlineName": "Singapore Airlines", "numberOfTickets": 29}


class StubGateway:
    def __init__(self, flights: list[Flight] | None = None, confirmation: int = 12345) -> None:
        self.flights = flights or []
        self.confirmation = confirmation
        self.search_calls: list[tuple[str, str, date, str | None]] = []
        self.reserve_calls: list[ReservationRequest] = []
        self.airlines = ["B Air", "A Air"]

    async def search(
        self, origin: str, destination: str, departure_date: date, referer: str | None = None
    ) -> list[Flight]:
        self.search_calls.append((origin, destination, departure_date, referer))
        return self.flights

    async def reserve(self, request: ReservationRequest) -> int:
        self.reserve_calls.append(request)
        return self.confirmation


@pytest.fixture
def gateway() -> StubGateway:
    return StubGateway(flights=[make_flight("B Air", 340, 2), make_flight("A Air", 300, 1)])


@pytest.fixture
def client(gateway: StubGateway) -> TestClient:
    app.state.gateway = gateway
    return TestClient(app)


def test_status(client: TestClient) -> None:
    response = client.get("/status")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "airgate", "airlines": ["A Air", "B Air"]}


# ─── /search ───


def test_search_returns_flights(client: TestClient, gateway: StubGateway) -> None:
    response = client.get(
        "/search",
        params={"origin": "lax", "destination": "sfo", "day": "03", "month": "12", "year": "2027"},
        headers={"Accept": "application/json", "Referer": "https://deals.example.com"},
    )

    assert response.status_code == 200
    flights = response.json()["flights"]
    assert [f["airlineName"] for f in flights] == ["B Air", "A Air"]
    assert flights[0]["priceUSD"] == 340.0
    assert flights[0]["date"] == "2027-12-03"
    assert gateway.search_calls == [("lax", "sfo", TRAVEL_DATE, "https://deals.example.com")]


def test_search_with_no_results(client: TestClient, gateway: StubGateway) -> None:
    gateway.flights = []

    response = client.get(
        "/search",
        params={"origin": "lax", "destination": "sfo", "day": "3", "month": "12", "year": "2027"},
    )

    assert response.status_code == 200
    assert response.json() == {"flights": []}


def test_search_rejects_non_json_accept(client: TestClient, gateway: StubGateway) -> None:
    response = client.get(
        "/search",
        params={"origin": "lax", "destination": "sfo", "day": "3", "month": "12", "year": "2027"},
        headers={"Accept": "text/html"},
    )

    assert response.status_code == 406
    assert gateway.search_calls == []


@pytest.mark.parametrize("missing", ["origin", "destination", "day", "month", "year"])
def test_search_missing_parameter(client: TestClient, gateway: StubGateway, missing: str) -> None:
    params = {"origin": "lax", "destination": "sfo", "day": "3", "month": "12", "year": "2027"}
    del params[missing]

    response = client.get("/search", params=params)

    assert response.status_code == 400
    assert response.json()["detail"] == "One of the URL parameters is missing"
    assert gateway.search_calls == []


@pytest.mark.parametrize(
    "day, month, year",
    [
        ("31", "2", "2027"),
        ("x", "12", "2027"),
        ("1", "13", "2027"),
        ("1", "1", "99999999999999999999"),
    ],
)
def test_search_invalid_date(client: TestClient, day: str, month: str, year: str) -> None:
    response = client.get(
        "/search",
        params={"origin": "lax", "destination": "sfo", "day": day, "month": month, "year": year},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid date"


# ─── /reserve ───


def test_reserve_success(client: TestClient, gateway: StubGateway) -> None:
    response = client.post("/reserve", json=RESERVATION_BODY, headers=AUTH_COOKIE)

    assert response.status_code == 200
    assert response.text == "12345"
    assert response.headers["content-type"].startswith("text/plain")
    assert gateway.reserve_calls[0].airline_name == "Singapore Airlines"
    assert gateway.reserve_calls[0].number_of_tickets == 29


def test_reserve_failure_is_server_error(client: TestClient, gateway: StubGateway) -> None:
    gateway.confirmation = -1

    response = client.post("/reserve", json=RESERVATION_BODY, headers=AUTH_COOKIE)

    assert response.status_code == 500
    assert response.json()["detail"] == "Flight Reservation failed"


def test_reserve_requires_auth_cookie(client: TestClient, gateway: StubGateway) -> None:
    response = client.post("/reserve", json=RESERVATION_BODY)

    assert response.status_code == 401
    assert gateway.reserve_calls == []


def test_reserve_rejects_bad_token(client: TestClient, gateway: StubGateway) -> None:
    response = client.post(
        "/reserve", json=RESERVATION_BODY, headers={"Cookie": "flight_reservation_auth=nope"}
    )

    assert response.status_code == 401


def test_reserve_auth_checked_before_content_type(client: TestClient) -> None:
    response = client.post(
        "/reserve", content="hello", headers={"Content-Type": "text/plain"}
    )

    assert response.status_code == 401


def test_reserve_requires_json_content_type(client: TestClient, gateway: StubGateway) -> None:
    response = client.post(
        "/reserve",
        content=json.dumps(RESERVATION_BODY),
        headers={**AUTH_COOKIE, "Content-Type": "text/plain"},
    )

    assert response.status_code == 415
    assert gateway.reserve_calls == []


def test_reserve_invalid_body(client: TestClient, gateway: StubGateway) -> None:
    response = client.post(
        "/reserve",
        content=json.dumps({"airlineName": "Singapore Airlines"}),
        headers={**AUTH_COOKIE, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert gateway.reserve_calls == []
