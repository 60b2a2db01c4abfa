from pydantic import BaseModel, Field


class ReservationRequest(BaseModel):
    """Client request to buy tickets on one airline's flight.

    ``id`` and ``number_of_tickets`` are forwarded to the airline untouched.
    """

    id: int
    airline_name: str = Field(alias="airlineName")
    number_of_tickets: int = Field(alias="numberOfTickets")

    model_config = {"populate_by_name": True}
