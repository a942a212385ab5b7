from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Decimal in memoria, numero nel JSON in uscita
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Search input
# ---------------------------------------------------------------------------

class SearchParams(CamelModel):
    # after validation holds the sanitized pair "CODE1,CODE2"
    fly_from: str = ""
    fly_to: str
    currency: str
    # external format dd/mm/YYYY
    date_from: str
    date_to: str

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


# ---------------------------------------------------------------------------
# Tequila payloads (the JSON shape is given by the external API)
# ---------------------------------------------------------------------------

class LocationResult(BaseModel):
    locations: list[dict]


class Baggage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bag_one_price: Decimal | None = Field(default=None, alias="1")
    bag_two_price: Decimal | None = Field(default=None, alias="2")


class FlightOffer(CamelModel):
    fly_to: str
    city_to: str
    price: Decimal
    baggage: Baggage = Field(default_factory=Baggage, alias="bags_price")


class FlightSearchResponse(BaseModel):
    currency: str
    data: list[FlightOffer]


# ---------------------------------------------------------------------------
# Average response
# ---------------------------------------------------------------------------

class BagsAverage(CamelModel):
    bag_one_average_price: Money
    bag_two_average_price: Money


class DestinationSummary(CamelModel):
    city_name: str
    currency: str
    price_average: Money
    bags_average: BagsAverage


class SearchHeaderResult(CamelModel):
    # ISO YYYY-MM-DD
    date_from: str
    date_to: str
    # destination code → summary
    average_flights: dict[str, DestinationSummary]

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


# ---------------------------------------------------------------------------
# Search records + errors
# ---------------------------------------------------------------------------

class FlightRecordOut(CamelModel):
    id: int
    fly_to: str
    currency: str
    date_from: str
    date_to: str
    record_date_time: datetime

    # Permette a Pydantic di leggere i dati direttamente da oggetti SQLAlchemy
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ErrorOut(BaseModel):
    message: str
    status: int
