from datetime import date
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator

Domain = Literal["flight", "hotel", "train"]
SortMode = Literal["recommended", "price_low", "price_high", "rating"]
StopCount = Literal["Non-stop", "1 Stop", "2+ Stops"]


class SearchQuery(BaseModel):
    """One user search. Transient; identity fields drive the seed."""

    domain: Domain
    origin: str = ""
    destination: str
    date: date
    currency_rate: float = Field(1.0, gt=0)
    guests: int = Field(1, ge=1)
    train_class: str | None = None

    model_config = {"frozen": True}


class SearchRequest(BaseModel):
    """HTTP search body; `currency` is resolved to a rate unless one is given."""

    domain: Domain
    origin: str = ""
    destination: str = Field(..., min_length=1)
    date: date
    currency: str | None = None
    currency_rate: float | None = Field(None, gt=0)
    guests: int = Field(1, ge=1)
    train_class: str | None = None

    @field_validator("origin", "destination", mode="before")
    @classmethod
    def strip_place(cls, v):
        return v.strip() if isinstance(v, str) else v


class BaseResult(BaseModel):
    id: str
    price: int
    tier: str
    score: int | None = None
    recommended: bool = False

    model_config = {"frozen": True}


class FlightResult(BaseResult):
    type: Literal["flight"] = "flight"
    airline: str
    airline_code: str
    flight_number: str
    departure_time: str
    arrival_time: str
    next_day: bool = False
    duration: str
    duration_minutes: int
    stops: StopCount
    on_time_rate: float | None = None
    guests: int = 1


class HotelResult(BaseResult):
    type: Literal["hotel"] = "hotel"
    name: str
    rating: float
    reviews: int
    location: str
    amenities: tuple[str, ...]
    guests: int = 1


class TrainResult(BaseResult):
    type: Literal["train"] = "train"
    name: str
    number: int
    departure_time: str
    arrival_time: str
    next_day: bool = False
    duration: str
    duration_minutes: int
    seats: int
    travel_class: str


SearchResult = Annotated[
    Union[FlightResult, HotelResult, TrainResult],
    Field(discriminator="type"),
]


class ResultSet(BaseModel):
    """Scored results for one query, in display order."""

    domain: Domain
    origin: str
    destination: str
    date: date
    currency_rate: float
    sort_by: SortMode = "recommended"
    is_demo: bool = True
    demo_label: str
    results: list[SearchResult]

    model_config = {"frozen": True}

    @property
    def recommended(self) -> FlightResult | HotelResult | TrainResult | None:
        return next((r for r in self.results if r.recommended), None)
