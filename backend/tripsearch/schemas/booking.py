from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, Field

SegmentType = Literal["outbound_travel", "return_travel", "accommodation", "activity", "local_travel"]

BOOKABLE_SEGMENT_TYPES = ("outbound_travel", "return_travel", "accommodation")


class SegmentMetadata(BaseModel):
    transport_mode: str = "train"
    from_: str = Field("", alias="from")
    to: str = ""
    location: str | None = None
    distance_tier: str | None = None

    model_config = {"populate_by_name": True}


class TripSegment(BaseModel):
    id: str | None = None
    type: SegmentType
    day_number: int = 1
    order_index: int = 0
    location: str | None = None
    estimated_cost: float = 0
    metadata: SegmentMetadata = Field(default_factory=SegmentMetadata)

    @property
    def segment_id(self) -> str:
        return self.id or f"seg-{self.day_number}-{self.order_index}"


class BookingOption(BaseModel):
    option_id: str
    provider: str
    estimated_price: float
    rating: float | None = None
    duration: str | None = None
    score: int
    tag: str | None = None
    tier: str | None = None
    raw: dict[str, Any] | None = None


class BookingSuggestion(BaseModel):
    segment_id: str
    segment_type: str
    options: list[BookingOption]
    demo_label: str


class SuggestionRequest(BaseModel):
    segments: list[TripSegment]
    travel_date: date
    currency: str | None = None
    currency_rate: float | None = Field(None, gt=0)
    is_luxury: bool = False
    upgrade_pool: float = Field(0, ge=0)
