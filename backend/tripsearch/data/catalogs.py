"""Static provider catalogs for synthetic search results.

Airlines, hotel brands and train services, each tagged with a service tier
and one tier-correlated quality attribute. Generators address these tables
by index, so reordering an entry changes every generated result set.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Airline:
    name: str
    code: str
    tier: str
    on_time_rate: float


@dataclass(frozen=True)
class HotelBrand:
    name: str
    suffix: str
    tier: str
    base_rating: float


@dataclass(frozen=True)
class TrainService:
    name: str
    tier: str
    speed_factor: float


# ---------- Airlines ----------

AIRLINES: tuple[Airline, ...] = (
    Airline("IndiGo", "6E", "budget", 0.82),
    Airline("Air India", "AI", "mid-range", 0.74),
    Airline("Vistara", "UK", "premium", 0.86),
    Airline("Emirates", "EK", "luxury", 0.91),
    Airline("SpiceJet", "SG", "budget", 0.72),
    Airline("AirAsia", "I5", "budget", 0.78),
)

# ---------- Hotel brands ----------

HOTEL_BRANDS: tuple[HotelBrand, ...] = (
    HotelBrand("Grand", "Hotel", "luxury", 4.5),
    HotelBrand("Royal", "Resort", "luxury", 4.3),
    HotelBrand("Cozy", "Inn", "budget", 3.8),
    HotelBrand("Urban", "Stay", "mid-range", 4.0),
    HotelBrand("Seaside", "Suites", "mid-range", 4.1),
    HotelBrand("Backpacker", "Hostel", "budget", 3.5),
    HotelBrand("Heritage", "Palace", "luxury", 4.7),
    HotelBrand("Comfort", "Lodge", "mid-range", 3.9),
)

AMENITIES: tuple[str, ...] = (
    "Wifi", "Pool", "Breakfast", "Gym", "Spa", "Parking", "Restaurant", "Room Service",
)

# ---------- Train services ----------

TRAIN_SERVICES: tuple[TrainService, ...] = (
    TrainService("Rajdhani Express", "premium", 1.0),
    TrainService("Shatabdi Express", "premium", 0.9),
    TrainService("Duronto Express", "mid-range", 0.85),
    TrainService("Intercity Express", "mid-range", 0.7),
    TrainService("Garib Rath", "budget", 0.6),
    TrainService("Jan Shatabdi", "budget", 0.65),
)

# Departure hours, cycled by result index
FLIGHT_TIME_SLOTS: tuple[int, ...] = (6, 8, 10, 12, 14, 16, 18, 21)
TRAIN_TIME_SLOTS: tuple[int, ...] = (5, 7, 9, 12, 15, 18, 22)

# ---------- Tier pricing ----------

FLIGHT_TIER_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "budget": 0.7,
    "mid-range": 1.0,
    "premium": 1.4,
    "luxury": 2.2,
})

HOTEL_TIER_BASE_PRICES: Mapping[str, int] = MappingProxyType({
    "budget": 30,
    "mid-range": 80,
    "luxury": 220,
})

HOTEL_TIER_AMENITY_COUNTS: Mapping[str, int] = MappingProxyType({
    "budget": 2,
    "mid-range": 3,
    "luxury": 5,
})

TRAIN_CLASS_BASE_PRICES: Mapping[str, int] = MappingProxyType({
    "budget": 10,
    "mid-range": 20,
    "premium": 35,
})


def tier_lookup(table: Mapping[str, float], tier: str | None) -> float:
    """Look up a tier value, falling back to the lowest bucket for unknown tiers."""
    if tier in table:
        return table[tier]
    return min(table.values())
