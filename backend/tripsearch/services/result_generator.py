"""Synthetic result generators — flights, hotels and trains for one query.

Every quantity is drawn with its own seed offset (base_seed + i * k) so that
provider choice, departure minute, duration and price jitter are independent
draws. Results come back unscored, in generation order.
"""

import logging
import math

from tripsearch.data.catalogs import (
    AIRLINES,
    AMENITIES,
    FLIGHT_TIER_MULTIPLIERS,
    FLIGHT_TIME_SLOTS,
    HOTEL_BRANDS,
    HOTEL_TIER_AMENITY_COUNTS,
    HOTEL_TIER_BASE_PRICES,
    TRAIN_CLASS_BASE_PRICES,
    TRAIN_SERVICES,
    TRAIN_TIME_SLOTS,
    tier_lookup,
)
from tripsearch.schemas.search import FlightResult, HotelResult, SearchQuery, TrainResult
from tripsearch.services.determinism import round_half_up, seeded_fraction, seeded_hash

logger = logging.getLogger(__name__)

# Per-quantity seed strides
PROVIDER_STRIDE = 7
HOTEL_BRAND_STRIDE = 11
MINUTE_STRIDE = 13
DURATION_STRIDE = 17
STOPS_STRIDE = 19
RATING_STRIDE = 23
HOTEL_PRICE_STRIDE = 29
REVIEWS_STRIDE = 31
SEATS_STRIDE = 37
NUMBER_STRIDE = 3

NON_STOP_MAX_MINUTES = 240
ONE_STOP_THRESHOLD = 0.4
DEFAULT_TRAIN_CLASS = "SL"
DEFAULT_HOTEL_LOCATION = "City Center"


def flight_seed_key(query: SearchQuery) -> str:
    return f"{query.origin}-{query.destination}-{query.date.isoformat()}-flights"


def hotel_seed_key(query: SearchQuery) -> str:
    return f"{query.destination}-{query.date.isoformat()}-hotels"


def train_seed_key(query: SearchQuery) -> str:
    return f"{query.origin}-{query.destination}-{query.date.isoformat()}-trains"


def _pick(catalog: tuple, fraction: float):
    return catalog[math.floor(fraction * len(catalog))]


def _clock(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def _arrival(dep_hour: int, dep_minute: int, duration_minutes: int) -> tuple[str, bool]:
    """Add a duration to a departure time, wrapping at 24h.

    Returns the arrival clock and whether it falls on a later day.
    """
    total = dep_hour * 60 + dep_minute + duration_minutes
    arr_hour = (total // 60) % 24
    return _clock(arr_hour, total % 60), total >= 24 * 60


def _duration_label(minutes: int) -> str:
    return f"{minutes // 60}h {minutes % 60}m"


def _departure_minute(seed: int, i: int) -> int:
    # One of 0, 15, 30, 45
    return math.floor(seeded_fraction(seed + i * MINUTE_STRIDE) * 4) * 15


def generate_flight_results(query: SearchQuery) -> list[FlightResult]:
    seed = seeded_hash(flight_seed_key(query))
    count = 4 + seed % 4
    logger.debug(f"Generating {count} flights for seed {seed}")

    results = []
    for i in range(count):
        airline = _pick(AIRLINES, seeded_fraction(seed + i * PROVIDER_STRIDE))

        dep_hour = FLIGHT_TIME_SLOTS[i % len(FLIGHT_TIME_SLOTS)]
        dep_minute = _departure_minute(seed, i)

        # Budget carriers run ~10% longer
        base_duration = 90 + math.floor(seeded_fraction(seed + i * DURATION_STRIDE) * 240)
        duration = int(round_half_up(base_duration * (1.1 if airline.tier == "budget" else 1.0)))
        arrival, next_day = _arrival(dep_hour, dep_minute, duration)

        if duration > NON_STOP_MAX_MINUTES and seeded_fraction(seed + i * STOPS_STRIDE) > ONE_STOP_THRESHOLD:
            stops = "1 Stop"
        else:
            stops = "Non-stop"

        base_price = 50 + math.floor(duration * 0.3)
        multiplier = tier_lookup(FLIGHT_TIER_MULTIPLIERS, airline.tier)
        price = int(round_half_up(base_price * multiplier * query.currency_rate))

        results.append(FlightResult(
            id=f"flight-{i}",
            airline=airline.name,
            airline_code=airline.code,
            flight_number=f"{airline.code}-{100 + (seed + i * NUMBER_STRIDE) % 900}",
            departure_time=_clock(dep_hour, dep_minute),
            arrival_time=arrival,
            next_day=next_day,
            duration=_duration_label(duration),
            duration_minutes=duration,
            stops=stops,
            price=price,
            tier=airline.tier,
            on_time_rate=airline.on_time_rate,
            guests=query.guests,
        ))

    return results


def _pick_amenities(seed: int, i: int, tier: str) -> tuple[str, ...]:
    wanted = int(tier_lookup(HOTEL_TIER_AMENITY_COUNTS, tier))
    picked: list[str] = []
    for a in range(wanted):
        amenity = AMENITIES[(seed + i + a) % len(AMENITIES)]
        if amenity not in picked:
            picked.append(amenity)
    return tuple(picked)


def generate_hotel_results(query: SearchQuery) -> list[HotelResult]:
    seed = seeded_hash(hotel_seed_key(query))
    count = 4 + seed % 4
    logger.debug(f"Generating {count} hotels for seed {seed}")

    results = []
    for i in range(count):
        brand = _pick(HOTEL_BRANDS, seeded_fraction(seed + i * HOTEL_BRAND_STRIDE))

        jitter = (seeded_fraction(seed + i * RATING_STRIDE) - 0.5) * 0.4
        rating = round_half_up(min(5.0, max(3.0, brand.base_rating + jitter)), 1)

        base_price = tier_lookup(HOTEL_TIER_BASE_PRICES, brand.tier)
        nightly = base_price + seeded_fraction(seed + i * HOTEL_PRICE_STRIDE) * 40
        price = int(round_half_up(nightly * query.currency_rate))

        results.append(HotelResult(
            id=f"hotel-{i}",
            name=f"{brand.name} {brand.suffix}",
            rating=rating,
            reviews=50 + math.floor(seeded_fraction(seed + i * REVIEWS_STRIDE) * 450),
            location=query.destination or DEFAULT_HOTEL_LOCATION,
            price=price,
            amenities=_pick_amenities(seed, i, brand.tier),
            tier=brand.tier,
            guests=query.guests,
        ))

    return results


def generate_train_results(query: SearchQuery) -> list[TrainResult]:
    seed = seeded_hash(train_seed_key(query))
    count = 4 + seed % 3
    logger.debug(f"Generating {count} trains for seed {seed}")

    results = []
    for i in range(count):
        train = _pick(TRAIN_SERVICES, seeded_fraction(seed + i * PROVIDER_STRIDE))

        dep_hour = TRAIN_TIME_SLOTS[i % len(TRAIN_TIME_SLOTS)]
        dep_minute = _departure_minute(seed, i)

        base_duration = 240 + math.floor(seeded_fraction(seed + i * DURATION_STRIDE) * 480)
        duration = int(round_half_up(base_duration / train.speed_factor))
        arrival, next_day = _arrival(dep_hour, dep_minute, duration)

        base_price = tier_lookup(TRAIN_CLASS_BASE_PRICES, train.tier)
        price = int(round_half_up((base_price + math.floor(duration * 0.04)) * query.currency_rate))

        results.append(TrainResult(
            id=f"train-{i}",
            name=train.name,
            number=10000 + (seed + i * NUMBER_STRIDE) % 70000,
            departure_time=_clock(dep_hour, dep_minute),
            arrival_time=arrival,
            next_day=next_day,
            duration=_duration_label(duration),
            duration_minutes=duration,
            price=price,
            seats=5 + math.floor(seeded_fraction(seed + i * SEATS_STRIDE) * 45),
            travel_class=query.train_class or DEFAULT_TRAIN_CLASS,
            tier=train.tier,
        ))

    return results


GENERATORS = {
    "flight": generate_flight_results,
    "hotel": generate_hotel_results,
    "train": generate_train_results,
}
