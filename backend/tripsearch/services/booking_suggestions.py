"""Booking suggestions — top scored options for each bookable trip segment.

Travel segments run the flight or train generator depending on transport
mode; accommodation segments run the hotel generator. Modes without
bookable inventory (car, bike) get a single own-vehicle option. Luxury trips
may carry an extra upgrade option funded from the allocation's upgrade pool.
"""

import logging
from datetime import date

from tripsearch.config import settings
from tripsearch.schemas.booking import (
    BOOKABLE_SEGMENT_TYPES,
    BookingOption,
    BookingSuggestion,
    TripSegment,
)
from tripsearch.schemas.search import SearchQuery
from tripsearch.services.determinism import round_half_up
from tripsearch.services.ranker import sort_results
from tripsearch.services.search_service import search_service

logger = logging.getLogger(__name__)

TRAVEL_SEGMENT_TYPES = ("outbound_travel", "return_travel")

# transport mode → (domain, train class)
TRANSPORT_DOMAINS: dict[str, tuple[str, str | None]] = {
    "flight": ("flight", None),
    "train": ("train", "2A"),
    "bus": ("train", "SL"),
}

UPGRADE_SCORE_BONUS = 5


def _provider(result) -> str:
    return getattr(result, "airline", None) or getattr(result, "name", None) or "Provider"


def _rating(result) -> float | None:
    return getattr(result, "rating", None) or getattr(result, "on_time_rate", None)


def _own_vehicle(segment: TripSegment) -> BookingSuggestion:
    meta = segment.metadata
    return BookingSuggestion(
        segment_id=segment.segment_id,
        segment_type=segment.type,
        options=[BookingOption(
            option_id="own-vehicle-1",
            provider="Own Bike" if meta.transport_mode == "bike" else "Own Car",
            estimated_price=segment.estimated_cost,
            duration=meta.distance_tier or "varies",
            score=100,
            tag="Best",
        )],
        demo_label=settings.demo_label,
    )


def _segment_query(segment: TripSegment, travel_date: date, currency_rate: float) -> SearchQuery | None:
    meta = segment.metadata

    if segment.type in TRAVEL_SEGMENT_TYPES:
        domain, train_class = TRANSPORT_DOMAINS[meta.transport_mode]
        return SearchQuery(
            domain=domain,
            origin=meta.from_,
            destination=meta.to,
            date=travel_date,
            currency_rate=currency_rate,
            train_class=train_class,
        )

    if segment.type == "accommodation":
        return SearchQuery(
            domain="hotel",
            destination=segment.location or meta.location or "",
            date=travel_date,
            currency_rate=currency_rate,
        )

    return None


def suggest_bookings_for_segment(
    segment: TripSegment,
    travel_date: date,
    currency_rate: float = 1.0,
    is_luxury: bool = False,
    upgrade_pool: float = 0,
    bookable_count: int = 3,
) -> BookingSuggestion:
    """Top options for one segment, best first, plus an optional upgrade."""
    if segment.type in TRAVEL_SEGMENT_TYPES and segment.metadata.transport_mode not in TRANSPORT_DOMAINS:
        return _own_vehicle(segment)

    query = _segment_query(segment, travel_date, currency_rate)
    results = search_service.generate(query) if query else []

    ranked = sort_results(results, "recommended")
    top = ranked[:settings.suggestion_count]

    options = [
        BookingOption(
            option_id=r.id,
            provider=_provider(r),
            estimated_price=r.price,
            rating=_rating(r),
            duration=getattr(r, "duration", None),
            score=r.score,
            tag="Best" if idx == 0 else None,
            tier=r.tier,
            raw=r.model_dump(),
        )
        for idx, r in enumerate(top)
    ]

    if is_luxury and upgrade_pool > 0 and ranked:
        best = ranked[0]
        upgrade_amount = int(round_half_up(upgrade_pool / max(1, bookable_count)))
        options.append(BookingOption(
            option_id="opt-upgrade",
            provider=f"{_provider(best)} Premium",
            estimated_price=best.price + upgrade_amount,
            rating=_rating(best),
            duration=getattr(best, "duration", None),
            score=min(100, best.score + UPGRADE_SCORE_BONUS),
            tag="Upgrade Available",
            tier="premium",
            raw={**best.model_dump(), "upgraded": True, "upgrade_amount": upgrade_amount},
        ))

    return BookingSuggestion(
        segment_id=segment.segment_id,
        segment_type=segment.type,
        options=options,
        demo_label=settings.demo_label,
    )


def generate_all_booking_suggestions(
    segments: list[TripSegment],
    travel_date: date,
    currency_rate: float = 1.0,
    is_luxury: bool = False,
    upgrade_pool: float = 0,
) -> dict[str, BookingSuggestion]:
    """Suggestions for every bookable segment, keyed by segment id."""
    bookable = [s for s in segments if s.type in BOOKABLE_SEGMENT_TYPES]

    suggestions = {}
    for segment in bookable:
        suggestion = suggest_bookings_for_segment(
            segment,
            travel_date,
            currency_rate=currency_rate,
            is_luxury=is_luxury,
            upgrade_pool=upgrade_pool,
            bookable_count=len(bookable),
        )
        suggestions[suggestion.segment_id] = suggestion

    logger.info(f"Booking suggestions: {len(suggestions)} of {len(segments)} segments bookable")
    return suggestions
