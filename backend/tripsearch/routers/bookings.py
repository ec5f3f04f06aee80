"""Booking suggestions router — scored options for a trip's bookable segments."""

from fastapi import APIRouter

from tripsearch.schemas.booking import BookingSuggestion, SuggestionRequest
from tripsearch.services.booking_suggestions import generate_all_booking_suggestions
from tripsearch.services.search_service import search_service

router = APIRouter()


@router.post("/suggestions", response_model=dict[str, BookingSuggestion])
async def booking_suggestions(req: SuggestionRequest):
    """Top booking options per bookable segment."""
    rate = search_service.resolve_rate(req.currency, req.currency_rate)

    return generate_all_booking_suggestions(
        req.segments,
        req.travel_date,
        currency_rate=rate,
        is_luxury=req.is_luxury,
        upgrade_pool=req.upgrade_pool,
    )
