from datetime import date

from tripsearch.schemas.booking import TripSegment
from tripsearch.services.booking_suggestions import (
    generate_all_booking_suggestions,
    suggest_bookings_for_segment,
)

TRAVEL_DATE = date(2025, 6, 1)


def _travel(mode, seg_id="out-1", seg_type="outbound_travel", **extra):
    return TripSegment(
        id=seg_id,
        type=seg_type,
        metadata={"transport_mode": mode, "from": "DEL", "to": "Jaipur"},
        **extra,
    )


def test_flight_segment_gets_top_three_best_first():
    suggestion = suggest_bookings_for_segment(_travel("flight"), TRAVEL_DATE)

    assert suggestion.segment_id == "out-1"
    assert suggestion.demo_label == "Estimated Results (Demo Mode)"
    assert len(suggestion.options) == 3

    scores = [o.score for o in suggestion.options]
    assert scores == sorted(scores, reverse=True)
    assert [o.tag for o in suggestion.options] == ["Best", None, None]
    assert suggestion.options[0].raw["type"] == "flight"
    assert suggestion.options[0].raw["recommended"] is True


def test_train_and_bus_use_train_classes():
    train = suggest_bookings_for_segment(_travel("train"), TRAVEL_DATE)
    bus = suggest_bookings_for_segment(_travel("bus"), TRAVEL_DATE)

    assert {o.raw["travel_class"] for o in train.options} == {"2A"}
    assert {o.raw["travel_class"] for o in bus.options} == {"SL"}
    # Class is echoed only; the offers themselves are identical
    assert [o.provider for o in train.options] == [o.provider for o in bus.options]


def test_own_vehicle_for_car_and_bike():
    car = suggest_bookings_for_segment(_travel("car", estimated_cost=1200), TRAVEL_DATE)
    bike = suggest_bookings_for_segment(_travel("bike"), TRAVEL_DATE)

    (car_option,) = car.options
    assert car_option.provider == "Own Car"
    assert car_option.estimated_price == 1200
    assert car_option.score == 100
    assert car_option.tag == "Best"
    assert car_option.duration == "varies"
    assert bike.options[0].provider == "Own Bike"


def test_accommodation_uses_segment_location():
    segment = TripSegment(type="accommodation", day_number=2, order_index=1, location="Udaipur")
    suggestion = suggest_bookings_for_segment(segment, TRAVEL_DATE)

    assert suggestion.segment_id == "seg-2-1"
    assert all(o.raw["location"] == "Udaipur" for o in suggestion.options)
    assert all(o.rating is not None for o in suggestion.options)


def test_luxury_upgrade_option():
    segment = _travel("flight")
    plain = suggest_bookings_for_segment(segment, TRAVEL_DATE)
    luxe = suggest_bookings_for_segment(
        segment, TRAVEL_DATE, is_luxury=True, upgrade_pool=900, bookable_count=3,
    )

    assert len(luxe.options) == 4
    upgrade = luxe.options[-1]
    best = plain.options[0]
    assert upgrade.tag == "Upgrade Available"
    assert upgrade.tier == "premium"
    assert upgrade.provider == f"{best.provider} Premium"
    assert upgrade.estimated_price == best.estimated_price + 300
    assert upgrade.score == min(100, best.score + 5)
    assert upgrade.raw["upgraded"] is True


def test_no_upgrade_without_pool():
    suggestion = suggest_bookings_for_segment(_travel("flight"), TRAVEL_DATE, is_luxury=True, upgrade_pool=0)
    assert len(suggestion.options) == 3


def test_currency_rate_scales_prices():
    usd = suggest_bookings_for_segment(_travel("train"), TRAVEL_DATE)
    inr = suggest_bookings_for_segment(_travel("train"), TRAVEL_DATE, currency_rate=83.0)
    assert all(b.estimated_price > a.estimated_price for a, b in zip(usd.options, inr.options))


def test_all_suggestions_skip_non_bookable_segments():
    segments = [
        _travel("flight", seg_id="out"),
        TripSegment(id="stay", type="accommodation", location="Jaipur"),
        TripSegment(id="fort", type="activity", location="Amber Fort"),
        _travel("train", seg_id="back", seg_type="return_travel"),
    ]
    suggestions = generate_all_booking_suggestions(segments, TRAVEL_DATE)

    assert set(suggestions) == {"out", "stay", "back"}
    assert suggestions["back"].segment_type == "return_travel"


def test_all_suggestions_split_upgrade_pool_across_bookable_segments():
    segments = [
        _travel("flight", seg_id="out"),
        TripSegment(id="stay", type="accommodation", location="Jaipur"),
    ]
    suggestions = generate_all_booking_suggestions(segments, TRAVEL_DATE, is_luxury=True, upgrade_pool=500)

    stay = suggestions["stay"].options
    assert stay[-1].estimated_price == stay[0].estimated_price + 250


def test_suggestions_are_deterministic():
    segments = [_travel("flight", seg_id="out"), TripSegment(id="stay", type="accommodation", location="Goa")]
    first = generate_all_booking_suggestions(segments, TRAVEL_DATE)
    second = generate_all_booking_suggestions(segments, TRAVEL_DATE)
    assert {k: v.model_dump() for k, v in first.items()} == {k: v.model_dump() for k, v in second.items()}
