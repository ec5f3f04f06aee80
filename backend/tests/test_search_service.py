from datetime import date

import pytest

from tripsearch.config import settings
from tripsearch.schemas.search import SearchQuery, SearchRequest
from tripsearch.services.search_service import search_service

ROUTES = [("A", "B"), ("DEL", "BOM"), ("Lisbon", "Porto"), ("Kochi", "Munnar")]


def _query(domain, origin="A", destination="B", day=date(2025, 6, 1), **extra):
    return SearchQuery(domain=domain, origin=origin, destination=destination, date=day, **extra)


@pytest.mark.parametrize("domain", ["flight", "hotel", "train"])
def test_search_is_byte_identical_across_runs(domain):
    for origin, destination in ROUTES:
        query = _query(domain, origin, destination, currency_rate=83.0)
        first = search_service.search(query).model_dump_json()
        second = search_service.search(_query(domain, origin, destination, currency_rate=83.0)).model_dump_json()
        assert first == second


@pytest.mark.parametrize("domain", ["flight", "hotel", "train"])
def test_exactly_one_recommended_with_max_score(domain):
    for origin, destination in ROUTES:
        for month in range(1, 13):
            result_set = search_service.search(_query(domain, origin, destination, date(2025, month, 15)))
            results = result_set.results

            recommended = [r for r in results if r.recommended]
            assert len(recommended) == 1
            assert all(recommended[0].score >= r.score for r in results)
            assert result_set.recommended == recommended[0]


def test_recommended_is_first_max_in_generation_order():
    for day in range(1, 29):
        results = search_service.generate(_query("train", "DEL", "BOM", date(2025, 2, day)))
        top = max(r.score for r in results)
        first_top = next(r for r in results if r.score == top)
        assert first_top.recommended


def test_example_scenario_recommendation_is_stable():
    runs = [search_service.generate(_query("flight")) for _ in range(3)]
    picks = [[r.id for r in run if r.recommended] for run in runs]
    assert picks[0] == picks[1] == picks[2]
    assert len(runs[0]) == 7


def test_search_orders_by_requested_mode():
    result_set = search_service.search(_query("hotel", destination="Goa"), sort_by="price_low")
    prices = [r.price for r in result_set.results]
    assert prices == sorted(prices)
    assert result_set.sort_by == "price_low"
    assert result_set.is_demo
    assert result_set.demo_label == "Estimated Results (Demo Mode)"


def test_search_defaults_unknown_sort_mode():
    result_set = search_service.search(_query("flight"), sort_by="fastest")
    assert result_set.sort_by == "recommended"
    scores = [r.score for r in result_set.results]
    assert scores == sorted(scores, reverse=True)


def test_build_query_resolves_currency_code():
    req = SearchRequest(domain="flight", origin="A", destination="B", date=date(2025, 6, 1), currency="inr")
    assert search_service.build_query(req).currency_rate == 83.0


def test_build_query_explicit_rate_wins():
    req = SearchRequest(
        domain="flight", origin="A", destination="B", date=date(2025, 6, 1),
        currency="EUR", currency_rate=2.0,
    )
    assert search_service.build_query(req).currency_rate == 2.0


def test_build_query_defaults_to_usd():
    req = SearchRequest(domain="train", origin="A", destination="B", date=date(2025, 6, 1))
    assert search_service.build_query(req).currency_rate == 1.0


def test_resolve_rate_uses_configured_default_currency(monkeypatch):
    monkeypatch.setattr(settings, "default_currency", "EUR")
    assert search_service.resolve_rate(None, None) == 0.92
    assert search_service.resolve_rate("INR", None) == 83.0
    assert search_service.resolve_rate("INR", 3.0) == 3.0


def test_generate_rejects_unknown_domain():
    query = SearchQuery.model_construct(
        domain="cruise", origin="A", destination="B", date=date(2025, 6, 1),
        currency_rate=1.0, guests=1, train_class=None,
    )
    with pytest.raises(ValueError):
        search_service.generate(query)
