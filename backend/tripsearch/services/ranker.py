"""Ranker — tags the recommended result and re-orders scored results for display."""

import logging
from typing import Sequence

logger = logging.getLogger(__name__)

SORT_MODES = ("recommended", "price_low", "price_high", "rating")
DEFAULT_SORT_MODE = "recommended"


def best_index(results: Sequence) -> int | None:
    """Index of the highest score; the first one wins ties."""
    best = None
    for i, r in enumerate(results):
        if best is None or (r.score or 0) > (results[best].score or 0):
            best = i
    return best


def tag_best(results: Sequence) -> list:
    """Return copies of `results` with exactly one marked as recommended."""
    best = best_index(results)
    return [
        r.model_copy(update={"recommended": i == best})
        for i, r in enumerate(results)
    ]


def sort_results(results: Sequence, sort_by: str = DEFAULT_SORT_MODE) -> list:
    """
    Stable re-ordering of already-scored results. Never rescores.

    price_low:   ascending price
    price_high:  descending price
    rating:      descending rating (results without one count as 0)
    recommended: descending composite score
    """
    if sort_by == "price_low":
        return sorted(results, key=lambda r: r.price)
    if sort_by == "price_high":
        return sorted(results, key=lambda r: r.price, reverse=True)
    if sort_by == "rating":
        return sorted(results, key=lambda r: getattr(r, "rating", None) or 0, reverse=True)
    if sort_by != DEFAULT_SORT_MODE:
        logger.warning(f"Unknown sort mode {sort_by!r}, using {DEFAULT_SORT_MODE}")
    return sorted(results, key=lambda r: r.score or 0, reverse=True)
