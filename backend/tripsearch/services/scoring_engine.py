"""Scoring engine — composite 0-100 score per result from four weighted criteria.

Each domain has a profile of exactly four criteria whose weights sum to 1.0.
A criterion names the result attribute it reads and the method that turns the
raw value into a 0-100 sub-score:

    range_low   min-max rescale across the result set, lower is better
                (50 for every result when all values are equal)
    cap         min(value / cap, 1) * 100, higher is better
    lookup      fixed table; unknown values take the lowest entry
    rating      3.0-5.0 star rating rescaled to 0-100
    fraction    0-1 fraction expressed as a percentage
    coverage    share of the amenity vocabulary, as a percentage

Scores depend only on siblings from the same generation run.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence

from tripsearch.data.catalogs import AMENITIES
from tripsearch.services.determinism import round_half_up

NEUTRAL_SCORE = 50.0

STOPS_SCORES: Mapping[str, float] = MappingProxyType({
    "Non-stop": 100,
    "1 Stop": 50,
    "2+ Stops": 20,
})

CLASS_SCORES: Mapping[str, float] = MappingProxyType({
    "premium": 90,
    "mid-range": 60,
    "budget": 30,
})


def _range_low(value, criterion, bounds: tuple[float, float]) -> float:
    lo, hi = bounds
    if hi <= lo:
        return NEUTRAL_SCORE
    return (1 - (value - lo) / (hi - lo)) * 100


def _cap(value, criterion, bounds) -> float:
    return min(value / criterion.cap, 1) * 100


def _lookup(value, criterion, bounds) -> float:
    return criterion.table.get(value, min(criterion.table.values()))


def _rating(value, criterion, bounds) -> float:
    return (value - 3) / 2 * 100


def _fraction(value, criterion, bounds) -> float:
    return value * 100


def _coverage(value, criterion, bounds) -> float:
    return len(value) / len(AMENITIES) * 100


# method name → fn(value, criterion, bounds) -> 0-100 sub-score
SCORING_METHODS: Mapping[str, Callable[..., float]] = MappingProxyType({
    "range_low": _range_low,
    "cap": _cap,
    "lookup": _lookup,
    "rating": _rating,
    "fraction": _fraction,
    "coverage": _coverage,
})


@dataclass(frozen=True)
class Criterion:
    name: str
    weight: float
    source: str
    method: str
    cap: float | None = None
    table: Mapping[str, float] = field(default_factory=dict)
    default: Any = None

    def __post_init__(self):
        if self.method not in SCORING_METHODS:
            raise ValueError(f"Unknown scoring method: {self.method}")
        if self.method == "cap" and not self.cap:
            raise ValueError(f"Criterion {self.name!r} needs a positive cap")
        if self.method == "lookup" and not self.table:
            raise ValueError(f"Criterion {self.name!r} needs a lookup table")


SCORING_PROFILES: dict[str, tuple[Criterion, ...]] = {
    "flight": (
        Criterion("price", 0.40, "price", "range_low"),
        Criterion("duration", 0.25, "duration_minutes", "range_low"),
        Criterion("stops", 0.20, "stops", "lookup", table=STOPS_SCORES),
        Criterion("on_time", 0.15, "on_time_rate", "fraction", default=0.8),
    ),
    "hotel": (
        Criterion("price", 0.35, "price", "range_low"),
        Criterion("rating", 0.30, "rating", "rating"),
        Criterion("amenities", 0.20, "amenities", "coverage"),
        Criterion("reviews", 0.15, "reviews", "cap", cap=500),
    ),
    "train": (
        Criterion("price", 0.40, "price", "range_low"),
        Criterion("duration", 0.30, "duration_minutes", "range_low"),
        Criterion("class", 0.15, "tier", "lookup", table=CLASS_SCORES),
        Criterion("seats", 0.15, "seats", "cap", cap=50),
    ),
}


def _field(result, criterion: Criterion):
    value = getattr(result, criterion.source, None)
    return criterion.default if value is None else value


def _criterion_score(result, criterion: Criterion, bounds: tuple[float, float] | None) -> float:
    return SCORING_METHODS[criterion.method](_field(result, criterion), criterion, bounds)


def _bounds(results: Sequence, profile: tuple[Criterion, ...]) -> dict[str, tuple[float, float]]:
    bounds = {}
    for criterion in profile:
        if criterion.method == "range_low":
            values = [_field(r, criterion) for r in results]
            bounds[criterion.name] = (min(values), max(values))
    return bounds


def criterion_scores(result, siblings: Sequence) -> dict[str, float]:
    """Per-criterion 0-100 sub-scores for one result against its result set."""
    profile = SCORING_PROFILES[result.type]
    bounds = _bounds(siblings, profile)
    return {
        c.name: _criterion_score(result, c, bounds.get(c.name))
        for c in profile
    }


def composite_score(subscores: dict[str, float], domain: str) -> int:
    total = sum(c.weight * subscores[c.name] for c in SCORING_PROFILES[domain])
    return int(round_half_up(total))


def score_result(result, siblings: Sequence) -> int:
    """Composite 0-100 score for one result within its result set."""
    return composite_score(criterion_scores(result, siblings), result.type)


def score_results(results: Sequence) -> list:
    """
    Score every result of one generation run.

    Returns new result objects with `score` set, in the same order; the
    inputs are left untouched.
    """
    if not results:
        return []

    profile = SCORING_PROFILES[results[0].type]
    bounds = _bounds(results, profile)

    scored = []
    for r in results:
        subscores = {c.name: _criterion_score(r, c, bounds.get(c.name)) for c in profile}
        scored.append(r.model_copy(update={"score": composite_score(subscores, r.type)}))
    return scored
