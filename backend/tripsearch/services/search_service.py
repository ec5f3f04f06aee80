"""Search pipeline — query → seed → generated results → scores → recommended tag."""

import logging

from tripsearch.config import settings
from tripsearch.data.currency import get_currency_rate
from tripsearch.schemas.search import ResultSet, SearchQuery, SearchRequest
from tripsearch.services.ranker import DEFAULT_SORT_MODE, SORT_MODES, sort_results, tag_best
from tripsearch.services.result_generator import GENERATORS
from tripsearch.services.scoring_engine import score_results

logger = logging.getLogger(__name__)


class SearchService:
    """Runs the synthetic search pipeline. Holds no state between calls."""

    def resolve_rate(self, currency: str | None, currency_rate: float | None) -> float:
        """An explicit rate beats a currency code, which beats the configured default."""
        if currency_rate is not None:
            return currency_rate
        return get_currency_rate(currency or settings.default_currency)

    def build_query(self, req: SearchRequest) -> SearchQuery:
        rate = self.resolve_rate(req.currency, req.currency_rate)

        return SearchQuery(
            domain=req.domain,
            origin=req.origin,
            destination=req.destination,
            date=req.date,
            currency_rate=rate,
            guests=req.guests,
            train_class=req.train_class,
        )

    def generate(self, query: SearchQuery) -> list:
        """Scored, tagged results in generation order."""
        generator = GENERATORS.get(query.domain)
        if generator is None:
            raise ValueError(f"Unsupported search domain: {query.domain}")

        return tag_best(score_results(generator(query)))

    def search(self, query: SearchQuery, sort_by: str = DEFAULT_SORT_MODE) -> ResultSet:
        if sort_by not in SORT_MODES:
            logger.warning(f"Unknown sort mode {sort_by!r}, using {DEFAULT_SORT_MODE}")
            sort_by = DEFAULT_SORT_MODE

        results = self.generate(query)
        ordered = sort_results(results, sort_by)

        best = next(r for r in results if r.recommended)
        logger.info(
            f"Search {query.domain} {query.origin or '-'}→{query.destination} {query.date}: "
            f"{len(results)} results, recommended {best.id} (score {best.score})"
        )

        return ResultSet(
            domain=query.domain,
            origin=query.origin,
            destination=query.destination,
            date=query.date,
            currency_rate=query.currency_rate,
            sort_by=sort_by,
            demo_label=settings.demo_label,
            results=ordered,
        )


search_service = SearchService()
