"""Search router — synthetic flight / hotel / train search and re-sorting."""

import logging

from fastapi import APIRouter, HTTPException, Query

from tripsearch.data.currency import CURRENCY_MULTIPLIERS
from tripsearch.schemas.search import ResultSet, SearchRequest, SearchResult, SortMode
from tripsearch.services.ranker import sort_results
from tripsearch.services.search_service import search_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ResultSet)
async def search(
    req: SearchRequest,
    sort_by: SortMode = Query("recommended"),
):
    """Generate, score and rank results for one query."""
    query = search_service.build_query(req)
    try:
        return search_service.search(query, sort_by)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/sort", response_model=list[SearchResult])
async def sort(
    results: list[SearchResult],
    sort_by: SortMode = Query("recommended"),
):
    """Re-order already-scored results. Scores are never recomputed."""
    if any(r.score is None for r in results):
        raise HTTPException(status_code=400, detail="All results must be scored before sorting")
    return sort_results(results, sort_by)


@router.get("/currencies")
async def list_currencies():
    """Supported currency codes and their USD multipliers."""
    return CURRENCY_MULTIPLIERS
