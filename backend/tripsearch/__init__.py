"""TripSearch — deterministic synthetic travel search and ranking.

Modules:
    data.catalogs               Static airline / hotel / train provider tables
    data.currency               Currency multipliers for localised prices
    services.determinism        Query key → seed → fraction
    services.result_generator   Flight, hotel and train result generation
    services.scoring_engine     Weighted multi-criteria composite scores
    services.ranker             Recommended tag and display sort modes
    services.search_service     The full query → ranked result set pipeline
    services.booking_suggestions  Top options per bookable trip segment

Pipeline:
    seeded_hash → generate_*_results → score_results → tag_best → sort_results
"""
