from __future__ import annotations

"""
One matching pass for one detected item.

    refine shape -> category filter -> rerank (top N) -> minimum guarantee
    -> URL check -> rank scores

When nothing survives, the response carries a retailer search phrase
instead, so callers can offer "search elsewhere" links.
"""

import random
from typing import Optional, Sequence

from loguru import logger

from . import config
from .balance import ensure_minimum
from .category_match import filter_pool
from .config import CatalogProduct, DetectedItem, MatchResponse
from .mapping import map_products_to_candidates
from .query_builder import build_retailer_query
from .rerank import rerank_candidates
from .shape import refine
from .utils.urls import is_valid_product_url


def fallback_query_for(item: DetectedItem) -> str:
    """Retailer search phrase for an item with no usable catalog match."""
    return build_retailer_query(refine(item))


def match_products(
    item: DetectedItem,
    pool: Sequence[CatalogProduct],
    rng: Optional[random.Random] = None,
    minimum: int = config.MIN_RESULTS,
) -> MatchResponse:
    """
    Rank up to ``minimum`` catalog products for ``item``.

    ``pool`` is the caller's snapshot of the catalog; it is never modified.
    An empty pool is not an error: the response is empty with a fallback
    query.
    """
    item = refine(item)
    pool = list(pool or [])

    if not pool:
        logger.warning("Empty catalog pool for '{}'", item.item_name)

    approved = filter_pool(item, pool)
    logger.info(
        "'{}' ({}): {} of {} products passed category matching",
        item.item_name,
        item.category,
        len(approved),
        len(pool),
    )

    ranked = [c.product for c in rerank_candidates(item, approved, top_k=minimum)]
    selected = ensure_minimum(ranked, pool, minimum=minimum, rng=rng)

    valid = [p for p in selected if is_valid_product_url(p.product_url)]
    dropped = len(selected) - len(valid)
    if dropped:
        logger.warning("Dropped {} products with invalid URLs for '{}'", dropped, item.item_name)

    candidates = map_products_to_candidates(valid)
    if candidates:
        return MatchResponse(candidates=candidates)

    query = build_retailer_query(item)
    logger.info("No catalog match for '{}'; fallback query {!r}", item.item_name, query)
    return MatchResponse(candidates=[], fallback_query=query)
