from __future__ import annotations
"""
Mapping utilities to turn ranked catalog products into MatchCandidates.

Scores are assigned by final rank, not by raw relevance: rank 0 gets
TOP_PICK_SCORE and every following rank loses RANK_SCORE_STEP. Only rank 0
is flagged as the top pick.
"""

from typing import List, Sequence

from loguru import logger

from .config import RANK_SCORE_STEP, TOP_PICK_SCORE, CatalogProduct, MatchCandidate


def rank_score(rank: int) -> float:
    """Match score for a 0-based rank, floored at 0."""
    return max(0.0, round(TOP_PICK_SCORE - RANK_SCORE_STEP * rank, 2))


def to_match_candidate(product: CatalogProduct, rank: int) -> MatchCandidate:
    data = product.model_dump()
    data.update(match_score=rank_score(rank), is_top_pick=rank == 0)
    return MatchCandidate(**data)


def map_products_to_candidates(products: Sequence[CatalogProduct]) -> List[MatchCandidate]:
    """
    Convert an ordered product list into MatchCandidates.
    Deduplicates by id while preserving first-seen order.
    """
    seen = set()
    deduped: List[CatalogProduct] = []
    for p in products:
        if p.id in seen:
            continue
        seen.add(p.id)
        deduped.append(p)

    if not deduped:
        logger.warning("map_products_to_candidates called with no products")
        return []

    candidates = [to_match_candidate(p, rank) for rank, p in enumerate(deduped)]
    logger.info("Mapped {} products into match candidates", len(candidates))
    return candidates
