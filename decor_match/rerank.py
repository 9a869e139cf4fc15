# decor_match/rerank.py
from __future__ import annotations

from typing import List, Optional, Sequence

from loguru import logger

from . import config
from .config import CatalogProduct, DetectedItem
from .normalize import dedupe_terms, join_text, lower_clean
from .pipeline_types import ScoredCandidate

# ---------------------------------------------------------------------------
# Text views
# ---------------------------------------------------------------------------


def build_search_terms(item: DetectedItem) -> List[str]:
    """
    Lower-cased, de-duplicated terms describing the detected item:
    name, style, colour, then every tag. Empty values are dropped.
    """
    return dedupe_terms([item.item_name, item.style, item.dominant_color, *item.tags])


def build_candidate_text(product: CatalogProduct) -> str:
    """
    Lower-cased text a product is searched against.
    Includes name + description + colour + style + tags + materials.
    """
    return join_text(
        [
            product.product_name,
            product.description,
            product.color,
            product.style,
            *product.tags,
            *product.materials,
        ]
    )


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def _contains(haystack: Optional[str], needle: Optional[str]) -> bool:
    needle = lower_clean(needle)
    return bool(needle) and needle in lower_clean(haystack)


def _same_category(a: Optional[str], b: Optional[str]) -> bool:
    a = (a or "").strip()
    b = (b or "").strip()
    return bool(a) and a == b


def score_candidate(
    item: DetectedItem,
    product: CatalogProduct,
    search_terms: Optional[Sequence[str]] = None,
) -> float:
    """Additive relevance score for one product against one detected item."""
    terms = build_search_terms(item) if search_terms is None else search_terms
    text = build_candidate_text(product)

    score = config.TERM_HIT_WEIGHT * sum(1 for t in terms if t in text)

    if _same_category(product.category, item.category):
        score += config.CATEGORY_MATCH_WEIGHT
    if _contains(product.color, item.dominant_color):
        score += config.COLOR_MATCH_WEIGHT
    if _contains(product.style, item.style):
        score += config.STYLE_MATCH_WEIGHT

    return score


def score_candidates(
    item: DetectedItem,
    candidates: Sequence[CatalogProduct],
) -> List[ScoredCandidate]:
    terms = build_search_terms(item)
    logger.debug("Scoring {} candidates with terms {}", len(candidates), terms)
    return [
        ScoredCandidate(product=p, relevance=score_candidate(item, p, terms), position=i)
        for i, p in enumerate(candidates)
    ]


def rerank_candidates(
    item: DetectedItem,
    candidates: Sequence[CatalogProduct],
    top_k: int = config.MAX_RESULTS,
) -> List[ScoredCandidate]:
    """
    Score category-approved candidates and keep the best ``top_k``.

    Sort is descending by relevance; ties keep their incoming order.
    """
    if not candidates or top_k <= 0:
        return []

    scored = score_candidates(item, candidates)
    ranked = sorted(scored, key=lambda c: (-c.relevance, c.position))
    top = ranked[:top_k]

    for i, c in enumerate(top, start=1):
        logger.debug("  {}. '{}' (category: {}, score: {})", i, c.product.product_name, c.product.category, c.relevance)
    return top
