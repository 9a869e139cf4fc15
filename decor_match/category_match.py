from __future__ import annotations

"""
Relaxed category matching between a detected item and a catalog product.

The matcher is a pure include/exclude filter; it never ranks. It is built
as an ordered list of independent tier predicates evaluated with
short-circuit:

1. group      - item and product share a category group (sofa ~ sectional)
2. generic    - product is plain "decor" and the item is generic furniture/decor
3. exact      - normalised categories are equal
4. partial    - a >3-char category token is a substring of the other side's token
"""

from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from loguru import logger

from .config import CatalogProduct, DetectedItem
from .constants import (
    CATEGORY_GROUPS,
    GENERIC_DECOR_CATEGORY,
    GENERIC_DECOR_ITEM_TERMS,
    PARTIAL_TOKEN_MIN_LEN,
)
from .normalize import lower_clean

TierPredicate = Callable[[str, str, str], bool]


# ---------------------------------------------------------------------------
# Tier predicates (item_name, item_category, product_category), all lowered
# ---------------------------------------------------------------------------


def group_tier(item_name: str, item_category: str, product_category: str) -> bool:
    for keywords in CATEGORY_GROUPS.values():
        item_in_group = any(kw in item_name or kw in item_category for kw in keywords)
        if item_in_group and any(kw in product_category for kw in keywords):
            return True
    return False


def generic_decor_tier(item_name: str, item_category: str, product_category: str) -> bool:
    if product_category != GENERIC_DECOR_CATEGORY:
        return False
    return any(kw in item_name or kw in item_category for kw in GENERIC_DECOR_ITEM_TERMS)


def exact_tier(item_name: str, item_category: str, product_category: str) -> bool:
    return item_category == product_category


def partial_tier(item_name: str, item_category: str, product_category: str) -> bool:
    item_tokens = [t for t in item_category.split() if len(t) >= PARTIAL_TOKEN_MIN_LEN]
    prod_tokens = [t for t in product_category.split() if len(t) >= PARTIAL_TOKEN_MIN_LEN]
    for it in item_tokens:
        for pt in prod_tokens:
            if it in pt or pt in it:
                return True
    return False


MATCH_TIERS: Sequence[Tuple[str, TierPredicate]] = (
    ("group", group_tier),
    ("generic", generic_decor_tier),
    ("exact", exact_tier),
    ("partial", partial_tier),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def matching_tier(
    item_name: Optional[str],
    item_category: Optional[str],
    product_category: Optional[str],
) -> Optional[str]:
    """Name of the first tier that accepts the pair, or None."""
    name = lower_clean(item_name)
    cat = lower_clean(item_category)
    prod = lower_clean(product_category)
    for tier_name, predicate in MATCH_TIERS:
        if predicate(name, cat, prod):
            return tier_name
    return None


def matches(
    item_name: Optional[str],
    item_category: Optional[str],
    product_category: Optional[str],
) -> bool:
    return matching_tier(item_name, item_category, product_category) is not None


def filter_pool(item: DetectedItem, pool: Iterable[CatalogProduct]) -> List[CatalogProduct]:
    """Products whose category is a plausible match for ``item``, order preserved."""
    kept: List[CatalogProduct] = []
    for product in pool:
        tier = matching_tier(item.item_name, item.category, product.category)
        if tier is None:
            logger.debug(
                "Rejected '{}' for '{}' (category={!r})",
                product.product_name,
                item.item_name,
                product.category,
            )
            continue
        logger.debug(
            "Accepted '{}' for '{}' via {} tier", product.product_name, item.item_name, tier
        )
        kept.append(product)
    return kept
