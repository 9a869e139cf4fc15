from __future__ import annotations

"""
Minimum-size guarantee for match result sets.

After scoring, a detected item may have fewer than ``MIN_RESULTS`` category
approved products. Rather than show an almost empty panel, the selector tops
the list up with random products from the *whole* catalog pool (not just the
category-approved subset). Backfill only ever adds distinct, real products:
when the pool itself is smaller than the minimum, the result is simply
smaller too.

The shuffle takes an injectable ``random.Random`` so tests can pin the
composition; without one a fresh generator is created per call, so separate
requests never share or replay a shuffle order.
"""

import random
from typing import List, Optional, Sequence

from loguru import logger

from .config import MIN_RESULTS, CatalogProduct


def ensure_minimum(
    selected: Sequence[CatalogProduct],
    pool: Sequence[CatalogProduct],
    minimum: int = MIN_RESULTS,
    rng: Optional[random.Random] = None,
) -> List[CatalogProduct]:
    """
    selected: ranked products, best first (kept in order, never reshuffled)
    pool: the entire unfiltered candidate pool used for backfill
    minimum: target size; the result is at most max(len(selected), minimum)
    rng: source of randomness for the backfill shuffle
    """
    picked: List[CatalogProduct] = list(selected)
    if len(picked) >= minimum:
        return picked

    seen = {p.id for p in picked}
    shuffled = list(pool)
    (rng or random.Random()).shuffle(shuffled)

    backfilled = 0
    for product in shuffled:
        if len(picked) >= minimum:
            break
        if product.id in seen:
            continue
        picked.append(product)
        seen.add(product.id)
        backfilled += 1

    if backfilled:
        logger.info("Backfilled {} random products (had {}, target {})", backfilled, len(selected), minimum)
    if len(picked) < minimum:
        logger.warning("Pool exhausted: returning {} of {} guaranteed products", len(picked), minimum)
    return picked
