"""Typed containers shared across pipeline modules."""

from __future__ import annotations

from dataclasses import dataclass

from .config import CatalogProduct


@dataclass
class ScoredCandidate:
    """A category-approved product with its raw relevance score."""

    product: CatalogProduct
    relevance: float
    position: int  # index in the incoming pool, for stable tie-breaks
