from __future__ import annotations

"""
Retailer search-phrase construction for the "search elsewhere" fallback.

The phrase is anchored on the detected item's name and enriched with a few
short descriptors, in priority order:

    colour -> pattern/feature -> shape -> subtype -> material

Descriptors go in front of the anchor in that order ("white organic coffee
table"). A descriptor is skipped when it already appears as a whole word in
the phrase built so far, the final word list is de-duplicated
case-insensitively, and the phrase is capped at MAX_QUERY_WORDS by dropping
the lowest-priority descriptors first. The anchor itself is never reordered.
"""

from typing import Iterable, List, Optional

from loguru import logger

from . import config
from .config import DetectedItem
from .constants import MATERIAL_TERMS, PATTERN_TERMS, SUBTYPE_TERMS
from .normalize import basic_clean, contains_word, dedupe_words, join_text, lower_clean
from .shape import get_shape_for_query


class _PhraseBuilder:
    """Collects descriptors ahead of a fixed anchor phrase."""

    def __init__(self, anchor: str):
        self.anchor = anchor
        self.descriptors: List[str] = []

    @property
    def text(self) -> str:
        return " ".join(self.descriptors + [self.anchor])

    def add(self, term: Optional[str]) -> bool:
        term = lower_clean(term)
        if not term or contains_word(self.text, term):
            return False
        self.descriptors.append(term)
        return True

    def add_first(self, terms: Iterable[Optional[str]]) -> bool:
        return any(self.add(term) for term in terms)

    def assemble(self, max_words: int) -> str:
        anchor_words = dedupe_words(self.anchor.split())
        if len(anchor_words) >= max_words:
            return " ".join(anchor_words[:max_words])

        taken = {w.lower() for w in anchor_words}
        budget = max_words - len(anchor_words)
        prefix: List[str] = []
        for descriptor in self.descriptors:
            words = [w for w in dedupe_words(descriptor.split()) if w.lower() not in taken]
            if len(words) > budget:
                # everything after this descriptor has lower priority too
                break
            prefix.extend(words)
            taken.update(w.lower() for w in words)
            budget -= len(words)

        return " ".join(prefix + anchor_words)


# ---------------------------------------------------------------------------
# Descriptor extraction
# ---------------------------------------------------------------------------


def _descriptor_text(item: DetectedItem) -> str:
    return join_text([*item.tags, item.description])


def pattern_terms(item: DetectedItem) -> List[str]:
    """Pattern/feature vocabulary terms found in tags or description, in vocabulary order."""
    text = _descriptor_text(item)
    return [t for t in PATTERN_TERMS if contains_word(text, t)]


def subtype_terms(item: DetectedItem) -> List[str]:
    """Category-specific subtype terms (runner rug, arched mirror, ...) found for this item."""
    context = join_text([item.category, item.item_name])
    text = _descriptor_text(item)
    found: List[str] = []
    for keyword, terms in SUBTYPE_TERMS.items():
        if not contains_word(context, keyword):
            continue
        found.extend(t for t in terms if contains_word(text, t) and t not in found)
    return found


def material_terms(item: DetectedItem) -> List[str]:
    """Declared materials first, then known materials mentioned in tags."""
    declared = [m for m in item.materials if lower_clean(m)]
    tagged = [t for t in MATERIAL_TERMS if any(contains_word(lower_clean(tag), t) for tag in item.tags)]
    return declared + tagged


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_retailer_query(item: DetectedItem, max_words: Optional[int] = None) -> str:
    """
    Build a short, de-duplicated search phrase for external retailers.

    Returns the bare item name when no descriptor applies, e.g.
    'coffee table' -> 'coffee table'.
    """
    max_words = config.MAX_QUERY_WORDS if max_words is None else max_words
    anchor = basic_clean(item.item_name) or basic_clean(item.category)
    if not anchor:
        logger.warning("Cannot build a retailer query: item has neither name nor category")
        return ""

    phrase = _PhraseBuilder(anchor)

    # 1. colour
    phrase.add(item.dominant_color)

    # 2. pattern / feature
    added = 0
    for term in pattern_terms(item):
        if added >= config.MAX_PATTERN_TERMS:
            break
        if phrase.add(term):
            added += 1

    # 3. shape
    phrase.add(get_shape_for_query(item))

    # 4. subtype
    added = 0
    for term in subtype_terms(item):
        if added >= config.MAX_SUBTYPE_TERMS:
            break
        if phrase.add(term):
            added += 1

    # 5. material
    phrase.add_first(material_terms(item))

    query = phrase.assemble(max_words)
    if phrase.descriptors:
        logger.debug(
            "Retailer query for '{}': {!r} (descriptors={})", item.item_name, query, phrase.descriptors
        )
    return query
