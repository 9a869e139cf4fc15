from __future__ import annotations

"""
Shape inference for table-like items.

Detectors tend to label freeform / cloud / kidney tables as "round". This
module re-reads the item's own text (name, description, tags) against a
static shape taxonomy and resolves conflicts with a fixed priority order, so
retailer queries ask for the shape the user actually photographed.

Pure and synchronous: no model calls, no I/O.
"""

from typing import Iterable, List, Optional, Set

from loguru import logger

from . import config
from .config import DetectedItem
from .constants import (
    REPLACEABLE_SHAPES,
    SHAPE_KEYWORDS,
    SHAPE_PRIORITY,
    TABLE_CATEGORIES,
)
from .normalize import contains_word, join_text, lower_clean


def is_table_category(category: Optional[str]) -> bool:
    cat = lower_clean(category)
    return any(table in cat for table in TABLE_CATEGORIES)


def _shape_text(item: DetectedItem) -> str:
    return join_text([item.item_name, item.description, *item.tags])


def detect_shapes(text: str) -> Set[str]:
    """Canonical shapes with at least one synonym present in ``text``."""
    found: Set[str] = set()
    for shape, keywords in SHAPE_KEYWORDS.items():
        if any(contains_word(text, kw) for kw in keywords):
            found.add(shape)
    return found


def resolve_shape(shapes: Iterable[str]) -> Optional[str]:
    shapes = set(shapes)
    for shape in SHAPE_PRIORITY:
        if shape in shapes:
            return shape
    return None


def existing_shape_tag(tags: Iterable[str]) -> Optional[str]:
    """Highest-priority canonical shape already present in ``tags``."""
    lowered = {lower_clean(t) for t in tags}
    for shape in SHAPE_PRIORITY:
        if shape in lowered:
            return shape
    return None


def infer_shape(item: DetectedItem) -> Optional[str]:
    """
    Infer a canonical shape for a table-like item from its own text.

    Returns None for non-table items, when refinement is switched off, or
    when no synonym is present.
    """
    if not config.ENABLE_SHAPE_REFINEMENT:
        return None
    if not is_table_category(item.category):
        return None

    shapes = detect_shapes(_shape_text(item))
    if not shapes:
        return None
    shape = resolve_shape(shapes)
    if len(shapes) > 1:
        logger.debug(
            "Multiple shapes {} for '{}'; resolved to {}",
            sorted(shapes),
            item.item_name,
            shape,
        )
    return shape


def needs_refinement(item: DetectedItem) -> bool:
    """True for tables with no shape tag, or whose only shape tag is the provisional 'round'."""
    if not config.ENABLE_SHAPE_REFINEMENT:
        return False
    if not is_table_category(item.category):
        return False

    tags_lower = {lower_clean(t) for t in item.tags}
    shape_tags = {shape for shape in SHAPE_PRIORITY if shape in tags_lower}
    return not shape_tags or shape_tags == {"round"}


def refine(item: DetectedItem) -> DetectedItem:
    """Return a copy of ``item`` with its shape tag replaced by the inferred one.

    The input is never modified; when nothing changes the same object is
    returned.
    """
    if not needs_refinement(item):
        return item

    shape = infer_shape(item)
    if not shape:
        return item

    tags: List[str] = [t for t in item.tags if lower_clean(t) not in REPLACEABLE_SHAPES]
    if shape not in {lower_clean(t) for t in tags}:
        tags.append(shape)
    logger.debug("Refined shape for '{}': {} -> {}", item.item_name, item.tags, tags)
    return item.model_copy(update={"tags": tags})


def refine_items(items: Iterable[DetectedItem]) -> List[DetectedItem]:
    return [refine(item) for item in items]


def get_shape_for_query(item: DetectedItem) -> Optional[str]:
    """
    Shape word to put in a retailer query.

    Tables: an inferred 'organic' outranks any existing tag; otherwise an
    existing shape tag wins, then whatever was inferred (possibly None).
    Other items: existing shape tags only, no inference.
    """
    if is_table_category(item.category):
        inferred = infer_shape(item)
        if inferred == "organic":
            return inferred
        return existing_shape_tag(item.tags) or inferred

    return existing_shape_tag(item.tags)
