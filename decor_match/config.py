from __future__ import annotations

import os
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------
# Result size policy
# ---------------------------

MIN_RESULTS = int(os.getenv("MIN_RESULTS", "3"))   # guarantee "up to" this many
MAX_RESULTS = MIN_RESULTS                           # never surface more than the guarantee


# ---------------------------
# Match score assignment (by rank, not by raw relevance)
# ---------------------------

TOP_PICK_SCORE = 0.95
RANK_SCORE_STEP = 0.07


# ---------------------------
# Relevance weights
# ---------------------------

TERM_HIT_WEIGHT = 1.0
CATEGORY_MATCH_WEIGHT = 2.0
COLOR_MATCH_WEIGHT = 1.5
STYLE_MATCH_WEIGHT = 1.5


# ---------------------------
# Query building
# ---------------------------

MAX_QUERY_WORDS = int(os.getenv("MAX_QUERY_WORDS", "10"))
MAX_PATTERN_TERMS = 2
MAX_SUBTYPE_TERMS = 1


# ---------------------------
# Shape refinement toggle
# ---------------------------

ENABLE_SHAPE_REFINEMENT = os.getenv("ENABLE_SHAPE_REFINEMENT", "1").strip().lower() not in {
    "0",
    "false",
    "no",
    "off",
}


# ---------------------------
# Pydantic models shared around the package
# ---------------------------

def _none_to_list(v: Any) -> Any:
    if v is None:
        return []
    if isinstance(v, str):
        return [v] if v.strip() else []
    return v


class DetectedItem(BaseModel):
    """
    An item found in an uploaded photo.

    Produced by the image-understanding service. Frozen: shape refinement
    returns a new item instead of editing tags in place.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[Union[int, str]] = None
    item_name: str = ""
    category: str = ""
    dominant_color: Optional[str] = None
    style: Optional[str] = None
    materials: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    confidence: Optional[float] = None

    @field_validator("item_name", "category", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("materials", "tags", mode="before")
    @classmethod
    def _coerce_lists(cls, v: Any) -> Any:
        return _none_to_list(v)


class CatalogProduct(BaseModel):
    """
    A shoppable product supplied by the catalog layer.

    Commerce fields (price, merchant, rating, ...) are carried through as-is;
    unknown keys from the catalog row are kept too.
    """

    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    product_name: str = ""
    category: Optional[str] = None
    color: Optional[str] = None
    style: Optional[str] = None
    materials: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    product_url: Optional[str] = None

    external_id: Optional[str] = None
    merchant: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    image_url: Optional[str] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None

    @field_validator("materials", "tags", mode="before")
    @classmethod
    def _coerce_lists(cls, v: Any) -> Any:
        return _none_to_list(v)


class MatchCandidate(CatalogProduct):
    """A catalog product annotated with its rank-derived score."""

    match_score: float = Field(ge=0.0, le=1.0)
    is_top_pick: bool = False


class MatchResponse(BaseModel):
    """
    Result of one matching pass.

    ``fallback_query`` is only set when no candidate survived, so callers can
    build "search elsewhere" retailer links from it.
    """

    candidates: List[MatchCandidate]
    fallback_query: Optional[str] = None
