from __future__ import annotations

"""
Text normalisation helpers shared by shape inference, matching and query
building.

Public helpers:

* basic_clean(text) -> str
    Collapse whitespace and normalise unicode. Never raises.

* lower_clean(text) -> str
    basic_clean + lower-casing; the view used for substring checks.

* keyword_pattern(keyword) -> re.Pattern
    Case-insensitive whole-word regex; multi-word keywords tolerate any
    run of whitespace between words ("free form" matches "free   form").

* contains_word(text, keyword) -> bool
* dedupe_words(words) -> List[str]
"""

from functools import lru_cache
from typing import Iterable, List, Optional, Pattern
import re
import unicodedata

# ---------------------------------------------------------------------------
# Low-level helpers
# ---------------------------------------------------------------------------


def _normalise_unicode(text: str) -> str:
    text = unicodedata.normalize("NFKC", text)
    text = text.replace("\u2018", "'").replace("\u2019", "'")
    text = text.replace("\u201c", '"').replace("\u201d", '"')
    text = text.replace("\u2013", "-").replace("\u2014", "-")
    return text


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def basic_clean(text: Optional[str]) -> str:
    """Light-weight clean for item and product fields.

    Normalises unicode and whitespace. Length is preserved so long
    descriptions keep their trailing keywords.
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)

    text = _normalise_unicode(text)
    text = re.sub(r"\s+", " ", text).strip()
    return text


def lower_clean(text: Optional[str]) -> str:
    return basic_clean(text).lower()


def join_text(parts: Iterable[Optional[str]]) -> str:
    """Space-join the non-empty cleaned parts, lower-cased."""
    cleaned = (lower_clean(p) for p in parts)
    return " ".join(p for p in cleaned if p)


@lru_cache(maxsize=512)
def keyword_pattern(keyword: str) -> Pattern[str]:
    """Whole-word, case-insensitive pattern for a (possibly multi-word) keyword.

    Word edges are regex word boundaries, so 'oak' will not fire inside
    'cloak' nor 'round' inside 'round_table', and 'free form' still
    matches across a line break.
    """
    words = [re.escape(w) for w in keyword.strip().split()]
    body = r"\s+".join(words)
    return re.compile(r"\b" + body + r"\b", flags=re.IGNORECASE)


def contains_word(text: Optional[str], keyword: Optional[str]) -> bool:
    if not text or not keyword or not keyword.strip():
        return False
    return keyword_pattern(keyword).search(text) is not None


def dedupe_words(words: Iterable[str]) -> List[str]:
    """Drop case-insensitive repeats, keeping the first occurrence."""
    seen = set()
    out: List[str] = []
    for w in words:
        key = w.lower()
        if not w or key in seen:
            continue
        seen.add(key)
        out.append(w)
    return out


def dedupe_terms(terms: Iterable[Optional[str]]) -> List[str]:
    """Lower-case, drop empties and repeats, preserve first-seen order."""
    seen = set()
    out: List[str] = []
    for t in terms:
        norm = lower_clean(t)
        if not norm or norm in seen:
            continue
        seen.add(norm)
        out.append(norm)
    return out
