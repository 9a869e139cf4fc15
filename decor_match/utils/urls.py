# decor_match/utils/urls.py
from __future__ import annotations
from urllib.parse import urlparse
import re
from typing import Optional

from ..constants import BARE_RETAILER_HOMEPAGES, PLACEHOLDER_URL_MARKERS

_DP_RE = re.compile(r"/dp/([^/?#]*)")
_ASIN_RE = re.compile(r"^B[0-9A-Z]{9}$")
__all__ = ["extract_asin", "is_listing_url", "is_valid_asin", "is_valid_product_url"]


def is_valid_asin(asin: Optional[str]) -> bool:
    """ASINs are exactly 10 chars: 'B' followed by 9 upper-case alphanumerics."""
    if not isinstance(asin, str) or len(asin) != 10:
        return False
    return _ASIN_RE.match(asin) is not None


def extract_asin(url: Optional[str]) -> Optional[str]:
    """
    Return the token after '/dp/' (up to the next '/', '?' or '#').

    The token is returned as found, valid or not; None when the URL has no
    '/dp/' segment.
    """
    if not isinstance(url, str):
        return None
    m = _DP_RE.search(url)
    return m.group(1) if m else None


def is_valid_product_url(url: Optional[str]) -> bool:
    """
    Reject malformed or placeholder product links before they are surfaced.

    - empty / non-string -> False
    - not http(s) -> False
    - contains a seeding placeholder marker (XMAS, B09XMAS, xmas-) -> False
    - Amazon-style '/dp/<token>' -> True only for a well-formed ASIN
    - anything else -> True
    """
    if not isinstance(url, str) or not url:
        return False
    if not (url.startswith("http://") or url.startswith("https://")):
        return False
    if any(marker in url for marker in PLACEHOLDER_URL_MARKERS):
        return False

    asin = extract_asin(url)
    if asin is not None:
        return is_valid_asin(asin)
    return True


def is_listing_url(url: Optional[str]) -> bool:
    """
    Stricter catalog-hygiene check used when cleaning seeded products.

    On top of is_valid_product_url, rejects any 'placeholder' marker, bare
    retailer homepages, and URLs whose path is just '/'.
    """
    if not is_valid_product_url(url):
        return False
    if "placeholder" in url.lower() or "xmas" in url.lower():
        return False

    stripped = url.rstrip("/")
    if stripped in BARE_RETAILER_HOMEPAGES:
        return False

    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.netloc) and len(parsed.path) > 1
