from __future__ import annotations

"""Keyword tables used by the matching and query-building heuristics.

Everything here is plain data: canonical value -> synonym list, plus explicit
priority orders where several values can fire at once. Modules import these
instead of inlining literals so the vocabularies can be tested and extended
in one place.
"""

from typing import Dict, List

# ---------------------------------------------------------------------------
# Shape taxonomy
# ---------------------------------------------------------------------------

TABLE_CATEGORIES: List[str] = [
    "coffee table",
    "side table",
    "dining table",
    "console table",
    "end table",
]

SHAPE_KEYWORDS: Dict[str, List[str]] = {
    "organic": [
        "organic",
        "freeform",
        "free form",
        "cloud",
        "kidney",
        "pebble",
        "amoeba",
        "irregular",
        "wavy",
        "scalloped",
        "blob",
        "asymmetric",
        "abstract",
    ],
    "oval": ["oval", "racetrack", "ellipse", "elliptical"],
    "rectangular": ["rectangular", "rectangle", "oblong"],
    "square": ["square"],
    "round": ["round", "circle", "circular"],
}

# Resolution order when more than one shape is detected.
SHAPE_PRIORITY: List[str] = ["organic", "oval", "rectangular", "square", "round"]

# Shape tags that refinement may overwrite; organic is terminal.
REPLACEABLE_SHAPES: List[str] = ["round", "rectangular", "square", "oval"]

# ---------------------------------------------------------------------------
# Category groups (relaxed matching, tier 1)
# ---------------------------------------------------------------------------

CATEGORY_GROUPS: Dict[str, List[str]] = {
    "seating": [
        "sofa",
        "couch",
        "sectional",
        "loveseat",
        "chair",
        "armchair",
        "recliner",
        "bench",
        "ottoman",
        "stool",
    ],
    "table": [
        "table",
        "console",
        "desk",
        "nightstand",
        "end table",
        "side table",
        "coffee table",
        "accent table",
        "accent_table",
    ],
    "tree": [
        "christmas tree",
        "tree",
        "artificial tree",
        "pine tree",
        "fir tree",
        "evergreen",
    ],
    "garland": ["garland", "wreath", "greenery", "swag", "vine", "bough"],
    "ornament": [
        "ornament",
        "decoration",
        "bauble",
        "christmas ball",
        "hanging decor",
        "tree topper",
    ],
    "lighting": [
        "candle",
        "lantern",
        "light",
        "lamp",
        "chandelier",
        "sconce",
        "pendant",
        "candleholder",
        "candle holder",
        "string lights",
    ],
    "textile": ["pillow", "cushion", "throw", "blanket", "rug", "carpet", "curtain"],
    "decor": [
        "vase",
        "mirror",
        "picture frame",
        "wall art",
        "sculpture",
        "figurine",
        "bowl",
        "tray",
        "basket",
        "decoration",
    ],
}

GENERIC_DECOR_CATEGORY = "decor"
GENERIC_DECOR_ITEM_TERMS: List[str] = [
    "furniture",
    "decoration",
    "accent",
    "home",
    "interior",
]

PARTIAL_TOKEN_MIN_LEN = 4  # tokens must be longer than 3 chars

# ---------------------------------------------------------------------------
# Retailer query vocabularies
# ---------------------------------------------------------------------------

# Pattern / feature terms, most specific first.
PATTERN_TERMS: List[str] = [
    "striped",
    "plaid",
    "checkered",
    "gingham",
    "floral",
    "geometric",
    "herringbone",
    "chevron",
    "abstract print",
    "channel tufted",
    "tufted",
    "fluted",
    "ribbed",
    "curved",
    "textured",
    "woven",
    "beaded",
    "distressed",
    "branch",
    "leaf",
]

# Category keyword -> subtype terms, most specific first.
SUBTYPE_TERMS: Dict[str, List[str]] = {
    "rug": ["runner", "shag", "braided", "flatweave", "washable"],
    "mirror": ["arched", "full length", "sunburst", "floor", "beveled"],
    "chandelier": ["branch", "leaf", "sputnik", "tiered", "drum"],
    "lamp": ["arc", "tripod", "mushroom", "floor", "table"],
    "sofa": ["sectional", "chesterfield", "sleeper", "modular", "loveseat"],
    "chair": ["wingback", "slipper", "barrel", "swivel", "rocking"],
    "bed": ["platform", "canopy", "storage", "daybed"],
    "pillow": ["lumbar", "bolster"],
    "vase": ["bud", "urn", "bottle"],
    "curtain": ["blackout", "sheer"],
    "shelf": ["floating", "ladder", "corner"],
}

# Materials recognised inside free-form tags.
MATERIAL_TERMS: List[str] = [
    "wood",
    "oak",
    "walnut",
    "teak",
    "rattan",
    "wicker",
    "bamboo",
    "metal",
    "brass",
    "iron",
    "steel",
    "marble",
    "travertine",
    "stone",
    "glass",
    "ceramic",
    "concrete",
    "linen",
    "velvet",
    "boucle",
    "leather",
    "cotton",
    "wool",
    "jute",
    "fabric",
]

# ---------------------------------------------------------------------------
# Product URL hygiene
# ---------------------------------------------------------------------------

PLACEHOLDER_URL_MARKERS: List[str] = ["XMAS", "B09XMAS", "xmas-"]

# Landing pages that were seeded as "product" links but point nowhere useful.
BARE_RETAILER_HOMEPAGES: List[str] = [
    "https://www.wayfair.com",
    "https://www.wayfair.ca",
    "https://www.westelm.com",
    "https://www.ikea.com",
    "https://www.walmart.com",
    "https://www.walmart.ca",
]
