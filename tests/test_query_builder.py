from decor_match.config import DetectedItem
from decor_match.query_builder import (
    build_retailer_query,
    material_terms,
    pattern_terms,
    subtype_terms,
)


def _words(q):
    return q.split(" ")


def _assert_well_formed(q):
    words = _words(q)
    assert len(words) <= 10
    assert len(words) == len({w.lower() for w in words})


def test_baseline_no_descriptors():
    item = DetectedItem(
        item_name="coffee table",
        category="coffee table",
        tags=[],
        materials=[],
        dominant_color="",
        description="",
    )
    assert build_retailer_query(item) == "coffee table"


def test_missing_descriptors_keep_bare_name():
    item = DetectedItem(item_name="side table", category="side table", tags=["modern"])
    assert build_retailer_query(item) == "side table"


def test_colour_only():
    item = DetectedItem(item_name="coffee table", category="coffee table", dominant_color="brown")
    assert build_retailer_query(item) == "brown coffee table"


def test_colour_then_material():
    item = DetectedItem(
        item_name="coffee table",
        category="coffee table",
        dominant_color="brown",
        tags=["modern", "wood"],
        materials=["wood"],
        description="Modern coffee table",
    )
    assert build_retailer_query(item) == "brown wood coffee table"


def test_colour_pattern_shape_material_order():
    item = DetectedItem(
        item_name="coffee table",
        category="coffee table",
        dominant_color="brown",
        tags=["rectangular", "wood", "textured"],
        materials=["wood"],
        description="Rectangular wooden coffee table with textured finish",
    )
    assert build_retailer_query(item) == "brown textured rectangular wood coffee table"


def test_cloud_table_gets_organic():
    item = DetectedItem(
        item_name="coffee table",
        category="coffee table",
        dominant_color="white",
        tags=["cloud", "modern"],
    )
    q = build_retailer_query(item)
    assert q == "white organic coffee table"
    _assert_well_formed(q)


def test_organic_wins_over_round_tag():
    item = DetectedItem(
        item_name="coffee table",
        category="coffee table",
        dominant_color="white",
        tags=["round", "cloud"],
        materials=["wood"],
        description="Cloud shaped coffee table",
    )
    q = build_retailer_query(item)
    assert "organic" in _words(q)
    assert "round" not in _words(q)


def test_does_not_repeat_words_from_item_name():
    item = DetectedItem(
        item_name="striped curved sofa",
        category="sofa",
        dominant_color="beige",
        tags=["striped", "curved", "modern"],
        materials=["fabric"],
        description="Striped curved modern sofa",
    )
    q = build_retailer_query(item)
    assert q.startswith("beige")
    assert q.endswith("striped curved sofa")
    assert q.count("striped") == 1
    assert q.count("curved") == 1


def test_shape_already_in_name_is_not_added():
    item = DetectedItem(
        item_name="organic coffee table",
        category="coffee table",
        dominant_color="brown",
        tags=["organic", "cloud", "wood"],
        materials=["wood"],
    )
    q = build_retailer_query(item)
    assert q.lower().count("organic") == 1
    _assert_well_formed(q)


def test_chandelier_branch_leaf():
    item = DetectedItem(
        item_name="chandelier",
        category="chandelier",
        dominant_color="gold",
        tags=["branch", "leaf", "modern"],
        materials=["metal"],
        description="A beautiful branch chandelier with leaf details",
    )
    q = build_retailer_query(item)
    assert q == "gold branch leaf metal chandelier"


def test_rug_runner_subtype():
    item = DetectedItem(
        item_name="area rug",
        category="rug",
        dominant_color="neutral",
        tags=["runner", "jute", "woven"],
        materials=["jute"],
        description="Jute runner rug with woven texture",
    )
    q = build_retailer_query(item)
    assert q == "neutral woven runner jute area rug"


def test_mirror_arched_subtype():
    item = DetectedItem(
        item_name="wall mirror",
        category="mirror",
        dominant_color="gold",
        tags=["arched"],
    )
    assert build_retailer_query(item) == "gold arched wall mirror"


def test_caps_at_ten_words_dropping_lowest_priority_first():
    item = DetectedItem(
        item_name="large extendable farmhouse style dining table",
        category="dining table",
        dominant_color="dark walnut brown",
        tags=["striped", "tufted", "rectangular"],
        materials=["reclaimed wood"],
    )
    q = build_retailer_query(item)
    _assert_well_formed(q)
    assert q.endswith("large extendable farmhouse style dining table")
    assert q.startswith("dark walnut brown")
    # material is the lowest priority descriptor and is the one dropped
    assert "reclaimed" not in q


def test_anchor_longer_than_limit_is_truncated():
    item = DetectedItem(item_name=" ".join(f"w{i}" for i in range(14)), category="decor", dominant_color="red")
    q = build_retailer_query(item)
    assert len(_words(q)) == 10
    assert "red" not in _words(q)


def test_multi_word_colour_overlapping_anchor():
    item = DetectedItem(item_name="blue lamp", category="lamp", dominant_color="light blue")
    assert build_retailer_query(item) == "light blue lamp"


def test_falls_back_to_category_then_empty():
    assert build_retailer_query(DetectedItem(item_name="", category="vase")) == "vase"
    assert build_retailer_query(DetectedItem()) == ""


def test_descriptor_helpers():
    item = DetectedItem(
        item_name="area rug",
        category="rug",
        tags=["Runner", "Jute", "striped"],
        materials=[],
        description="hand woven",
    )
    assert pattern_terms(item) == ["striped", "woven"]
    assert subtype_terms(item) == ["runner"]
    assert material_terms(item) == ["jute"]


def test_subtype_keyword_must_be_a_whole_word():
    bedside = DetectedItem(item_name="bedside table", category="side table", tags=["storage"])
    assert subtype_terms(bedside) == []

    clamp = DetectedItem(item_name="clamp light", category="lighting", tags=["tripod"])
    assert subtype_terms(clamp) == []

    bed = DetectedItem(item_name="storage bed", category="bed", tags=["storage"])
    assert subtype_terms(bed) == ["storage"]
