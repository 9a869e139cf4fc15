from decor_match.normalize import (
    basic_clean,
    contains_word,
    dedupe_terms,
    dedupe_words,
    join_text,
    lower_clean,
)


def test_basic_clean_collapses_whitespace_and_quotes():
    assert basic_clean("  Curved\n\tsofa  ") == "Curved sofa"
    assert basic_clean("it’s “fine”") == "it's \"fine\""
    assert basic_clean(None) == ""
    assert basic_clean(42) == "42"


def test_basic_clean_keeps_long_text():
    text = "lorem " * 1000 + "velvet"
    assert basic_clean(text).endswith("velvet")
    assert len(basic_clean(text)) == len(text)


def test_lower_clean_and_join_text():
    assert lower_clean(" Coffee  TABLE ") == "coffee table"
    assert join_text(["Cloud", None, "", "  Modern "]) == "cloud modern"


def test_contains_word_is_whole_word_and_case_insensitive():
    assert contains_word("Brown Wood table", "wood")
    assert not contains_word("wooden table", "wood")
    assert not contains_word("cloak", "oak")
    assert contains_word("a free\nform slab", "free form")
    assert not contains_word("", "wood")
    assert not contains_word("wood", "")
    assert not contains_word("wood", None)


def test_contains_word_treats_underscore_as_part_of_a_word():
    assert not contains_word("round_table", "round")
    assert contains_word("round-table", "round")


def test_dedupe_helpers():
    assert dedupe_words(["Brown", "brown", "table", "", "Table"]) == ["Brown", "table"]
    assert dedupe_terms(["Modern", None, "", "modern ", "Cream"]) == ["modern", "cream"]
