from decor_match.config import CatalogProduct, MatchCandidate
from decor_match.mapping import map_products_to_candidates, rank_score, to_match_candidate


def test_rank_score_steps_down():
    assert rank_score(0) == 0.95
    assert rank_score(1) == 0.88
    assert rank_score(2) == 0.81
    assert rank_score(100) == 0.0


def test_to_match_candidate_keeps_commerce_fields():
    p = CatalogProduct(id="x1", product_name="Lamp", price=49.5, merchant="Amazon", sku="L-1")
    c = to_match_candidate(p, 0)

    assert isinstance(c, MatchCandidate)
    assert c.is_top_pick is True
    assert c.price == 49.5
    assert c.merchant == "Amazon"
    assert c.model_dump()["sku"] == "L-1"


def test_map_products_to_candidates_invariants():
    products = [CatalogProduct(id=i, product_name=f"p{i}") for i in (3, 1, 3, 2)]
    out = map_products_to_candidates(products)

    assert [c.id for c in out] == [3, 1, 2]
    assert [c.match_score for c in out] == [0.95, 0.88, 0.81]
    assert sum(c.is_top_pick for c in out) == 1
    assert out[0].is_top_pick


def test_map_products_to_candidates_empty():
    assert map_products_to_candidates([]) == []
