import random

from decor_match.balance import ensure_minimum
from decor_match.config import CatalogProduct


def _pool(n):
    return [CatalogProduct(id=i, product_name=f"p{i}") for i in range(1, n + 1)]


def test_no_backfill_when_already_full():
    pool = _pool(5)
    selected = pool[:3]
    assert ensure_minimum(selected, pool, minimum=3, rng=random.Random(0)) == selected


def test_backfill_from_full_pool_when_nothing_selected():
    pool = _pool(10)
    out = ensure_minimum([], pool, minimum=3, rng=random.Random(7))

    assert len(out) == 3
    assert len({p.id for p in out}) == 3
    assert all(p in pool for p in out)


def test_backfill_keeps_ranked_prefix_and_skips_duplicates():
    pool = _pool(4)
    out = ensure_minimum([pool[2]], pool, minimum=3, rng=random.Random(1))

    assert out[0].id == 3
    assert len(out) == 3
    assert len({p.id for p in out}) == 3


def test_backfill_is_deterministic_with_seeded_rng():
    pool = _pool(20)
    a = ensure_minimum([], pool, minimum=3, rng=random.Random(42))
    b = ensure_minimum([], pool, minimum=3, rng=random.Random(42))
    assert [p.id for p in a] == [p.id for p in b]


def test_small_pool_returns_what_exists():
    pool = _pool(2)
    out = ensure_minimum([], pool, minimum=3, rng=random.Random(0))
    assert sorted(p.id for p in out) == [1, 2]

    assert ensure_minimum([], [], minimum=3) == []


def test_pool_is_not_reordered_in_place():
    pool = _pool(6)
    before = [p.id for p in pool]
    ensure_minimum([], pool, minimum=3, rng=random.Random(3))
    assert [p.id for p in pool] == before
