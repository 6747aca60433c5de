"""Tests for asset selection."""

import random

import pytest

from reelcompose.errors import InsufficientAssets
from reelcompose.selection import select_assets

from conftest import make_assets


class TestSequential:
    def test_takes_first_in_provider_order(self):
        pool = make_assets(10)
        assert select_assets(pool, 4) == pool[:4]

    def test_exact_pool_size(self):
        pool = make_assets(6)
        assert select_assets(pool, 6) == pool

    def test_does_not_mutate_pool(self):
        pool = make_assets(8)
        before = list(pool)
        select_assets(pool, 6)
        assert pool == before


class TestRandomSample:
    def test_same_seed_same_selection(self):
        pool = make_assets(30)
        first = select_assets(pool, 6, "random", rng=random.Random(42))
        second = select_assets(pool, 6, "random", rng=random.Random(42))
        assert first == second

    def test_no_repeats(self):
        pool = make_assets(30)
        picked = select_assets(pool, 12, "random", rng=random.Random(1))
        assert len(set(picked)) == 12
        assert all(a in pool for a in picked)

    def test_order_follows_draw_order(self):
        pool = make_assets(30)
        expected = random.Random(3).sample(list(pool), 6)
        assert select_assets(pool, 6, "random", rng=random.Random(3)) == expected

    def test_does_not_mutate_pool(self):
        pool = make_assets(30)
        before = list(pool)
        select_assets(pool, 6, "random", rng=random.Random(0))
        assert pool == before

    def test_requires_rng(self):
        with pytest.raises(ValueError, match="random source"):
            select_assets(make_assets(10), 6, "random")


class TestInsufficient:
    def test_too_few_candidates(self):
        with pytest.raises(InsufficientAssets) as exc_info:
            select_assets(make_assets(3), 6, query="rare thing")
        err = exc_info.value
        assert err.required == 6
        assert err.available == 3
        assert err.query == "rare thing"
        assert "rare thing" in err.message

    def test_random_mode_too_few(self):
        with pytest.raises(InsufficientAssets):
            select_assets(make_assets(3), 6, "random", rng=random.Random(0))

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown selection mode"):
            select_assets(make_assets(6), 6, "shuffle")
