"""Tests for blending the three strategies into one recommendation list."""

import asyncio

import pytest

from app.domain.models.results import StrategyResult
from app.domain.services import recommendation_svc
from app.domain.services.recommendation_svc import blend, get_recommendations
from fakes import FakeProductRepo, FakeUserRepo, make_product


def ids(products):
    return [p.product_id for p in products]


P1, P2, P3, P4, P5 = (make_product(f"P{i}") for i in range(1, 6))


def test_blend_priority_and_first_seen_wins():
    merged = blend(
        {"collaborative": [P1, P2], "content_based": [P2, P3], "trending": [P3, P4]},
        limit=3,
    )
    assert ids(merged) == ["P1", "P2", "P3"]


def test_blend_trending_only_fills_remaining_slots():
    merged = blend({"collaborative": [P1, P2, P3], "content_based": [], "trending": [P4, P5]}, limit=4)
    assert ids(merged) == ["P1", "P2", "P3", "P4"]


def test_blend_truncates_personalised_lists_at_the_end():
    merged = blend({"collaborative": [P1, P2, P3], "content_based": [P4, P5], "trending": []}, limit=4)
    assert ids(merged) == ["P1", "P2", "P3", "P4"]


def test_blend_missing_lists_are_skipped():
    assert ids(blend({"trending": [P1, P2]}, limit=5)) == ["P1", "P2"]


def _stub(monkeypatch, collaborative, content_based, trending):
    async def fake_content(products, users, user_id, limit):
        return StrategyResult.ok(content_based)

    async def fake_collab(products, users, user_id, limit, similar_users_limit=10):
        return StrategyResult.ok(collaborative)

    async def fake_trending(products, limit, cache=None, cache_ttl=300):
        return StrategyResult.ok(trending)

    monkeypatch.setattr(recommendation_svc, "get_content_based_recommendations", fake_content)
    monkeypatch.setattr(recommendation_svc, "get_collaborative_recommendations", fake_collab)
    monkeypatch.setattr(recommendation_svc, "get_trending_products", fake_trending)


def test_signed_in_blend_keeps_raw_lists(monkeypatch):
    _stub(monkeypatch, collaborative=[P1, P2], content_based=[P2, P3], trending=[P3, P4])
    res = asyncio.run(get_recommendations(FakeProductRepo(), FakeUserRepo(), "u1", limit=3))
    assert ids(res.recommendations) == ["P1", "P2", "P3"]
    assert ids(res.collaborative) == ["P1", "P2"]
    assert ids(res.content_based) == ["P2", "P3"]
    assert ids(res.trending) == ["P3", "P4"]


def test_strategy_limits_split_the_requested_limit(monkeypatch):
    seen = {}

    async def fake_content(products, users, user_id, limit):
        seen["content_based"] = limit
        return StrategyResult.ok([])

    async def fake_collab(products, users, user_id, limit, similar_users_limit=10):
        seen["collaborative"] = limit
        return StrategyResult.ok([])

    async def fake_trending(products, limit, cache=None, cache_ttl=300):
        seen["trending"] = limit
        return StrategyResult.ok([])

    monkeypatch.setattr(recommendation_svc, "get_content_based_recommendations", fake_content)
    monkeypatch.setattr(recommendation_svc, "get_collaborative_recommendations", fake_collab)
    monkeypatch.setattr(recommendation_svc, "get_trending_products", fake_trending)

    asyncio.run(get_recommendations(FakeProductRepo(), FakeUserRepo(), "u1", limit=10))
    assert seen == {"content_based": 5, "collaborative": 5, "trending": 3}


STRATEGIES = (
    "get_content_based_recommendations",
    "get_collaborative_recommendations",
    "get_trending_products",
)


@pytest.mark.parametrize("failing", STRATEGIES)
def test_any_strategy_raising_yields_empty_shape(monkeypatch, failing):
    _stub(monkeypatch, collaborative=[P1], content_based=[P2], trending=[P3])
    completed = []
    for name in STRATEGIES:
        inner = getattr(recommendation_svc, name)

        async def wrapped(*args, _inner=inner, _name=name, **kwargs):
            if _name == failing:
                raise RuntimeError("unexpected")
            res = await _inner(*args, **kwargs)
            completed.append(_name)
            return res

        monkeypatch.setattr(recommendation_svc, name, wrapped)

    res = asyncio.run(get_recommendations(FakeProductRepo(), FakeUserRepo(), "u1", limit=10))
    assert res.model_dump() == {"recommendations": [], "content_based": [], "collaborative": [], "trending": []}
    # the other two strategies still ran to completion
    assert sorted(completed) == sorted(n for n in STRATEGIES if n != failing)


def test_anonymous_gets_trending_only(products, users):
    res = asyncio.run(get_recommendations(products, users, None, limit=4))
    assert ids(res.recommendations) == ["p3", "p2", "p1", "p4"]
    assert res.recommendations == res.trending
    dumped = res.model_dump(exclude_none=True)
    assert set(dumped) == {"recommendations", "trending"}


def test_signed_in_end_to_end(products, users):
    res = asyncio.run(get_recommendations(products, users, "alice", limit=10))
    # collaborative [p2, p5], content-based [p2, p4, p5], trending [p3, p2, p1]
    assert ids(res.collaborative) == ["p2", "p5"]
    assert ids(res.content_based) == ["p2", "p4", "p5"]
    assert ids(res.trending) == ["p3", "p2", "p1"]
    assert ids(res.recommendations) == ["p2", "p5", "p4", "p3", "p1"]


def test_store_outage_degrades_to_empty_lists(catalog):
    products = FakeProductRepo(catalog, fail=True)
    res = asyncio.run(get_recommendations(products, FakeUserRepo(fail=True), "alice", limit=10))
    assert res.model_dump() == {"recommendations": [], "content_based": [], "collaborative": [], "trending": []}
