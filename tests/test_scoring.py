"""Tests for the preference/product similarity score."""

import pytest

from app.domain.models.user import Preferences
from app.domain.services.scoring import calculate_similarity_score
from fakes import make_product


def prefs(**kwargs) -> Preferences:
    return Preferences.model_validate(kwargs)


def test_category_only_match_scores_one():
    product = make_product("p", category="shoes")
    assert calculate_similarity_score(prefs(categories=["shoes", "hats"]), product) == pytest.approx(1.0)


def test_category_only_mismatch_scores_zero():
    product = make_product("p", category="books")
    assert calculate_similarity_score(prefs(categories=["shoes"]), product) == 0.0


@pytest.mark.parametrize("preferences", [None, prefs(), prefs(categories=[], tags=[])])
def test_no_usable_preferences_scores_zero(preferences):
    product = make_product("p", category="shoes", tags=["a"])
    assert calculate_similarity_score(preferences, product) == 0.0


def test_tags_give_partial_credit():
    product = make_product("p", tags=["a", "b"])
    score = calculate_similarity_score(prefs(tags=["a", "b", "c"]), product)
    # tags are the only criterion, so score * weight is the tag component
    assert score * 0.3 == pytest.approx(0.2)
    assert score == pytest.approx(2 / 3)


def test_tag_component_combines_with_other_criteria():
    product = make_product("p", category="shoes", tags=["a", "b"])
    score = calculate_similarity_score(prefs(categories=["shoes"], tags=["a", "b", "c"]), product)
    assert score == pytest.approx((0.4 + 0.2) / 0.7)


def test_duplicate_product_tags_do_not_inflate_score():
    product = make_product("p", tags=["a", "a", "a"])
    assert calculate_similarity_score(prefs(tags=["a", "b"]), product) == pytest.approx(0.5)


@pytest.mark.parametrize("price,expected", [(10, 1.0), (20, 1.0), (15, 1.0), (9.99, 0.0), (20.01, 0.0)])
def test_price_range_is_inclusive(price, expected):
    product = make_product("p", price=price)
    score = calculate_similarity_score(prefs(price_range={"min": 10, "max": 20}), product)
    assert score == pytest.approx(expected)


def test_price_range_defaults_apply_when_bounds_missing():
    cheap = make_product("p", price=999)
    pricey = make_product("q", price=1001)
    p = prefs(price_range={})
    assert calculate_similarity_score(p, cheap) == pytest.approx(1.0)
    assert calculate_similarity_score(p, pricey) == 0.0


def test_all_criteria_weighted():
    product = make_product("p", category="shoes", price=500, tags=["a"])
    p = prefs(categories=["shoes"], price_range={"min": 0, "max": 100}, tags=["a", "b"])
    # 0.4 category + 0 price + 0.15 tags over a max of 1.0
    assert calculate_similarity_score(p, product) == pytest.approx(0.55)
