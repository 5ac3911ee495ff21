import pytest

from fakes import FakeProductRepo, FakeUserRepo, make_product, make_user


@pytest.fixture
def catalog():
    """Small catalog with distinct popularity signals."""
    return [
        make_product("p1", category="shoes", price=50, tags=["running", "outdoor"], review_count=10, rating=4.0),
        make_product("p2", category="shoes", price=150, tags=["running"], review_count=40, rating=3.5),
        make_product("p3", category="books", price=20, tags=["fiction"], review_count=40, rating=4.8),
        make_product("p4", category="books", price=15, tags=[], review_count=5, rating=5.0),
        make_product("p5", category="garden", price=80, tags=["outdoor"], review_count=0, rating=0),
    ]


@pytest.fixture
def products(catalog):
    return FakeProductRepo(catalog)


@pytest.fixture
def users():
    return FakeUserRepo([
        make_user(
            "alice",
            viewed=["p1"],
            purchased=["p3"],
            preferences={"categories": ["shoes"], "price_range": {"min": 0, "max": 100}, "tags": ["running"]},
        ),
        make_user("bob", viewed=["p1", "p2"], purchased=["p5"]),
        make_user("carol", viewed=["p4"]),
        make_user("dave"),
    ])
