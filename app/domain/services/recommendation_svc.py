import asyncio
import logging
import time
from typing import Dict, Iterable, List, Optional, Set, Tuple

from app.domain.models.product import Product
from app.domain.models.results import Recommendations, StrategyResult
from app.domain.repositories.product_repo import ProductRepo
from app.domain.repositories.trending_cache_repo import TrendingCacheRepo
from app.domain.repositories.user_repo import UserRepo
from app.domain.services.collaborative_svc import get_collaborative_recommendations
from app.domain.services.constants import (
    BLEND_PRIORITY,
    DEFAULT_RECOMMENDATION_LIMIT,
    SIMILAR_USERS_LIMIT,
    STRATEGY_COLLABORATIVE,
    STRATEGY_CONTENT_BASED,
    STRATEGY_TRENDING,
)
from app.domain.services.content_based_svc import get_content_based_recommendations
from app.domain.services.trending_svc import get_trending_products

logger = logging.getLogger(__name__)


def blend(lists: Dict[str, List[Product]], limit: int) -> List[Product]:
    """
    Merge strategy lists in BLEND_PRIORITY order, first occurrence wins.
    Only the trending pass stops on its own once `limit` is reached;
    the result is truncated to `limit` at the end.
    """
    seen: Set[str] = set()
    merged: List[Product] = []
    for name in BLEND_PRIORITY:
        for product in lists.get(name, []):
            if product.product_id in seen:
                continue
            if name == STRATEGY_TRENDING and len(merged) >= limit:
                break
            seen.add(product.product_id)
            merged.append(product)
    return merged[:limit]


def _log_statuses(user_id: str, results: Iterable[Tuple[str, StrategyResult]]) -> None:
    for name, res in results:
        if res.status == "error":
            logger.warning("recommendations %s failed user_id=%s reason=%s", name, user_id, res.reason)
        elif res.status == "empty":
            logger.debug("recommendations %s empty user_id=%s reason=%s", name, user_id, res.reason)


async def get_recommendations(
    products: ProductRepo,
    users: UserRepo,
    user_id: Optional[str] = None,
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    *,
    cache: Optional[TrendingCacheRepo] = None,
    cache_ttl: int = 300,
    similar_users_limit: int = SIMILAR_USERS_LIMIT,
) -> Recommendations:
    """
    Blend collaborative, content-based and trending recommendations.

    - Anonymous callers (no user_id) get trending only.
    - Signed-in users get the three strategies run concurrently with
      limit // 2, limit // 2 and limit // 3, then merged by priority
      (collaborative > content-based > trending) without duplicates.
    - Any unexpected failure returns the empty shape instead of raising.
    """
    t0 = time.perf_counter()
    logger.info("recommendations start user_id=%s limit=%s", user_id, limit)
    try:
        if not user_id:
            trending = await get_trending_products(products, limit, cache=cache, cache_ttl=cache_ttl)
            return Recommendations(recommendations=trending.products, trending=trending.products)

        # wait for all three even if one raises, then surface the first failure
        outcomes = await asyncio.gather(
            get_content_based_recommendations(products, users, user_id, limit // 2),
            get_collaborative_recommendations(
                products, users, user_id, limit // 2, similar_users_limit=similar_users_limit
            ),
            get_trending_products(products, limit // 3, cache=cache, cache_ttl=cache_ttl),
            return_exceptions=True,
        )
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        content_based, collaborative, trending = outcomes

        _log_statuses(user_id, (
            (STRATEGY_CONTENT_BASED, content_based),
            (STRATEGY_COLLABORATIVE, collaborative),
            (STRATEGY_TRENDING, trending),
        ))

        merged = blend(
            {
                STRATEGY_COLLABORATIVE: collaborative.products,
                STRATEGY_CONTENT_BASED: content_based.products,
                STRATEGY_TRENDING: trending.products,
            },
            limit,
        )
    except Exception:
        logger.exception("recommendations error user_id=%s", user_id)
        return Recommendations.empty()

    logger.info(
        "recommendations done user_id=%s items=%s collab=%s content=%s trending=%s time=%.3fs",
        user_id, len(merged), len(collaborative.products), len(content_based.products),
        len(trending.products), time.perf_counter() - t0,
    )
    return Recommendations(
        recommendations=merged,
        content_based=content_based.products,
        collaborative=collaborative.products,
        trending=trending.products,
    )
