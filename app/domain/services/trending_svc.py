import logging
import time
from typing import Optional

from app.domain.models.results import StrategyResult
from app.domain.repositories.product_repo import ProductRepo
from app.domain.repositories.trending_cache_repo import TrendingCacheRepo
from app.domain.services.constants import DEFAULT_STRATEGY_LIMIT

logger = logging.getLogger(__name__)


async def get_trending_products(
    products: ProductRepo,
    limit: int = DEFAULT_STRATEGY_LIMIT,
    cache: Optional[TrendingCacheRepo] = None,
    cache_ttl: int = 300,
) -> StrategyResult:
    """
    Most reviewed products, best rated first among equals.
    Sorting happens in the store; the optional cache only saves the round trip.
    """
    t0 = time.perf_counter()
    logger.info("trending start limit=%s cache=%s", limit, cache is not None)
    if limit <= 0:
        return StrategyResult.empty("limit is zero")

    if cache is not None:
        try:
            cached = await cache.get(limit)
        except Exception as e:
            logger.warning("trending cache.get error limit=%s err=%s", limit, e)
            cached = None
        if cached is not None:
            logger.info("trending cache_hit limit=%s items=%s", limit, len(cached))
            return StrategyResult.ok(cached)
        logger.info("trending cache_miss limit=%s", limit)

    try:
        items = await products.find_trending(limit)
    except Exception as e:
        logger.exception("trending error limit=%s", limit)
        return StrategyResult.error(str(e))

    if cache is not None and items:
        try:
            await cache.set(limit, items, ttl=cache_ttl)
        except Exception as e:
            logger.warning("trending cache.set error limit=%s err=%s", limit, e)

    logger.info("trending done items=%s time=%.3fs", len(items), time.perf_counter() - t0)
    return StrategyResult.ok(items)
