# app/api/v1/routers/recommendations.py
from typing import Annotated, Any, List, Optional
from fastapi import APIRouter, Body, Depends, Query

from app.api.auth import current_user_id
from app.api.deps import product_repo, settings_dep, trending_cache, user_repo
from app.api.errors import RecommendationError
from app.core.config import Settings
from app.domain.models.product import Product
from app.domain.models.results import Recommendations
from app.domain.models.user import Preferences
from app.domain.repositories.product_repo import ProductRepo
from app.domain.repositories.trending_cache_repo import TrendingCacheRepo
from app.domain.repositories.user_repo import UserRepo
from app.domain.services.constants import DEFAULT_RECOMMENDATION_LIMIT, DEFAULT_TRENDING_LIMIT
from app.domain.services.history_svc import (
    record_product_purchase,
    record_product_view,
    update_user_preferences,
)
from app.domain.services.recommendation_svc import get_recommendations
from app.domain.services.trending_svc import get_trending_products

import logging
import re
import time
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])

UserIdDep = Annotated[str, Depends(current_user_id)]
ProductsDep = Annotated[ProductRepo, Depends(product_repo)]
UsersDep = Annotated[UserRepo, Depends(user_repo)]
CacheDep = Annotated[Optional[TrendingCacheRepo], Depends(trending_cache)]
SettingsDep = Annotated[Settings, Depends(settings_dep)]


_LEADING_INT = re.compile(r"\s*[-+]?\d+")


def parse_limit(raw: Optional[str], default: int, maximum: int) -> int:
    """
    Lenient ?limit= parsing: the leading integer counts ("7abc" is 7,
    "2.5" is 2); anything else or a non-positive value falls back to
    `default`. Large values are clamped to `maximum`.
    """
    match = _LEADING_INT.match(raw) if raw is not None else None
    value = int(match.group()) if match else 0
    if value <= 0:
        return default
    return min(value, maximum)


@router.get("", response_model=Recommendations)
async def recommendations(
    user_id: UserIdDep,
    products: ProductsDep,
    users: UsersDep,
    cache: CacheDep,
    settings: SettingsDep,
    limit: Optional[str] = Query(None, description="Number of blended recommendations (default 10)"),
):
    n = parse_limit(limit, DEFAULT_RECOMMENDATION_LIMIT, settings.max_limit)
    logger.info("Request: recommendations user_id=%s limit=%s", user_id, n)
    t0 = time.perf_counter()
    try:
        result = await get_recommendations(
            products,
            users,
            user_id,
            n,
            cache=cache,
            cache_ttl=settings.trending_cache_ttl,
            similar_users_limit=settings.similar_users_limit,
        )
    except Exception as e:
        logger.exception("Error fetching recommendations user_id=%s", user_id)
        raise RecommendationError("Error fetching recommendations") from e
    logger.info(
        "Response: recommendations user_id=%s count=%s in %.4fs",
        user_id, len(result.recommendations), time.perf_counter() - t0,
    )
    return result


@router.get("/trending", response_model=List[Product])
async def trending(
    products: ProductsDep,
    cache: CacheDep,
    settings: SettingsDep,
    limit: Optional[str] = Query(None, description="Number of trending products (default 5)"),
):
    n = parse_limit(limit, DEFAULT_TRENDING_LIMIT, settings.max_limit)
    try:
        result = await get_trending_products(products, n, cache=cache, cache_ttl=settings.trending_cache_ttl)
    except Exception as e:
        logger.exception("Error fetching trending products")
        raise RecommendationError("Error fetching trending products") from e
    logger.info("Response: trending limit=%s count=%s status=%s", n, len(result.products), result.status)
    return result.products


@router.post("/view/{product_id}")
async def record_view(product_id: str, user_id: UserIdDep, users: UsersDep):
    try:
        await record_product_view(users, user_id, product_id)
    except Exception as e:
        logger.exception("Error recording view user_id=%s product_id=%s", user_id, product_id)
        raise RecommendationError("Error recording view") from e
    return {"message": "View recorded"}


@router.post("/purchase/{product_id}")
async def record_purchase(product_id: str, user_id: UserIdDep, users: UsersDep):
    try:
        await record_product_purchase(users, user_id, product_id)
    except Exception as e:
        logger.exception("Error recording purchase user_id=%s product_id=%s", user_id, product_id)
        raise RecommendationError("Error recording purchase") from e
    return {"message": "Purchase recorded"}


@router.put("/preferences")
async def update_preferences(
    user_id: UserIdDep,
    users: UsersDep,
    payload: Any = Body(None),
):
    """Replace the caller's preferences with the request body."""
    try:
        preferences = Preferences.model_validate(payload or {})
        await update_user_preferences(users, user_id, preferences)
    except Exception as e:
        logger.exception("Error updating preferences user_id=%s", user_id)
        raise RecommendationError("Error updating preferences") from e
    return {"message": "Preferences updated"}
