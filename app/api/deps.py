# app/api/deps.py
from typing import Optional

from fastapi import Depends
from app.core.config import Settings, get_settings
from app.db.mongo import get_db
from app.db.redis import get_redis
from app.domain.repositories.product_repo import ProductRepo
from app.domain.repositories.trending_cache_repo import TrendingCacheRepo
from app.domain.repositories.user_repo import UserRepo

# Dependency for injecting the MongoDB database into endpoints/services
async def mongo_db(db = Depends(get_db)):
    return db

# Dependency for injecting the Redis client into endpoints/services
def redis_dep():
    return get_redis()

def settings_dep() -> Settings:
    return get_settings()

# Repositories are built per request around the shared client
def product_repo(db = Depends(mongo_db)) -> ProductRepo:
    return ProductRepo(db)

def user_repo(db = Depends(mongo_db)) -> UserRepo:
    return UserRepo(db)

def trending_cache(
    redis = Depends(redis_dep),
    settings: Settings = Depends(settings_dep),
) -> Optional[TrendingCacheRepo]:
    # None disables caching; the services handle both
    if redis is None:
        return None
    return TrendingCacheRepo(redis, key_prefix=settings.trending_cache_prefix)
