from typing import Optional, Iterable, List
from app.domain.models.product import Product
import json


class TrendingCacheRepo:
    """
    Adapter caching trending product lists in Redis.
    One entry per requested limit, stored as a JSON array of products.
    """
    def __init__(self, redis, key_prefix: str = "trending"):
        self.cache = redis
        self.prefix = key_prefix

    def key(self, limit: int) -> str:
        return f"{self.prefix}:limit={limit}"

    async def get(self, limit: int) -> Optional[List[Product]]:
        """Cached products for this limit, or None on a miss."""
        raw = await self.cache.get(self.key(limit))
        if raw:
            return [Product.model_validate(x) for x in json.loads(raw)]
        return None

    async def set(self, limit: int, items: Iterable[Product], ttl: int) -> None:
        payload = [p.model_dump(mode="json") for p in items]
        await self.cache.set(self.key(limit), json.dumps(payload), ex=ttl)
