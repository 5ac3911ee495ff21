# app/domain/repositories/product_repo.py

from __future__ import annotations
from typing import Iterable, List
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from app.domain.models.product import Product

# Trending order: most reviewed first, rating breaks ties
TRENDING_SORT = [("review_count", DESCENDING), ("rating", DESCENDING)]


class ProductRepo:
    """
    Read-only product repository backed by the 'products' collection.
    Documents are keyed by the string `product_id`; Mongo's `_id` is never exposed.

    A `limit` of 0 or less is answered with an empty list here, because
    Mongo reads `.limit(0)` as "no limit".
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "products"):
        self.col = db[collection_name]

    async def ensure_indexes(self) -> None:
        await self.col.create_index([("product_id", ASCENDING)], unique=True)
        await self.col.create_index(TRENDING_SORT)

    async def find_excluding(self, excluded_ids: Iterable[str]) -> List[Product]:
        """Every product whose id is not in `excluded_ids`, in natural store order."""
        cursor = self.col.find({"product_id": {"$nin": list(excluded_ids)}}, {"_id": 0})
        return [Product.model_validate(doc) async for doc in cursor]

    async def find_by_ids(self, ids: Iterable[str], limit: int) -> List[Product]:
        """Up to `limit` products among `ids`; which ones is left to the store."""
        ids = list(ids)
        if limit <= 0 or not ids:
            return []
        cursor = self.col.find({"product_id": {"$in": ids}}, {"_id": 0}).limit(limit)
        return [Product.model_validate(doc) async for doc in cursor]

    async def find_trending(self, limit: int) -> List[Product]:
        if limit <= 0:
            return []
        cursor = self.col.find({}, {"_id": 0}).sort(TRENDING_SORT).limit(limit)
        return [Product.model_validate(doc) async for doc in cursor]
