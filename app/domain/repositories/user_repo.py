# app/domain/repositories/user_repo.py

from __future__ import annotations
from typing import Iterable, Optional, List
from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING
from app.domain.models.user import User, Preferences


class UserRepo:
    """
    User repository backed by the 'users' collection.
    History lives inside the user document:
      view_history = [{product_id, viewed_at}, ...]
      purchases    = [{product_id, purchased_at}, ...]
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "users"):
        self.col = db[collection_name]

    async def ensure_indexes(self) -> None:
        await self.col.create_index([("user_id", ASCENDING)], unique=True)
        await self.col.create_index([("email", ASCENDING)], unique=True)
        # multikey indexes backing the neighbour lookup
        await self.col.create_index([("view_history.product_id", ASCENDING)])
        await self.col.create_index([("purchases.product_id", ASCENDING)])

    async def get_by_user_id(self, user_id: str) -> Optional[User]:
        doc = await self.col.find_one({"user_id": user_id}, {"_id": 0})
        return User.model_validate(doc) if doc else None

    async def find_neighbors(self, user_id: str, product_ids: Iterable[str], limit: int) -> List[User]:
        """
        Other users whose view or purchase history contains any of `product_ids`.
        """
        ids = list(product_ids)
        if not ids or limit <= 0:
            return []
        query = {
            "user_id": {"$ne": user_id},
            "$or": [
                {"view_history.product_id": {"$in": ids}},
                {"purchases.product_id": {"$in": ids}},
            ],
        }
        cursor = self.col.find(query, {"_id": 0}).limit(limit)
        return [User.model_validate(doc) async for doc in cursor]

    # ----- Writes ------------------------------------------------------------
    # Each returns the matched count so callers can tell a missing user apart.

    async def push_view(self, user_id: str, product_id: str, at: Optional[datetime] = None) -> int:
        at = at or datetime.now(timezone.utc)
        res = await self.col.update_one(
            {"user_id": user_id},
            {"$push": {"view_history": {"product_id": product_id, "viewed_at": at}}},
        )
        return res.matched_count

    async def push_purchase(self, user_id: str, product_id: str, at: Optional[datetime] = None) -> int:
        at = at or datetime.now(timezone.utc)
        res = await self.col.update_one(
            {"user_id": user_id},
            {"$push": {"purchases": {"product_id": product_id, "purchased_at": at}}},
        )
        return res.matched_count

    async def set_preferences(self, user_id: str, preferences: Preferences) -> int:
        """Replace the whole preferences subdocument (no merge with the stored one)."""
        res = await self.col.update_one(
            {"user_id": user_id},
            {"$set": {"preferences": preferences.model_dump(exclude_none=True)}},
        )
        return res.matched_count
