from typing import List, Literal, Optional
from pydantic import BaseModel

from app.domain.models.product import Product

StrategyStatus = Literal["ok", "empty", "error"]


class StrategyResult(BaseModel):
    """
    Output of one recommendation strategy.
    status tells "nothing matched" (empty) apart from "the store failed" (error).
    """
    products: List[Product] = []
    status: StrategyStatus = "ok"
    reason: Optional[str] = None

    model_config = {"frozen": True}

    @classmethod
    def ok(cls, products: List[Product]) -> "StrategyResult":
        return cls(products=products, status="ok" if products else "empty")

    @classmethod
    def empty(cls, reason: str) -> "StrategyResult":
        return cls(status="empty", reason=reason)

    @classmethod
    def error(cls, reason: str) -> "StrategyResult":
        return cls(status="error", reason=reason)


class WriteResult(BaseModel):
    """Outcome of a history/preference write."""
    acknowledged: bool
    matched: int = 0
    reason: Optional[str] = None

    model_config = {"frozen": True}


class Recommendations(BaseModel):
    """
    Blended response. For anonymous callers the personalised lists stay None
    and `model_dump(exclude_none=True)` leaves only `recommendations` and `trending`.
    """
    recommendations: List[Product] = []
    content_based: Optional[List[Product]] = None
    collaborative: Optional[List[Product]] = None
    trending: List[Product] = []

    @classmethod
    def empty(cls) -> "Recommendations":
        return cls(recommendations=[], content_based=[], collaborative=[], trending=[])
