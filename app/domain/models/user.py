from pydantic import BaseModel, Field
from typing import Optional, List, Set
from datetime import datetime


class PriceRange(BaseModel):
    min: float = 0
    max: float = 1000


class Preferences(BaseModel):
    """
    Stated shopping preferences. Every field is optional: an absent field
    simply does not take part in similarity scoring.
    """
    categories: Optional[List[str]] = None
    price_range: Optional[PriceRange] = None
    tags: Optional[List[str]] = None


class ViewEntry(BaseModel):
    product_id: str
    viewed_at: Optional[datetime] = None


class PurchaseEntry(BaseModel):
    product_id: str
    purchased_at: Optional[datetime] = None


class User(BaseModel):
    user_id: str
    email: str
    name: Optional[str] = None
    preferences: Optional[Preferences] = None
    view_history: List[ViewEntry] = Field(default_factory=list)
    purchases: List[PurchaseEntry] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}

    def interacted_product_ids(self) -> Set[str]:
        """Ids of every product this user viewed or purchased."""
        return {e.product_id for e in self.view_history} | {e.product_id for e in self.purchases}
