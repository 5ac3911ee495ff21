from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

class Product(BaseModel):
    product_id: str
    name: str
    category: str
    price: float = Field(ge=0)
    description: Optional[str] = None
    features: List[str] = []
    tags: List[str] = []
    image_url: Optional[str] = None
    rating: float = 0
    review_count: int = Field(default=0, ge=0)
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}  # read-only for recommendations
