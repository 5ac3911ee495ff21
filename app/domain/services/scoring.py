from typing import Optional

from app.domain.models.product import Product
from app.domain.models.user import Preferences
from app.domain.services.constants import WEIGHT_CATEGORY, WEIGHT_PRICE, WEIGHT_TAGS


def calculate_similarity_score(preferences: Optional[Preferences], product: Product) -> float:
    """
    Score how well `product` fits the user's stated preferences, in [0, 1].

    Each criterion only counts toward the maximum when the user actually
    stated it, so a user with only categories gets 1.0 for a category match.
    Tags give partial credit: matched distinct tags / distinct preferred tags.
    No usable preference at all scores 0.
    """
    if preferences is None:
        return 0.0

    score = 0.0
    max_score = 0.0

    if preferences.categories:
        max_score += WEIGHT_CATEGORY
        if product.category in preferences.categories:
            score += WEIGHT_CATEGORY

    if preferences.price_range is not None:
        max_score += WEIGHT_PRICE
        if preferences.price_range.min <= product.price <= preferences.price_range.max:
            score += WEIGHT_PRICE

    if preferences.tags:
        max_score += WEIGHT_TAGS
        wanted = set(preferences.tags)
        matching = wanted.intersection(product.tags)
        score += len(matching) / max(len(wanted), 1) * WEIGHT_TAGS

    return score / max_score if max_score > 0 else 0.0
