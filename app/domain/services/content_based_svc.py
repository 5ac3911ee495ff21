import logging
import time

from app.domain.models.results import StrategyResult
from app.domain.repositories.product_repo import ProductRepo
from app.domain.repositories.user_repo import UserRepo
from app.domain.services.constants import DEFAULT_STRATEGY_LIMIT
from app.domain.services.scoring import calculate_similarity_score

logger = logging.getLogger(__name__)


async def get_content_based_recommendations(
    products: ProductRepo,
    users: UserRepo,
    user_id: str,
    limit: int = DEFAULT_STRATEGY_LIMIT,
) -> StrategyResult:
    """
    Rank every product the user has not interacted with by similarity to
    their preferences and keep the best `limit`.
    Store errors are logged and reported as an `error` result, never raised.
    """
    t0 = time.perf_counter()
    logger.info("content_based start user_id=%s limit=%s", user_id, limit)
    try:
        user = await users.get_by_user_id(user_id)
        if user is None:
            return StrategyResult.empty("user not found")
        if user.preferences is None:
            return StrategyResult.empty("user has no preferences")
        if limit <= 0:
            return StrategyResult.empty("limit is zero")

        seen = user.interacted_product_ids()
        candidates = await products.find_excluding(seen)

        # sorted() is stable: equal scores keep store order
        ranked = sorted(
            candidates,
            key=lambda p: calculate_similarity_score(user.preferences, p),
            reverse=True,
        )
        items = ranked[:limit]
    except Exception as e:
        logger.exception("content_based error user_id=%s", user_id)
        return StrategyResult.error(str(e))

    logger.info(
        "content_based done user_id=%s candidates=%s items=%s time=%.3fs",
        user_id, len(candidates), len(items), time.perf_counter() - t0,
    )
    return StrategyResult.ok(items)
