import logging
import time

from app.domain.models.results import StrategyResult
from app.domain.repositories.product_repo import ProductRepo
from app.domain.repositories.user_repo import UserRepo
from app.domain.services.constants import DEFAULT_STRATEGY_LIMIT, SIMILAR_USERS_LIMIT

logger = logging.getLogger(__name__)


async def get_collaborative_recommendations(
    products: ProductRepo,
    users: UserRepo,
    user_id: str,
    limit: int = DEFAULT_STRATEGY_LIMIT,
    similar_users_limit: int = SIMILAR_USERS_LIMIT,
) -> StrategyResult:
    """
    Products seen or bought by users who share history with this user.

    Candidates are not ranked: any product of any neighbour that the user
    has not interacted with yet is equally eligible, and the store picks
    which `limit` of them come back.
    """
    t0 = time.perf_counter()
    logger.info("collaborative start user_id=%s limit=%s", user_id, limit)
    try:
        user = await users.get_by_user_id(user_id)
        if user is None:
            return StrategyResult.empty("user not found")

        own_ids = user.interacted_product_ids()
        if not own_ids:
            return StrategyResult.empty("user has no history")

        neighbors = await users.find_neighbors(user_id, own_ids, limit=similar_users_limit)
        candidate_ids: set[str] = set()
        for neighbor in neighbors:
            candidate_ids |= neighbor.interacted_product_ids() - own_ids
        logger.debug(
            "collaborative user_id=%s neighbors=%s candidates=%s",
            user_id, len(neighbors), len(candidate_ids),
        )

        if not candidate_ids:
            return StrategyResult.empty("no neighbour products")
        items = await products.find_by_ids(sorted(candidate_ids), limit=limit)
    except Exception as e:
        logger.exception("collaborative error user_id=%s", user_id)
        return StrategyResult.error(str(e))

    logger.info(
        "collaborative done user_id=%s items=%s time=%.3fs",
        user_id, len(items), time.perf_counter() - t0,
    )
    return StrategyResult.ok(items)
