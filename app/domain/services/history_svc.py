import logging

from app.domain.models.results import WriteResult
from app.domain.models.user import Preferences
from app.domain.repositories.user_repo import UserRepo

logger = logging.getLogger(__name__)


def _result(action: str, user_id: str, matched: int) -> WriteResult:
    if matched == 0:
        logger.warning("%s matched no user user_id=%s", action, user_id)
        return WriteResult(acknowledged=True, matched=0, reason="user not found")
    logger.info("%s ok user_id=%s", action, user_id)
    return WriteResult(acknowledged=True, matched=matched)


async def record_product_view(users: UserRepo, user_id: str, product_id: str) -> WriteResult:
    """Append a timestamped view. Store errors are logged, not raised."""
    try:
        matched = await users.push_view(user_id, product_id)
    except Exception as e:
        logger.exception("record_view error user_id=%s product_id=%s", user_id, product_id)
        return WriteResult(acknowledged=False, reason=str(e))
    return _result("record_view", user_id, matched)


async def record_product_purchase(users: UserRepo, user_id: str, product_id: str) -> WriteResult:
    """Append a timestamped purchase. Store errors are logged, not raised."""
    try:
        matched = await users.push_purchase(user_id, product_id)
    except Exception as e:
        logger.exception("record_purchase error user_id=%s product_id=%s", user_id, product_id)
        return WriteResult(acknowledged=False, reason=str(e))
    return _result("record_purchase", user_id, matched)


async def update_user_preferences(users: UserRepo, user_id: str, preferences: Preferences) -> WriteResult:
    """
    Replace the stored preferences with `preferences` as a whole.
    Callers wanting a partial update must send the merged object.
    """
    try:
        matched = await users.set_preferences(user_id, preferences)
    except Exception as e:
        logger.exception("update_preferences error user_id=%s", user_id)
        return WriteResult(acknowledged=False, reason=str(e))
    return _result("update_preferences", user_id, matched)
