# app/db/mongo.py
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from app.core.config import get_settings
import certifi

logger = logging.getLogger(__name__)

_client: AsyncIOMotorClient | None = None
_db: AsyncIOMotorDatabase | None = None


def get_db() -> AsyncIOMotorDatabase:
    assert _db is not None, "Mongo DB not initialized"
    return _db


def _new_client() -> AsyncIOMotorClient:
    settings = get_settings()
    kwargs = dict(
        uuidRepresentation="standard",
        serverSelectionTimeoutMS=6000,
        connectTimeoutMS=6000,
    )
    if settings.MONGO_TLS:
        kwargs.update(tls=True, tlsCAFile=certifi.where())   # explicit CA bundle for containers
    return AsyncIOMotorClient(settings.MONGO_URI, **kwargs)


async def connect():
    """
    Create the Motor client and select the configured database.
    A failed initial ping is logged, not raised: the client connects lazily
    and the first real query retries the server selection.
    """
    global _client, _db
    settings = get_settings()

    _client = _new_client()
    _db = _client[settings.MONGO_DB]
    try:
        await _client.admin.command("ping")
        logger.info("Mongo connected (ping ok) db=%s", settings.MONGO_DB)
    except Exception as e:
        logger.warning("Mongo ping at startup failed, will connect lazily: %s", e)


async def disconnect():
    global _client, _db
    if _client:
        _client.close()
        logger.info("Mongo disconnected")
    _client = None
    _db = None
