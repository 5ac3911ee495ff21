# app/core/lifespan.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.db import mongo, redis as r
from app.domain.repositories.product_repo import ProductRepo
from app.domain.repositories.user_repo import UserRepo

logger = logging.getLogger(__name__)


async def ensure_indexes() -> None:
    db = mongo.get_db()
    await ProductRepo(db).ensure_indexes()
    await UserRepo(db).ensure_indexes()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup ---
    await mongo.connect()
    try:
        await ensure_indexes()
        logger.info("Mongo indexes ensured")
    except Exception as e:
        logger.warning("Mongo index creation skipped: %s", e)

    # Redis is optional: failures only disable the trending cache
    await r.connect()

    yield

    # --- Shutdown ---
    await r.disconnect()
    await mongo.disconnect()
