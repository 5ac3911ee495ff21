from functools import lru_cache
from typing import Literal, Optional
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "ShopRecommendations"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # Mongo
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "shop"
    MONGO_TLS: bool = False

    # Redis (optional, trending cache only)
    REDIS_URL: Optional[str] = None

    # Cache config
    trending_cache_ttl: int = 5 * 60            # 5 minutes
    trending_cache_prefix: str = "trending"     # redis key namespace

    # Recommendation config
    similar_users_limit: int = 10               # neighbours scanned by collaborative
    max_limit: int = 100                        # upper bound for ?limit=

    # API
    api_prefix: str = "/api"
    auth_user_header: str = "X-User-Id"         # set by the auth gateway
    ALLOWED_ORIGINS: str = ""                   # CSV

    # pydantic-settings config will be set dynamically in the factory below
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
