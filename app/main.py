from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.api.v1.routers.health import router as health_router
from app.api.v1.routers.recommendations import router as recommendations_router
from app.core.config import get_settings
from app.core.lifespan import lifespan
from app.core.logging import configure_logging

settings = get_settings()
configure_logging(debug=settings.DEBUG)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ------- CORS -------
# ALLOWED_ORIGINS is a CSV, e.g. "https://shop.example.com,https://admin.example.com"
allowed_origins = [o.strip() for o in settings.ALLOWED_ORIGINS.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins or ["*"],
    allow_credentials=False,                        # "*" is not allowed together with credentials
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["*"],
    max_age=86400,
)

register_exception_handlers(app)

# ------- Routes -------
app.include_router(health_router)
app.include_router(recommendations_router, prefix=settings.api_prefix)
