# app/api/auth.py
from typing import Optional

from fastapi import Depends, Request
from app.api.deps import settings_dep
from app.api.errors import AuthenticationError
from app.core.config import Settings


async def current_user_id(
    request: Request,
    settings: Settings = Depends(settings_dep),
) -> str:
    """
    Verified user id placed on the request by the auth gateway.
    The header name comes from settings (default 'X-User-Id').
    """
    user_id = _header_user_id(request, settings)
    if not user_id:
        raise AuthenticationError("Authentication required")
    return user_id


def _header_user_id(request: Request, settings: Settings) -> Optional[str]:
    value = request.headers.get(settings.auth_user_header, "").strip()
    return value or None
