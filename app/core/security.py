from __future__ import annotations

from fastapi import Header, HTTPException, status

from app.core.config import settings

USER_ID_MAX_CHARS = 128


def check_api_key(x_api_key: str | None) -> None:
    if settings.auth_mode != "protected" or not settings.api_key:
        return
    if x_api_key != settings.api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please provide a valid API key.",
        )


def require_api_key(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    check_api_key(x_api_key)


def normalize_user_id(raw: str | None) -> str | None:
    value = (raw or "").strip()
    if not value:
        return None
    if len(value) > USER_ID_MAX_CHARS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"X-User-Id must be at most {USER_ID_MAX_CHARS} characters.",
        )
    return value


def optional_user_id(x_user_id: str | None = Header(default=None, alias="X-User-Id")) -> str | None:
    return normalize_user_id(x_user_id)


def required_user_id(x_user_id: str | None = Header(default=None, alias="X-User-Id")) -> str:
    user_id = normalize_user_id(x_user_id)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sign in to view saved analyses.",
        )
    return user_id
