"""
Auth business logic.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from users import service as user_service

from . import schemas, security


async def login(payload: schemas.TokenRequest) -> schemas.TokenResponse:
    user = await user_service.authenticate(payload.username, payload.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username/password.",
        )

    token = security.build_access_token(username=user["username"], is_admin=bool(user["isAdmin"]))
    return schemas.TokenResponse(token=token)


async def register(payload: schemas.RegisterRequest) -> schemas.TokenResponse:
    # Self-registration never grants admin.
    user = await user_service.register(
        username=payload.username,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        is_admin=False,
    )
    token = security.build_access_token(username=user["username"], is_admin=False)
    return schemas.TokenResponse(token=token)


def user_from_access_token(access_token: str) -> dict:
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    return {
        "username": str(payload["username"]),
        "isAdmin": bool(payload.get("isAdmin", False)),
    }
