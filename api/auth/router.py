"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import schemas, service

router = APIRouter()


@router.post("/auth/token")
async def token(payload: schemas.TokenRequest) -> schemas.TokenResponse:
    return await service.login(payload)


@router.post("/auth/register", status_code=status.HTTP_201_CREATED)
async def register(payload: schemas.RegisterRequest) -> schemas.TokenResponse:
    return await service.register(payload)
