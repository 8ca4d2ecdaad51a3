"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter()


@router.post("/users", status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: schemas.UserCreateRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    return await service.create(payload)


@router.get("/users")
async def list_users(
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    users = await service.find_all()
    return {"users": users}


@router.get("/users/{username}")
async def get_user(
    username: str,
    _: dict = Depends(auth_dependencies.require_admin_or_same_user),
) -> dict:
    user = await service.get(username)
    return {"user": user}


@router.patch("/users/{username}")
async def update_user(
    username: str,
    payload: schemas.UserUpdateRequest,
    current_user: dict = Depends(auth_dependencies.require_admin_or_same_user),
) -> dict:
    user = await service.update(
        username,
        payload,
        allow_admin_change=bool(current_user.get("isAdmin")),
    )
    return {"user": user}


@router.delete("/users/{username}")
async def delete_user(
    username: str,
    _: dict = Depends(auth_dependencies.require_admin_or_same_user),
) -> dict:
    await service.remove(username)
    return {"deleted": username}


@router.post("/users/{username}/jobs/{job_id}")
async def apply_for_job(
    username: str,
    job_id: int,
    _: dict = Depends(auth_dependencies.require_admin_or_same_user),
) -> dict:
    await service.apply_for_job(username, job_id)
    return {"applied": job_id}
