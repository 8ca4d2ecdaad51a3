"""
User business logic.

Passwords are stored as bcrypt hashes and never leave this module; rows
returned to callers carry only the public user fields.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from auth import security
from core import sql

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found(username: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No user: {username}")


def _duplicate(username: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Duplicate username: {username}")


async def authenticate(username: str, password: str) -> dict | None:
    """
    Return the public user row when the password matches, else None.
    """
    row = await repository.get_user_with_password(username)
    if row is None:
        return None

    password_hash = str(row.pop("password", "") or "")
    if not security.verify_password(password, password_hash):
        return None
    return row


async def register(
    *,
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    email: str,
    is_admin: bool = False,
) -> dict:
    existing = await repository.get_username(username)
    if existing is not None:
        raise _duplicate(username)

    try:
        user = await repository.insert_user(
            username=username,
            password_hash=security.hash_password(password),
            first_name=first_name,
            last_name=last_name,
            email=email,
            is_admin=is_admin,
        )
    except asyncpg.UniqueViolationError as exc:
        raise _duplicate(username) from exc

    logger.info("user_registered username=%s is_admin=%s", username, is_admin)
    return user


async def create(payload: schemas.UserCreateRequest) -> dict:
    user = await register(
        username=payload.username,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        is_admin=payload.is_admin,
    )
    token = security.build_access_token(username=user["username"], is_admin=bool(user["isAdmin"]))
    return {"user": user, "token": token}


async def find_all() -> list[dict]:
    return await repository.list_users()


async def get(username: str) -> dict:
    user = await repository.get_user(username)
    if user is None:
        raise _not_found(username)

    user["jobs"] = await repository.list_applied_job_ids(username)
    return user


async def update(
    username: str,
    payload: schemas.UserUpdateRequest,
    *,
    allow_admin_change: bool = False,
) -> dict:
    data = payload.model_dump(by_alias=True, exclude_unset=True)
    if "isAdmin" in data and not allow_admin_change:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Only admins can change isAdmin.",
        )
    if "password" in data:
        data["password"] = security.hash_password(data["password"])

    try:
        user = await repository.update_user(username, data)
    except sql.QueryBuildError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    if user is None:
        raise _not_found(username)
    return user


async def remove(username: str) -> None:
    row = await repository.delete_user(username)
    if row is None:
        raise _not_found(username)
    logger.info("user_deleted username=%s", username)


async def apply_for_job(username: str, job_id: int) -> None:
    if await repository.get_username(username) is None:
        raise _not_found(username)
    if not await repository.job_exists(job_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No job: {job_id}")

    await repository.insert_application(username=username, job_id=job_id)
    logger.info("job_application username=%s job_id=%s", username, job_id)
