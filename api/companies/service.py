"""
Company business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import asyncpg
from fastapi import HTTPException, status

from core import filters, sql

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found(handle: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No company: {handle}")


def _duplicate_handle(handle: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Duplicate company: {handle}")


def _duplicate_name(name: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Duplicate company name: {name}")


async def create(payload: schemas.CompanyCreateRequest) -> dict:
    existing = await repository.get_company_handle(payload.handle)
    if existing is not None:
        raise _duplicate_handle(payload.handle)

    try:
        company = await repository.insert_company(
            handle=payload.handle,
            name=payload.name,
            description=payload.description,
            num_employees=payload.num_employees,
            logo_url=payload.logo_url,
        )
    except asyncpg.UniqueViolationError as exc:
        # handle was checked above; a pkey hit here means a concurrent insert
        if getattr(exc, "constraint_name", None) == "companies_pkey":
            raise _duplicate_handle(payload.handle) from exc
        raise _duplicate_name(payload.name) from exc

    logger.info("company_created handle=%s", company["handle"])
    return company


async def find_all(query_params: Mapping[str, str]) -> list[dict]:
    company_filters = filters.parse_filters(
        query_params,
        model=schemas.CompanyFilters,
        vocabulary=repository.COMPANY_FILTERS,
    )

    min_employees = company_filters.get("minEmployees")
    max_employees = company_filters.get("maxEmployees")
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="minEmployees cannot be greater than maxEmployees.",
        )

    return await repository.list_companies(company_filters)


async def get(handle: str) -> dict:
    company = await repository.get_company(handle)
    if company is None:
        raise _not_found(handle)

    company["jobs"] = await repository.list_company_jobs(handle)
    return company


async def update(handle: str, payload: schemas.CompanyUpdateRequest) -> dict:
    data = payload.model_dump(by_alias=True, exclude_unset=True)
    try:
        company = await repository.update_company(handle, data)
    except sql.QueryBuildError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except asyncpg.UniqueViolationError as exc:
        # name is the only unique column a PATCH can change
        raise _duplicate_name(str(data.get("name"))) from exc

    if company is None:
        raise _not_found(handle)
    return company


async def remove(handle: str) -> None:
    row = await repository.delete_company(handle)
    if row is None:
        raise _not_found(handle)
    logger.info("company_deleted handle=%s", handle)
