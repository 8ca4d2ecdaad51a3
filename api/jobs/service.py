"""
Job business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import asyncpg
from fastapi import HTTPException, status

from core import filters, sql

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found(job_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No job: {job_id}")


async def create(payload: schemas.JobCreateRequest) -> dict:
    try:
        job = await repository.insert_job(
            title=payload.title,
            salary=payload.salary,
            equity=payload.equity,
            company_handle=payload.company_handle,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No company: {payload.company_handle}",
        ) from exc

    logger.info("job_created id=%s company_handle=%s", job["id"], job["companyHandle"])
    return job


async def find_all(query_params: Mapping[str, str]) -> list[dict]:
    job_filters = filters.parse_filters(
        query_params,
        model=schemas.JobFilters,
        vocabulary=repository.JOB_FILTERS,
    )
    return await repository.list_jobs(job_filters)


async def get(job_id: int) -> dict:
    job = await repository.get_job(job_id)
    if job is None:
        raise _not_found(job_id)

    job["company"] = await repository.get_job_company(job["companyHandle"])
    return job


async def update(job_id: int, payload: schemas.JobUpdateRequest) -> dict:
    data = payload.model_dump(exclude_unset=True)
    try:
        job = await repository.update_job(job_id, data)
    except sql.QueryBuildError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    if job is None:
        raise _not_found(job_id)
    return job


async def remove(job_id: int) -> None:
    row = await repository.delete_job(job_id)
    if row is None:
        raise _not_found(job_id)
    logger.info("job_deleted id=%s", job_id)
