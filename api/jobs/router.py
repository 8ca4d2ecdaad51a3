"""
Job API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter()


@router.post("/jobs", status_code=status.HTTP_201_CREATED)
async def create_job(
    payload: schemas.JobCreateRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    job = await service.create(payload)
    return {"job": job}


@router.get("/jobs")
async def list_jobs(request: Request) -> dict:
    """
    Optional filters: title (substring, case-insensitive), minSalary, hasEquity.
    """
    jobs = await service.find_all(request.query_params)
    return {"jobs": jobs}


@router.get("/jobs/{job_id}")
async def get_job(job_id: int) -> dict:
    job = await service.get(job_id)
    return {"job": job}


@router.patch("/jobs/{job_id}")
async def update_job(
    job_id: int,
    payload: schemas.JobUpdateRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    job = await service.update(job_id, payload)
    return {"job": job}


@router.delete("/jobs/{job_id}")
async def delete_job(
    job_id: int,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    await service.remove(job_id)
    return {"deleted": job_id}
