"""
Company API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter()


@router.post("/companies", status_code=status.HTTP_201_CREATED)
async def create_company(
    payload: schemas.CompanyCreateRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    company = await service.create(payload)
    return {"company": company}


@router.get("/companies")
async def list_companies(request: Request) -> dict:
    """
    Optional filters: name (substring, case-insensitive), minEmployees, maxEmployees.
    """
    companies = await service.find_all(request.query_params)
    return {"companies": companies}


@router.get("/companies/{handle}")
async def get_company(handle: str) -> dict:
    company = await service.get(handle)
    return {"company": company}


@router.patch("/companies/{handle}")
async def update_company(
    handle: str,
    payload: schemas.CompanyUpdateRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    company = await service.update(handle, payload)
    return {"company": company}


@router.delete("/companies/{handle}")
async def delete_company(
    handle: str,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    await service.remove(handle)
    return {"deleted": handle}
