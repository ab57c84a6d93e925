"""Regions API endpoints."""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from walks_api.auth.jwt import require_writer
from walks_api.exceptions import ErrorCollector, NotFoundError
from walks_api.mappers import (
    add_region_request_to_region,
    region_to_response,
    update_region_request_to_region,
)
from walks_api.repositories import RegionRepository, get_region_repository
from walks_api.schemas.walk import AddRegionRequest, RegionResponse, UpdateRegionRequest
from walks_api.utils.audit import log_audit_event

router = APIRouter(prefix="/Regions", tags=["Regions"])


def _validate_region_request(request: Optional[AddRegionRequest], request_name: str) -> None:
    errors = ErrorCollector()

    if request is None:
        errors.add(request_name, f"{request_name} cannot be empty.")
        errors.raise_if_invalid()

    if not request.code or not request.code.strip():
        errors.add("Code", "Code is required.")

    if not request.name or not request.name.strip():
        errors.add("Name", "Name is required.")

    errors.raise_if_invalid()


@router.get("", response_model=List[RegionResponse])
async def get_all_regions(
    region_repository: RegionRepository = Depends(get_region_repository),
):
    """List all regions ordered by name."""
    regions = await region_repository.get_all()
    return [region_to_response(region) for region in regions]


@router.get("/{region_id}", response_model=RegionResponse)
async def get_region(
    region_id: UUID,
    region_repository: RegionRepository = Depends(get_region_repository),
):
    """Get a single region by ID."""
    region = await region_repository.get(region_id)
    if region is None:
        raise NotFoundError("Region")

    return region_to_response(region)


@router.post("", response_model=RegionResponse, status_code=status.HTTP_201_CREATED)
async def add_region(
    request: Request,
    response: Response,
    add_region_request: Optional[AddRegionRequest] = None,
    claims: dict = Depends(require_writer),
    region_repository: RegionRepository = Depends(get_region_repository),
):
    """Create a new region."""
    _validate_region_request(add_region_request, "addRegionRequest")

    region = await region_repository.add(add_region_request_to_region(add_region_request))

    log_audit_event(
        "region_created",
        actor=claims,
        details={"region_id": region.id, "code": region.code},
    )

    response.headers["Location"] = str(request.url_for("get_region", region_id=region.id))
    return region_to_response(region)


@router.put("/{region_id}", response_model=RegionResponse)
async def update_region(
    region_id: UUID,
    update_region_request: Optional[UpdateRegionRequest] = None,
    claims: dict = Depends(require_writer),
    region_repository: RegionRepository = Depends(get_region_repository),
):
    """Replace the code, name and image of a region."""
    _validate_region_request(update_region_request, "updateRegionRequest")

    region = await region_repository.update(
        region_id, update_region_request_to_region(update_region_request)
    )
    if region is None:
        raise NotFoundError("Region")

    log_audit_event(
        "region_updated",
        actor=claims,
        details={"region_id": region.id, "code": region.code},
    )

    return region_to_response(region)


@router.delete("/{region_id}", response_model=RegionResponse)
async def delete_region(
    region_id: UUID,
    claims: dict = Depends(require_writer),
    region_repository: RegionRepository = Depends(get_region_repository),
):
    """Delete a region and return it."""
    region = await region_repository.delete(region_id)
    if region is None:
        raise NotFoundError("Region")

    log_audit_event("region_deleted", actor=claims, details={"region_id": region.id})

    return region_to_response(region)
