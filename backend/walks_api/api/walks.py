"""Walks API endpoints."""
import math
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from walks_api.auth.jwt import require_writer
from walks_api.exceptions import ErrorCollector, NotFoundError
from walks_api.mappers import (
    add_walk_request_to_walk,
    update_walk_request_to_walk,
    walk_to_response,
)
from walks_api.repositories import (
    RegionRepository,
    WalkDifficultyRepository,
    WalkRepository,
    get_region_repository,
    get_walk_difficulty_repository,
    get_walk_repository,
)
from walks_api.schemas.walk import AddWalkRequest, UpdateWalkRequest, WalkResponse
from walks_api.utils.audit import log_audit_event

router = APIRouter(prefix="/Walks", tags=["Walks"])


async def _validate_walk_request(
    request: Optional[AddWalkRequest],
    request_name: str,
    region_repository: RegionRepository,
    walk_difficulty_repository: WalkDifficultyRepository,
) -> None:
    """Check presence, range and referenced rows; raise with every failure found."""
    errors = ErrorCollector()

    if request is None:
        errors.add(request_name, f"{request_name} cannot be empty.")
        errors.raise_if_invalid()

    if not request.name or not request.name.strip():
        errors.add("Name", "Name is required.")

    if not math.isfinite(request.length) or request.length <= 0:
        errors.add("Length", "Length should be greater than zero.")

    if await region_repository.get(request.region_id) is None:
        errors.add("RegionId", "RegionId is invalid.")

    if await walk_difficulty_repository.get(request.walk_difficulty_id) is None:
        errors.add("WalkDifficultyId", "WalkDifficultyId is invalid.")

    errors.raise_if_invalid()


@router.get("", response_model=List[WalkResponse])
async def get_all_walks(
    walk_repository: WalkRepository = Depends(get_walk_repository),
):
    """List all walks with their region and difficulty."""
    walks = await walk_repository.get_all()
    return [walk_to_response(walk) for walk in walks]


@router.get("/{walk_id}", response_model=WalkResponse)
async def get_walk(
    walk_id: UUID,
    walk_repository: WalkRepository = Depends(get_walk_repository),
):
    """Get a single walk by ID."""
    walk = await walk_repository.get(walk_id)
    if walk is None:
        raise NotFoundError("Walk")

    return walk_to_response(walk)


@router.post("", response_model=WalkResponse, status_code=status.HTTP_201_CREATED)
async def add_walk(
    request: Request,
    response: Response,
    add_walk_request: Optional[AddWalkRequest] = None,
    claims: dict = Depends(require_writer),
    walk_repository: WalkRepository = Depends(get_walk_repository),
    region_repository: RegionRepository = Depends(get_region_repository),
    walk_difficulty_repository: WalkDifficultyRepository = Depends(get_walk_difficulty_repository),
):
    """
    Create a new walk.

    RegionId and WalkDifficultyId must point at existing rows. The response
    carries a Location header for the new walk.
    """
    await _validate_walk_request(
        add_walk_request, "addWalkRequest", region_repository, walk_difficulty_repository
    )

    walk = await walk_repository.add(add_walk_request_to_walk(add_walk_request))

    log_audit_event(
        "walk_created",
        actor=claims,
        details={"walk_id": walk.id, "name": walk.name},
    )

    response.headers["Location"] = str(request.url_for("get_walk", walk_id=walk.id))
    return walk_to_response(walk)


@router.put("/{walk_id}", response_model=WalkResponse)
async def update_walk(
    walk_id: UUID,
    update_walk_request: Optional[UpdateWalkRequest] = None,
    claims: dict = Depends(require_writer),
    walk_repository: WalkRepository = Depends(get_walk_repository),
    region_repository: RegionRepository = Depends(get_region_repository),
    walk_difficulty_repository: WalkDifficultyRepository = Depends(get_walk_difficulty_repository),
):
    """Replace the name, length, region and difficulty of a walk."""
    await _validate_walk_request(
        update_walk_request, "updateWalkRequest", region_repository, walk_difficulty_repository
    )

    walk = await walk_repository.update(walk_id, update_walk_request_to_walk(update_walk_request))
    if walk is None:
        raise NotFoundError("Walk")

    log_audit_event(
        "walk_updated",
        actor=claims,
        details={"walk_id": walk.id, "name": walk.name},
    )

    return walk_to_response(walk)


@router.delete("/{walk_id}", response_model=WalkResponse)
async def delete_walk(
    walk_id: UUID,
    claims: dict = Depends(require_writer),
    walk_repository: WalkRepository = Depends(get_walk_repository),
):
    """Delete a walk and return it."""
    walk = await walk_repository.delete(walk_id)
    if walk is None:
        raise NotFoundError("Walk")

    log_audit_event("walk_deleted", actor=claims, details={"walk_id": walk.id})

    return walk_to_response(walk)
