"""Walk difficulty API endpoints."""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from walks_api.auth.jwt import require_writer
from walks_api.exceptions import ErrorCollector, NotFoundError
from walks_api.mappers import (
    add_walk_difficulty_request_to_walk_difficulty,
    update_walk_difficulty_request_to_walk_difficulty,
    walk_difficulty_to_response,
)
from walks_api.repositories import WalkDifficultyRepository, get_walk_difficulty_repository
from walks_api.schemas.walk import (
    AddWalkDifficultyRequest,
    UpdateWalkDifficultyRequest,
    WalkDifficultyResponse,
)
from walks_api.utils.audit import log_audit_event

router = APIRouter(prefix="/WalkDifficulties", tags=["Walk Difficulties"])


def _validate_walk_difficulty_request(
    request: Optional[AddWalkDifficultyRequest], request_name: str
) -> None:
    errors = ErrorCollector()

    if request is None:
        errors.add(request_name, f"{request_name} cannot be empty.")
        errors.raise_if_invalid()

    if not request.code or not request.code.strip():
        errors.add("Code", "Code is required.")

    errors.raise_if_invalid()


@router.get("", response_model=List[WalkDifficultyResponse])
async def get_all_walk_difficulties(
    walk_difficulty_repository: WalkDifficultyRepository = Depends(get_walk_difficulty_repository),
):
    """List all walk difficulties."""
    walk_difficulties = await walk_difficulty_repository.get_all()
    return [walk_difficulty_to_response(item) for item in walk_difficulties]


@router.get("/{walk_difficulty_id}", response_model=WalkDifficultyResponse)
async def get_walk_difficulty(
    walk_difficulty_id: UUID,
    walk_difficulty_repository: WalkDifficultyRepository = Depends(get_walk_difficulty_repository),
):
    walk_difficulty = await walk_difficulty_repository.get(walk_difficulty_id)
    if walk_difficulty is None:
        raise NotFoundError("Walk difficulty")

    return walk_difficulty_to_response(walk_difficulty)


@router.post("", response_model=WalkDifficultyResponse, status_code=status.HTTP_201_CREATED)
async def add_walk_difficulty(
    request: Request,
    response: Response,
    add_walk_difficulty_request: Optional[AddWalkDifficultyRequest] = None,
    claims: dict = Depends(require_writer),
    walk_difficulty_repository: WalkDifficultyRepository = Depends(get_walk_difficulty_repository),
):
    """Create a new walk difficulty."""
    _validate_walk_difficulty_request(add_walk_difficulty_request, "addWalkDifficultyRequest")

    walk_difficulty = await walk_difficulty_repository.add(
        add_walk_difficulty_request_to_walk_difficulty(add_walk_difficulty_request)
    )

    log_audit_event(
        "walk_difficulty_created",
        actor=claims,
        details={"walk_difficulty_id": walk_difficulty.id, "code": walk_difficulty.code},
    )

    response.headers["Location"] = str(
        request.url_for("get_walk_difficulty", walk_difficulty_id=walk_difficulty.id)
    )
    return walk_difficulty_to_response(walk_difficulty)


@router.put("/{walk_difficulty_id}", response_model=WalkDifficultyResponse)
async def update_walk_difficulty(
    walk_difficulty_id: UUID,
    update_walk_difficulty_request: Optional[UpdateWalkDifficultyRequest] = None,
    claims: dict = Depends(require_writer),
    walk_difficulty_repository: WalkDifficultyRepository = Depends(get_walk_difficulty_repository),
):
    _validate_walk_difficulty_request(update_walk_difficulty_request, "updateWalkDifficultyRequest")

    walk_difficulty = await walk_difficulty_repository.update(
        walk_difficulty_id,
        update_walk_difficulty_request_to_walk_difficulty(update_walk_difficulty_request),
    )
    if walk_difficulty is None:
        raise NotFoundError("Walk difficulty")

    log_audit_event(
        "walk_difficulty_updated",
        actor=claims,
        details={"walk_difficulty_id": walk_difficulty.id, "code": walk_difficulty.code},
    )

    return walk_difficulty_to_response(walk_difficulty)


@router.delete("/{walk_difficulty_id}", response_model=WalkDifficultyResponse)
async def delete_walk_difficulty(
    walk_difficulty_id: UUID,
    claims: dict = Depends(require_writer),
    walk_difficulty_repository: WalkDifficultyRepository = Depends(get_walk_difficulty_repository),
):
    walk_difficulty = await walk_difficulty_repository.delete(walk_difficulty_id)
    if walk_difficulty is None:
        raise NotFoundError("Walk difficulty")

    log_audit_event(
        "walk_difficulty_deleted",
        actor=claims,
        details={"walk_difficulty_id": walk_difficulty.id},
    )

    return walk_difficulty_to_response(walk_difficulty)
