"""Conversions between ORM records and API schemas."""
from walks_api.models import Region, Walk, WalkDifficulty
from walks_api.schemas.walk import (
    AddRegionRequest,
    AddWalkDifficultyRequest,
    AddWalkRequest,
    RegionResponse,
    UpdateRegionRequest,
    UpdateWalkDifficultyRequest,
    UpdateWalkRequest,
    WalkDifficultyResponse,
    WalkResponse,
)


# --- Region ---
def region_to_response(region: Region) -> RegionResponse:
    return RegionResponse(
        id=region.id,
        code=region.code,
        name=region.name,
        region_image_url=region.region_image_url,
    )


def add_region_request_to_region(request: AddRegionRequest) -> Region:
    return Region(
        code=request.code,
        name=request.name,
        region_image_url=request.region_image_url,
    )


def update_region_request_to_region(request: UpdateRegionRequest) -> Region:
    return add_region_request_to_region(request)


# --- WalkDifficulty ---
def walk_difficulty_to_response(walk_difficulty: WalkDifficulty) -> WalkDifficultyResponse:
    return WalkDifficultyResponse(id=walk_difficulty.id, code=walk_difficulty.code)


def add_walk_difficulty_request_to_walk_difficulty(
    request: AddWalkDifficultyRequest,
) -> WalkDifficulty:
    return WalkDifficulty(code=request.code)


def update_walk_difficulty_request_to_walk_difficulty(
    request: UpdateWalkDifficultyRequest,
) -> WalkDifficulty:
    return add_walk_difficulty_request_to_walk_difficulty(request)


# --- Walk ---
def walk_to_response(walk: Walk) -> WalkResponse:
    """Project a walk, including its region and difficulty when loaded."""
    return WalkResponse(
        id=walk.id,
        name=walk.name,
        length=walk.length,
        region_id=walk.region_id,
        walk_difficulty_id=walk.walk_difficulty_id,
        region=region_to_response(walk.region) if walk.region else None,
        walk_difficulty=(
            walk_difficulty_to_response(walk.walk_difficulty) if walk.walk_difficulty else None
        ),
    )


def add_walk_request_to_walk(request: AddWalkRequest) -> Walk:
    return Walk(
        name=request.name,
        length=request.length,
        region_id=request.region_id,
        walk_difficulty_id=request.walk_difficulty_id,
    )


def update_walk_request_to_walk(request: UpdateWalkRequest) -> Walk:
    return add_walk_request_to_walk(request)
