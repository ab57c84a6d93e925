"""Pydantic schemas for Walks, Regions and WalkDifficulties."""
from typing import Optional
from uuid import UUID

from walks_api.schemas.base import ApiSchema


# --- Region Schemas ---
class RegionResponse(ApiSchema):
    """Region response schema."""
    id: UUID
    code: str
    name: str
    region_image_url: Optional[str] = None


class AddRegionRequest(ApiSchema):
    """Region creation request. Field checks run in the router."""
    code: Optional[str] = None
    name: Optional[str] = None
    region_image_url: Optional[str] = None


class UpdateRegionRequest(AddRegionRequest):
    """Region update request (full replace)."""


# --- WalkDifficulty Schemas ---
class WalkDifficultyResponse(ApiSchema):
    """Walk difficulty response schema."""
    id: UUID
    code: str


class AddWalkDifficultyRequest(ApiSchema):
    """Walk difficulty creation request."""
    code: Optional[str] = None


class UpdateWalkDifficultyRequest(AddWalkDifficultyRequest):
    """Walk difficulty update request (full replace)."""


# --- Walk Schemas ---
class WalkResponse(ApiSchema):
    """Walk response schema."""
    id: UUID
    name: str
    length: float
    region_id: UUID
    walk_difficulty_id: UUID
    region: Optional[RegionResponse] = None
    walk_difficulty: Optional[WalkDifficultyResponse] = None


class AddWalkRequest(ApiSchema):
    """Walk creation request.

    Presence, range and reference checks run in the router so that all
    field errors are reported together.
    """
    name: Optional[str] = None
    length: float = 0
    region_id: Optional[UUID] = None
    walk_difficulty_id: Optional[UUID] = None


class UpdateWalkRequest(AddWalkRequest):
    """Walk update request (full replace of mutable fields)."""
