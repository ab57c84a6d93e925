"""Repository exports and per-request dependencies."""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from walks_api.database import get_db
from walks_api.repositories.base import Repository
from walks_api.repositories.region import RegionRepository
from walks_api.repositories.user import UserRepository
from walks_api.repositories.walk import WalkRepository
from walks_api.repositories.walk_difficulty import WalkDifficultyRepository


def get_region_repository(db: AsyncSession = Depends(get_db)) -> RegionRepository:
    return RegionRepository(db)


def get_walk_difficulty_repository(db: AsyncSession = Depends(get_db)) -> WalkDifficultyRepository:
    return WalkDifficultyRepository(db)


def get_walk_repository(db: AsyncSession = Depends(get_db)) -> WalkRepository:
    return WalkRepository(db)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


__all__ = [
    "Repository",
    "RegionRepository",
    "UserRepository",
    "WalkRepository",
    "WalkDifficultyRepository",
    "get_region_repository",
    "get_walk_difficulty_repository",
    "get_walk_repository",
    "get_user_repository",
]
