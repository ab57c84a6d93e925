"""API router aggregation."""
from fastapi import APIRouter

from walks_api.api.auth import router as auth_router
from walks_api.api.regions import router as regions_router
from walks_api.api.walk_difficulties import router as walk_difficulties_router
from walks_api.api.walks import router as walks_router

router = APIRouter()

router.include_router(auth_router)
router.include_router(regions_router)
router.include_router(walk_difficulties_router)
router.include_router(walks_router)
