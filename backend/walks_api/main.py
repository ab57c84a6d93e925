"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from walks_api.config import get_settings
from walks_api.database import dispose_engine
from walks_api.exceptions import register_exception_handlers
from walks_api.api import router as api_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info("Starting %s...", settings.APP_NAME)
    yield
    # Shutdown
    logger.info("Shutting down %s...", settings.APP_NAME)
    await dispose_engine()


app = FastAPI(
    title=settings.APP_NAME,
    description="Walks, regions and walk difficulties of New Zealand",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

register_exception_handlers(app)

# Include API routers
app.include_router(api_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.APP_NAME}
