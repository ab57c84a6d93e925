"""NZ Walks API: walks, regions and walk difficulties over FastAPI."""

__version__ = "0.1.0"
