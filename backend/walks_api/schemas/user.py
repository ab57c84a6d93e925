"""Pydantic schemas for authentication."""
from pydantic import Field

from walks_api.schemas.base import ApiSchema


class LoginRequest(ApiSchema):
    """Login request schema."""
    username: str
    password: str


class TokenResponse(ApiSchema):
    """Token response schema."""
    token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Access token expiration in seconds")
