"""User repository."""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from walks_api.auth.jwt import verify_password
from walks_api.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Read-only access to users; there is no registration flow."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: UUID) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Exact match first, then a case-insensitive match if it is unambiguous."""
        result = await self.db.execute(select(User).where(User.username == username))
        user = result.scalar_one_or_none()
        if user is not None:
            return user

        result = await self.db.execute(
            select(User).where(func.lower(User.username) == username.lower())
        )
        candidates = result.scalars().all()
        if len(candidates) != 1:
            return None
        return candidates[0]

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        """Return the user only if the username exists and the password matches."""
        user = await self.get_by_username(username)

        if not user or not verify_password(password, user.password_hash):
            logger.info("Authentication failed for username %r", username)
            return None

        return user
