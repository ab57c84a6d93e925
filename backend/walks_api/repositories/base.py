"""Repository base class.

Concrete repositories bind an ORM model and the list of columns that an
update replaces. Routers get a repository per request from the dependency
functions in repositories/__init__.py.
"""
from typing import ClassVar, Generic, List, Optional, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from walks_api.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Get/GetAll/Add/Update/Delete over a single table."""

    model: ClassVar[Type[Base]]
    mutable_fields: ClassVar[Sequence[str]] = ()

    def __init__(self, db: AsyncSession):
        self.db = db

    def _base_query(self):
        return select(self.model)

    async def get_all(self) -> List[ModelT]:
        result = await self.db.execute(self._base_query())
        return list(result.scalars().all())

    async def get(self, entity_id: Optional[UUID]) -> Optional[ModelT]:
        if entity_id is None:
            return None
        result = await self.db.execute(
            self._base_query().where(self.model.id == entity_id)
        )
        return result.scalar_one_or_none()

    async def add(self, entity: ModelT) -> ModelT:
        """Insert a new row; the identity comes from the column default."""
        self.db.add(entity)
        await self.db.commit()
        await self.db.refresh(entity)
        return entity

    async def update(self, entity_id: UUID, entity: ModelT) -> Optional[ModelT]:
        """Replace the mutable fields of an existing row."""
        existing = await self.get(entity_id)
        if existing is None:
            return None

        for field in self.mutable_fields:
            setattr(existing, field, getattr(entity, field))

        await self.db.commit()
        await self.db.refresh(existing)
        return existing

    async def delete(self, entity_id: UUID) -> Optional[ModelT]:
        """Remove a row and return it as it was."""
        existing = await self.get(entity_id)
        if existing is None:
            return None

        await self.db.delete(existing)
        await self.db.commit()
        return existing
