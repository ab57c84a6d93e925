"""Walk and WalkDifficulty models."""
import uuid
from sqlalchemy import Float, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from walks_api.database import Base


class WalkDifficulty(Base):
    """Difficulty level of a walk."""

    __tablename__ = "walk_difficulties"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    code: Mapped[str] = mapped_column(String(50), nullable=False)  # Easy, Medium, Hard


class Walk(Base):
    """A named trail with a length, a region and a difficulty."""

    __tablename__ = "walks"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    length: Mapped[float] = mapped_column(Float, nullable=False)  # kilometres
    region_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("regions.id"), nullable=False, index=True
    )
    walk_difficulty_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("walk_difficulties.id"), nullable=False, index=True
    )

    # Relationships
    region: Mapped["Region"] = relationship("Region", lazy="selectin")
    walk_difficulty: Mapped["WalkDifficulty"] = relationship("WalkDifficulty", lazy="selectin")
