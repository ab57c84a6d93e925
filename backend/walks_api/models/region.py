"""Region model."""
import uuid
from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from walks_api.database import Base


class Region(Base):
    """Geographic region a walk belongs to."""

    __tablename__ = "regions"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    code: Mapped[str] = mapped_column(String(20), nullable=False)  # "AKL", "WGN", etc.
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    region_image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
