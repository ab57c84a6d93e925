"""Walk repository."""
from walks_api.models.walk import Walk
from walks_api.repositories.base import Repository


class WalkRepository(Repository[Walk]):
    """Walks are returned with their region and difficulty loaded."""

    model = Walk
    mutable_fields = ("name", "length", "region_id", "walk_difficulty_id")

    def _base_query(self):
        return super()._base_query().order_by(Walk.name)
