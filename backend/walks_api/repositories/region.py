"""Region repository."""
from walks_api.models.region import Region
from walks_api.repositories.base import Repository


class RegionRepository(Repository[Region]):
    model = Region
    mutable_fields = ("code", "name", "region_image_url")

    def _base_query(self):
        return super()._base_query().order_by(Region.name)
