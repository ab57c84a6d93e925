"""WalkDifficulty repository."""
from walks_api.models.walk import WalkDifficulty
from walks_api.repositories.base import Repository


class WalkDifficultyRepository(Repository[WalkDifficulty]):
    model = WalkDifficulty
    mutable_fields = ("code",)
