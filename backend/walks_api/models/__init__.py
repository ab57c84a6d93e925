"""Model exports."""
from walks_api.models.user import User, Role, users_roles
from walks_api.models.region import Region
from walks_api.models.walk import Walk, WalkDifficulty

__all__ = [
    "User",
    "Role",
    "users_roles",
    "Region",
    "Walk",
    "WalkDifficulty",
]
