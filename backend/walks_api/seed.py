"""Reference data: roles, starter users, walk difficulties and regions."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from walks_api.auth.jwt import hash_password
from walks_api.models import Region, Role, User, WalkDifficulty

logger = logging.getLogger(__name__)

ROLES = ["reader", "writer"]

USERS = [
    {
        "username": "readonly@user.com",
        "email_address": "readonly@user.com",
        "password": "Readonly@user",
        "first_name": "Read",
        "last_name": "Only",
        "roles": ["reader"],
    },
    {
        "username": "readwrite@user.com",
        "email_address": "readwrite@user.com",
        "password": "Readwrite@user",
        "first_name": "Read",
        "last_name": "Write",
        "roles": ["reader", "writer"],
    },
]

WALK_DIFFICULTIES = ["Easy", "Medium", "Hard"]

REGIONS = [
    {"code": "AKL", "name": "Auckland"},
    {"code": "NTL", "name": "Northland"},
    {"code": "BOP", "name": "Bay Of Plenty"},
    {"code": "WGN", "name": "Wellington"},
    {"code": "NSN", "name": "Nelson"},
    {"code": "STL", "name": "Southland"},
]


async def seed_database(session: AsyncSession) -> dict[str, int]:
    """Insert any missing reference rows. Returns how many rows of each kind were added."""
    added = {"roles": 0, "users": 0, "walk_difficulties": 0, "regions": 0}

    result = await session.execute(select(Role))
    roles_by_name = {role.name: role for role in result.scalars().all()}
    for name in ROLES:
        if name not in roles_by_name:
            role = Role(name=name)
            session.add(role)
            roles_by_name[name] = role
            added["roles"] += 1

    result = await session.execute(select(User.username))
    existing_usernames = set(result.scalars().all())
    for entry in USERS:
        if entry["username"] in existing_usernames:
            continue
        session.add(
            User(
                username=entry["username"],
                email_address=entry["email_address"],
                password_hash=hash_password(entry["password"]),
                first_name=entry["first_name"],
                last_name=entry["last_name"],
                roles=[roles_by_name[name] for name in entry["roles"]],
            )
        )
        added["users"] += 1

    result = await session.execute(select(WalkDifficulty.code))
    existing_codes = set(result.scalars().all())
    for code in WALK_DIFFICULTIES:
        if code not in existing_codes:
            session.add(WalkDifficulty(code=code))
            added["walk_difficulties"] += 1

    result = await session.execute(select(Region.code))
    existing_region_codes = set(result.scalars().all())
    for entry in REGIONS:
        if entry["code"] not in existing_region_codes:
            session.add(Region(code=entry["code"], name=entry["name"]))
            added["regions"] += 1

    await session.commit()
    logger.info("Seeded reference data: %s", added)
    return added
