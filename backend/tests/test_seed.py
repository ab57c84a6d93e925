"""Tests for reference data seeding."""

import pytest

from walks_api.seed import REGIONS, WALK_DIFFICULTIES, seed_database


@pytest.mark.asyncio
async def test_seeding_twice_adds_nothing(db_session):
    # The session_factory fixture has already seeded this database once
    added = await seed_database(db_session)

    assert added == {"roles": 0, "users": 0, "walk_difficulties": 0, "regions": 0}


@pytest.mark.asyncio
async def test_seeded_counts(test_client):
    regions = (await test_client.get("/Regions")).json()
    difficulties = (await test_client.get("/WalkDifficulties")).json()

    assert len(regions) == len(REGIONS)
    assert len(difficulties) == len(WALK_DIFFICULTIES)


@pytest.mark.asyncio
async def test_health(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
