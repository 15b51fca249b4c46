"""
Tests for database seeding.
"""

import pytest
from sqlalchemy import func, select

from pinmap.db.init import INITIAL_TAGS, SAMPLE_PINS, initialize_database
from pinmap.models import MapSettings, Pin, RegionBoundary, Tag
from pinmap.services import PinService, TagService


async def _count(session, model) -> int:
    return await session.scalar(select(func.count()).select_from(model))


@pytest.mark.asyncio
async def test_initialize_database(db_session):
    await initialize_database(db_session)

    assert await _count(db_session, Tag) == len(INITIAL_TAGS)
    assert await _count(db_session, Pin) == len(SAMPLE_PINS)
    assert await _count(db_session, RegionBoundary) == 1
    assert await _count(db_session, MapSettings) == 1

    pin = await PinService(db_session).get_by_id("pin1")
    assert pin.main_tag == "culture"
    assert pin.supporting_tag_names == ["education", "community"]


@pytest.mark.asyncio
async def test_initialize_database_is_idempotent(db_session):
    await initialize_database(db_session)
    await initialize_database(db_session)

    assert await _count(db_session, Tag) == len(INITIAL_TAGS)
    assert await _count(db_session, Pin) == len(SAMPLE_PINS)
    assert await _count(db_session, RegionBoundary) == 1
    assert await _count(db_session, MapSettings) == 1


@pytest.mark.asyncio
async def test_initialize_database_keeps_existing_rows(db_session):
    """Seeding does not overwrite a tag that already exists."""
    await TagService(db_session).create(name="health", color="#000000")

    await initialize_database(db_session)

    tag = await TagService(db_session).get_by_name("health")
    assert tag.color == "#000000"
    assert await _count(db_session, Tag) == len(INITIAL_TAGS)


@pytest.mark.asyncio
async def test_seeded_pins_listed_by_tag(db_session):
    await initialize_database(db_session)

    pins = await PinService(db_session).list_by_tag("health")

    assert {pin.id for pin in pins} == {"pin2", "pin3"}
