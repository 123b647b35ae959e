"""Root conftest — shared test configuration and storage fixtures."""

import os

# Ensure tests never reach a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)

from datetime import date  # noqa: E402

import pytest  # noqa: E402

from checkin.db.base import Base  # noqa: E402
from checkin.infrastructure.database import DatabaseSessionManager  # noqa: E402
from checkin.models import Ban, Checkin, Guest, Template  # noqa: E402
from checkin.repositories.facility_repository import FacilityRepository  # noqa: E402


@pytest.fixture
async def db_manager():
    """Fresh in-memory SQLite database (foreign keys ON) per test."""
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
def repo(db_manager):
    return FacilityRepository(db_manager)


@pytest.fixture
def seed_children(db_manager):
    """Insert guests, bans, templates and checkins for a facility, each in
    reverse of its natural order."""

    async def _seed(facility_id: int) -> None:
        async with db_manager.session() as session:
            guests = [
                Guest(facility_id=facility_id, first_name="Barney", last_name="Rubble"),
                Guest(facility_id=facility_id, first_name="Wilma", last_name="Flintstone"),
                Guest(facility_id=facility_id, first_name="Fred", last_name="Flintstone"),
            ]
            session.add_all(guests)
            await session.flush()
            guest_id = guests[0].id
            session.add_all([
                Ban(
                    facility_id=facility_id, guest_id=guest_id,
                    from_date=date(2024, 6, 1), to_date=date(2024, 6, 30),
                ),
                Ban(
                    facility_id=facility_id, guest_id=guest_id,
                    from_date=date(2024, 1, 1), to_date=date(2024, 1, 31),
                ),
                Template(facility_id=facility_id, name="Weekend", all_mats="1-20"),
                Template(facility_id=facility_id, name="Weekday", all_mats="1-30"),
                Checkin(
                    facility_id=facility_id, guest_id=guest_id,
                    checkin_date=date(2024, 3, 1), mat_number=1,
                ),
                Checkin(
                    facility_id=facility_id, guest_id=guests[1].id,
                    checkin_date=date(2024, 2, 1), mat_number=9,
                ),
                Checkin(
                    facility_id=facility_id, guest_id=guests[2].id,
                    checkin_date=date(2024, 2, 1), mat_number=7,
                ),
            ])
            await session.commit()

    return _seed


@pytest.fixture
def drop_tables(db_manager):
    """Remove every table so the next storage call fails."""

    async def _drop() -> None:
        async with db_manager.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    return _drop
