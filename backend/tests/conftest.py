"""Fixtures for catalog tests: a throwaway in-memory SQLite catalog per test."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from lighthouse.db.database import Base, get_db
from lighthouse.models import GameVersion, Slot

TEST_DATABASE_URL = "sqlite+aiosqlite:///file::memory:?cache=shared&uri=true"

test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)
test_session_factory = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


async def _override_get_db():
    async with test_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@pytest.fixture(autouse=True)
async def setup_db():
    """Fresh slot, rating and heart tables for every test."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db():
    """Session for calling services directly."""
    async with test_session_factory() as session:
        yield session
        await session.commit()


@pytest.fixture
async def client():
    """HTTP client against the app, with get_db pointed at the test catalog."""
    from lighthouse.main import app

    app.dependency_overrides[get_db] = _override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def make_slot(slot_id: int, **fields) -> Slot:
    """A fully populated transient slot; override any column via kwargs."""
    values = dict(
        slot_id=slot_id,
        name=f"Level {slot_id}",
        description="",
        icon_hash="",
        root_level="",
        resource_collection="",
        author_labels="",
        background_hash="",
        level_type="",
        initially_locked=False,
        sub_level=False,
        lbp1_only=False,
        move_required=False,
        team_pick=False,
        shareable=0,
        minimum_players=1,
        maximum_players=4,
        game_version=GameVersion.LITTLE_BIG_PLANET_2,
        first_uploaded=0,
        last_updated=0,
        plays_lbp1=0,
        plays_lbp1_complete=0,
        plays_lbp1_unique=0,
        plays_lbp2=0,
        plays_lbp2_complete=0,
        plays_lbp2_unique=0,
        plays_lbp3=0,
        plays_lbp3_complete=0,
        plays_lbp3_unique=0,
    )
    values.update(fields)
    return Slot(**values)


@pytest.fixture
def slot_factory():
    return make_slot
