"""
Centralized Test Configuration.
"""

import random
import time

import pytest
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from tracker.app.db.session import Base, init_db
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import ParcelCreate, utc_timestamp
from tracker.app.services.parcel_store import ParcelStore

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine():
    """Fresh in-memory database per test, schema created before and dropped after."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    
    yield engine
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def store(db_session):
    return ParcelStore(db_session)


@pytest.fixture
def rng():
    """Local random generator seeded from the clock."""
    return random.Random(time.time_ns())


@pytest.fixture
def make_parcel():
    """Factory for a registered test parcel."""
    def _make(client: int = 1000, address: str = "test", status: ParcelStatus = ParcelStatus.REGISTERED):
        return ParcelCreate(
            client=client,
            status=status,
            address=address,
            created_at=utc_timestamp(),
        )
    return _make
