"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Settings never point at a real PostgreSQL instance
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from cinecatalog.db.base import Base  # noqa: E402
from cinecatalog.infrastructure.database import enable_sqlite_foreign_keys  # noqa: E402
from cinecatalog.models import Genre, Language, Movie  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_catalog(test_db):
    """Two languages, two genres and three movies (two dramas, one comedy)."""
    english = Language(name="English")
    portuguese = Language(name="Portuguese")
    drama = Genre(name="Drama")
    comedy = Genre(name="Comedy")
    test_db.add_all([english, portuguese, drama, comedy])
    await test_db.flush()

    movies = [
        Movie(
            title="The Godfather", genre_id=drama.id, language_id=english.id,
            oscar_count=3, release_date=date(1972, 3, 24),
        ),
        Movie(
            title="Central Station", genre_id=drama.id,
            language_id=portuguese.id, oscar_count=0,
            release_date=date(1998, 4, 3),
        ),
        Movie(
            title="Amadeus", genre_id=comedy.id, language_id=english.id,
            oscar_count=8, release_date=date(1984, 9, 19),
        ),
    ]
    test_db.add_all(movies)
    await test_db.commit()
    return {
        "languages": {"english": english, "portuguese": portuguese},
        "genres": {"drama": drama, "comedy": comedy},
        "movies": {m.title: m for m in movies},
    }
