import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.categories.models import Category
from src.database import build_engine, get_db, init_db
from src.main import app
from src.words.models import Word
from src.words.service import LETTER_BUCKETS
from tests.helpers import make_word


@pytest_asyncio.fixture
async def engine():
    engine = build_engine("sqlite+aiosqlite://")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def make_category(session_maker):
    """
    Factory: create a category with `counts` words per letter bucket.

    `counts` is either one number for every bucket or a {bucket: count} map.
    """
    async def _make(counts=2, name="Test", is_default=False):
        if isinstance(counts, int):
            counts = {bucket: counts for bucket in LETTER_BUCKETS}

        async with session_maker() as session:
            category = Category(name=name, emoji="🧪", is_default=is_default)
            session.add(category)
            await session.flush()

            for bucket, amount in counts.items():
                for index in range(amount):
                    session.add(Word(
                        category_id=category.id,
                        word=make_word(bucket, index),
                        letter_count=bucket,
                        hint=f"{bucket} harf #{index}",
                    ))
            await session.commit()
            return category

    return _make


@pytest_asyncio.fixture
async def client(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
