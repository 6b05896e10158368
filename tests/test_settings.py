from src.categories.models import Category
from src.categories.service import list_categories
from src.history.models import GameHistory, GameParticipant, GameWordResult
from src.history.service import record_session
from src.seed import seed_database
from src.settings.service import DEFAULT_SETTINGS, get_settings, reset_all_data, update_setting
from src.words.models import Word
from tests.helpers import build_session_data, count_rows


async def test_update_setting_creates_then_replaces(db):
    await update_setting(db, "theme", "dark")
    await update_setting(db, "theme", "light")

    assert await get_settings(db) == {"theme": "light"}


async def test_reset_keeps_the_default_category_and_restores_settings(make_category, db, session_maker):
    await seed_database(db)
    default = (await list_categories(db))[0]
    extra = await make_category(2, name="Meyveler")
    await record_session(db, build_session_data(extra.id, "Meyveler"))
    await record_session(db, build_session_data(default.id, default.name, participants=1))
    await update_setting(db, "default_time", "60")
    await update_setting(db, "theme", "dark")

    message = await reset_all_data(db)

    assert message.startswith("Tüm veriler varsayılanlara sıfırlandı")
    async with session_maker() as other:
        categories = await list_categories(other)
        assert [(c.id, c.name, c.is_default) for c in categories] == [
            (default.id, "Genel Kelimeler", True)
        ]
        assert await count_rows(other, Category) == 1
        assert await count_rows(other, Word) == 0
        assert await count_rows(other, GameHistory) == 0
        assert await count_rows(other, GameParticipant) == 0
        assert await count_rows(other, GameWordResult) == 0
        assert await get_settings(other) == DEFAULT_SETTINGS


async def test_reset_does_not_reseed(db):
    await seed_database(db)
    await reset_all_data(db)

    assert await seed_database(db) is False
    assert await count_rows(db, Word) == 0
