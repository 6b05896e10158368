from src.categories.models import Category
from src.categories.service import list_categories
from src.game.capacity import check_capacity
from src.seed import DEFAULT_WORDS, clear_database, default_word_distribution, seed_database
from src.settings.service import DEFAULT_SETTINGS, get_settings
from src.words.models import Word
from src.words.service import LETTER_BUCKETS, count_words_by_length, validate_word
from tests.helpers import count_rows


def test_seed_words_are_valid_and_balanced():
    assert default_word_distribution() == {bucket: 10 for bucket in LETTER_BUCKETS}
    assert len({text for text, _ in DEFAULT_WORDS}) == len(DEFAULT_WORDS)
    for text, _ in DEFAULT_WORDS:
        assert validate_word(text)[0] == text


async def test_seed_creates_default_category_once(db):
    assert await seed_database(db) is True
    assert await seed_database(db) is False

    categories = await list_categories(db)
    assert len(categories) == 1
    assert categories[0].is_default
    assert categories[0].name == "Genel Kelimeler"
    assert await count_rows(db, Word) == 70
    assert await count_words_by_length(db, categories[0].id) == {b: 10 for b in LETTER_BUCKETS}
    assert await get_settings(db) == DEFAULT_SETTINGS


async def test_seeded_category_supports_five_participants(db):
    await seed_database(db)
    category = (await list_categories(db))[0]

    report = await check_capacity(db, category.id)

    assert report.is_valid
    assert report.total_words == 70
    assert report.max_players_multi == 5


async def test_clear_database(db):
    await seed_database(db)

    await clear_database(db)

    assert await count_rows(db, Category) == 0
    assert await count_rows(db, Word) == 0
    assert await get_settings(db) == {}
