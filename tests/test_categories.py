import pytest

from src.categories.schemas import CategoryCreate, CategoryUpdate
from src.categories.service import (
    category_exists,
    create_category,
    delete_category,
    get_category,
    list_categories,
    update_category,
)
from src.errors import NotFoundError, ValidationFailedError
from src.words.models import Word
from tests.helpers import count_rows


async def test_create_category_is_never_default(db):
    category = await create_category(db, CategoryCreate(name="Hayvanlar", emoji="🐾"))

    assert category.id is not None
    assert category.is_default is False
    assert category.emoji == "🐾"
    assert await category_exists(db, category.id)
    assert not await category_exists(db, category.id + 1)


async def test_list_puts_default_first(make_category, db):
    await make_category(0, name="Ağaçlar")
    await make_category(0, name="Zanaat", is_default=True)
    await make_category(0, name="Bitkiler")

    names = [c.name for c in await list_categories(db)]

    assert names == ["Zanaat", "Ağaçlar", "Bitkiler"]


async def test_update_only_touches_given_fields(make_category, db):
    category = await make_category(0, name="Eski")

    updated = await update_category(db, category.id, CategoryUpdate(description="Yeni açıklama"))

    assert updated.name == "Eski"
    assert updated.emoji == "🧪"
    assert updated.description == "Yeni açıklama"


async def test_default_category_cannot_be_deleted(make_category, db):
    category = await make_category(2, is_default=True)

    with pytest.raises(ValidationFailedError) as exc_info:
        await delete_category(db, category.id)

    assert exc_info.value.message == "Varsayılan kategori silinemez"
    assert (await get_category(db, category.id)).is_default
    assert await count_rows(db, Word) == 14


async def test_delete_category_removes_its_words(make_category, db):
    kept = await make_category(1, name="Kalan")
    removed = await make_category(2, name="Giden")

    await delete_category(db, removed.id)

    assert await count_rows(db, Word) == 7
    with pytest.raises(NotFoundError):
        await get_category(db, removed.id)
    await get_category(db, kept.id)


async def test_missing_category(db):
    with pytest.raises(NotFoundError) as exc_info:
        await delete_category(db, 5)

    assert exc_info.value.message == "Kategori bulunamadı"
