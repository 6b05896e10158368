"""Export and import of a category's words."""
from sqlalchemy.ext.asyncio import AsyncSession

from src.categories.service import get_category
from src.database import unit_of_work
from src.exchange.schemas import CategoryExportInfo, ExchangePayload, ImportSummary, WordExportInfo
from src.logging_config import get_logger
from src.words.service import (
    find_word,
    has_valid_letters,
    is_valid_length,
    letter_count,
    list_words_by_category,
    normalize_word,
    stage_word,
)

logger = get_logger(__name__)


async def export_category(db: AsyncSession, category_id: int) -> ExchangePayload:
    """Read a category and all of its words into the transfer format."""
    category = await get_category(db, category_id)
    words = await list_words_by_category(db, category_id)

    return ExchangePayload(
        category=CategoryExportInfo(
            name=category.name,
            emoji=category.emoji,
            description=category.description,
        ),
        words=[
            WordExportInfo(word=word.word, letter_count=word.letter_count, hint=word.hint)
            for word in words
        ],
    )


def _import_message(added: int, skipped: int) -> str:
    if added > 0 and skipped > 0:
        return f"{added} kelime eklendi, {skipped} kelime zaten vardı veya geçersizdi"
    if added > 0:
        return f"{added} kelime başarıyla eklendi"
    return f"Hiç kelime eklenmedi, {skipped} kelime zaten vardı veya geçersizdi"


async def _is_importable(db: AsyncSession, category_id: int, entry: WordExportInfo) -> bool:
    text = normalize_word(entry.word)
    count = letter_count(text)

    if not has_valid_letters(text):
        return False
    if not is_valid_length(count):
        return False
    if count != entry.letter_count:
        return False
    return await find_word(db, category_id, text) is None


async def import_category(db: AsyncSession, category_id: int, payload: ExchangePayload) -> ImportSummary:
    """
    Add the payload's words to an existing category.

    Invalid entries and words the category already has are counted as
    skipped; they never abort the import. All accepted words are committed
    together.
    """
    added = 0
    skipped = 0
    async with unit_of_work(db):
        await get_category(db, category_id)

        for entry in payload.words:
            if not await _is_importable(db, category_id, entry):
                skipped += 1
                continue

            await stage_word(db, category_id, entry.word, entry.hint)
            added += 1

    logger.info(f"📥 Imported into category {category_id}: {added} added, {skipped} skipped")
    return ImportSummary(
        words_added=added,
        words_skipped=skipped,
        message=_import_message(added, skipped),
    )
