"""Word catalog operations: normalization, bucket counts and random picks."""
import unicodedata
from typing import Iterable

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.categories.service import get_category
from src.database import unit_of_work
from src.errors import DuplicateError, NotFoundError, ValidationFailedError
from src.logging_config import get_logger
from src.words.models import Word

logger = get_logger(__name__)

MIN_LETTERS = 4
MAX_LETTERS = 10
LETTER_BUCKETS = tuple(range(MIN_LETTERS, MAX_LETTERS + 1))

# Uppercase game alphabet: basic Latin plus the Turkish letters
TURKISH_LETTERS = "ÇĞİÖŞÜ"
ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ" + TURKISH_LETTERS)


def normalize_word(text: str) -> str:
    """Strip, compose combining marks (NFC) and uppercase."""
    return unicodedata.normalize("NFC", text.strip()).upper()


def letter_count(word: str) -> int:
    """Number of characters, not bytes: 'İSTANBUL' has 8."""
    return len(word)


def has_valid_letters(word: str) -> bool:
    return bool(word) and all(char in ALPHABET for char in word)


def is_valid_length(count: int) -> bool:
    return MIN_LETTERS <= count <= MAX_LETTERS


def validate_word(text: str) -> tuple[str, int]:
    """
    Normalize a word and check it against the game rules.

    Returns the normalized text and its letter count, or raises
    ValidationFailedError with a user-facing message.
    """
    word = normalize_word(text)
    count = letter_count(word)

    if not has_valid_letters(word):
        raise ValidationFailedError("Kelime yalnızca harflerden oluşmalıdır")

    if not is_valid_length(count):
        raise ValidationFailedError("Kelime uzunluğu 4-10 harf arasında olmalıdır")

    return word, count


# ========== Queries ==========


async def count_words(db: AsyncSession, category_id: int, bucket: int | None = None) -> int:
    """Count words of a category, optionally only one letter bucket."""
    query = select(func.count(Word.id)).where(Word.category_id == category_id)
    if bucket is not None:
        query = query.where(Word.letter_count == bucket)

    result = await db.execute(query)
    return result.scalar_one()


async def count_words_by_length(db: AsyncSession, category_id: int) -> dict[int, int]:
    """Word counts for every bucket 4..10; empty buckets report 0."""
    result = await db.execute(
        select(Word.letter_count, func.count(Word.id))
        .where(Word.category_id == category_id)
        .group_by(Word.letter_count)
    )
    found = dict(result.all())
    return {bucket: found.get(bucket, 0) for bucket in LETTER_BUCKETS}


async def fetch_random_words(
        db: AsyncSession,
        category_id: int,
        bucket: int,
        limit: int,
        exclude_ids: Iterable[int] = ()) -> list[Word]:
    """
    Pick up to `limit` random words of one bucket.

    Uses SQL RANDOM() so only the chosen rows are loaded. Ids in
    `exclude_ids` are never returned.
    """
    query = select(Word).where(
        Word.category_id == category_id,
        Word.letter_count == bucket,
    )

    excluded = list(exclude_ids)
    if excluded:
        query = query.where(Word.id.notin_(excluded))

    result = await db.execute(query.order_by(func.random()).limit(limit))
    return list(result.scalars().all())


async def find_word(db: AsyncSession, category_id: int, text: str) -> Word | None:
    """Look up an already normalized word inside a category."""
    result = await db.execute(
        select(Word).where(Word.category_id == category_id, Word.word == text)
    )
    return result.scalar_one_or_none()


async def get_word(db: AsyncSession, word_id: int) -> Word:
    result = await db.execute(select(Word).where(Word.id == word_id))
    word = result.scalar_one_or_none()

    if not word:
        raise NotFoundError("Kelime bulunamadı")

    return word


async def list_words_by_category(db: AsyncSession, category_id: int) -> list[Word]:
    """Words of a category ordered by bucket, then alphabetically."""
    result = await db.execute(
        select(Word)
        .where(Word.category_id == category_id)
        .order_by(Word.letter_count.asc(), Word.word.asc())
    )
    return list(result.scalars().all())


# ========== Writes ==========


async def _flush_word(db: AsyncSession, word: Word) -> None:
    try:
        await db.flush()
    except IntegrityError as exc:
        raise DuplicateError(f"Bu kelime zaten mevcut: {word.word}") from exc


async def stage_word(db: AsyncSession, category_id: int, text: str, hint: str | None = None) -> Word:
    """
    Validate a word and add it to the session without committing.

    The caller owns the transaction, so several words can be written
    together.
    """
    await get_category(db, category_id)
    word_text, count = validate_word(text)

    db_word = Word(category_id=category_id, word=word_text, letter_count=count, hint=hint)
    db.add(db_word)
    await _flush_word(db, db_word)
    return db_word


async def insert_word(db: AsyncSession, category_id: int, text: str, hint: str | None = None) -> Word:
    """Validate and add a word to a category."""
    async with unit_of_work(db):
        db_word = await stage_word(db, category_id, text, hint)

    await db.refresh(db_word)
    return db_word


async def update_word(db: AsyncSession, word_id: int, text: str, hint: str | None) -> Word:
    async with unit_of_work(db):
        db_word = await get_word(db, word_id)
        word_text, count = validate_word(text)

        db_word.word = word_text
        db_word.letter_count = count
        db_word.hint = hint
        await _flush_word(db, db_word)

    await db.refresh(db_word)
    return db_word


async def delete_word(db: AsyncSession, word_id: int) -> None:
    async with unit_of_work(db):
        db_word = await get_word(db, word_id)
        await db.delete(db_word)
