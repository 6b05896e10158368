"""Word drafting for play sessions."""
from typing import Iterable, List

from sqlalchemy.ext.asyncio import AsyncSession

from src.categories.service import get_category
from src.errors import InsufficientWordsError
from src.game.capacity import WORDS_PER_BUCKET
from src.logging_config import get_logger
from src.words.models import Word
from src.words.service import LETTER_BUCKETS, fetch_random_words

logger = get_logger(__name__)


async def draft_words(
        db: AsyncSession,
        category_id: int,
        exclude_ids: Iterable[int] = ()) -> List[Word]:
    """
    Draft the 14 words of one participant's game.

    Two random words are drawn from each letter bucket, 4 through 10, and
    returned shortest first (4,4,5,5,...,10,10) so difficulty rises as the
    game goes on. The pairs are never shuffled across buckets.

    Words whose ids are in `exclude_ids` are never drawn; pass the ids
    already dealt to other participants of the same session. If a bucket
    has fewer than 2 eligible words nothing is returned and
    InsufficientWordsError names the bucket.
    """
    await get_category(db, category_id)
    excluded = set(exclude_ids)

    selected: List[Word] = []
    for bucket in LETTER_BUCKETS:
        words = await fetch_random_words(db, category_id, bucket, WORDS_PER_BUCKET, excluded)

        if len(words) < WORDS_PER_BUCKET:
            logger.warning(
                f"⚠️ Category {category_id} has only {len(words)} eligible {bucket}-letter words"
            )
            raise InsufficientWordsError(bucket=bucket, available=len(words))

        selected.extend(words)

    logger.info(f"🎲 Drafted {len(selected)} words from category {category_id} (excluded {len(excluded)})")
    return selected


async def draft_session(
        db: AsyncSession,
        category_id: int,
        participant_count: int) -> List[List[Word]]:
    """
    Draft one word list per participant with no word dealt twice.

    Drafts run in order; each one excludes every id drawn before it.
    """
    drafts: List[List[Word]] = []
    used_ids: set[int] = set()

    for _ in range(participant_count):
        words = await draft_words(db, category_id, used_ids)
        used_ids.update(word.id for word in words)
        drafts.append(words)

    return drafts
