"""
Capacity model: how many participants a category can supply.

Every participant draws 2 words from each of the 7 letter buckets
(14 words) and no word is dealt twice in a session, so the scarcest
bucket decides how many participants fit.
"""
from typing import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from src.categories.service import get_category
from src.errors import ValidationFailedError
from src.game.schemas import CapacityReport, GameMode, WordCountByLength
from src.words.service import LETTER_BUCKETS, count_words_by_length

WORDS_PER_BUCKET = 2
WORDS_PER_PARTICIPANT = WORDS_PER_BUCKET * len(LETTER_BUCKETS)


def max_participants(counts: Mapping[int, int]) -> int:
    """Participants the scarcest bucket can serve with disjoint word pairs."""
    min_bucket = min(counts.get(bucket, 0) for bucket in LETTER_BUCKETS)
    if min_bucket < WORDS_PER_BUCKET:
        return 0
    return min_bucket // WORDS_PER_BUCKET


def supports_participants(counts: Mapping[int, int], participant_count: int) -> bool:
    """True when every participant can get their own 14 words."""
    total = sum(counts.get(bucket, 0) for bucket in LETTER_BUCKETS)
    if total < WORDS_PER_PARTICIPANT * participant_count:
        return False

    needed = WORDS_PER_BUCKET * participant_count
    return all(counts.get(bucket, 0) >= needed for bucket in LETTER_BUCKETS)


def evaluate_capacity(counts: Mapping[int, int]) -> CapacityReport:
    """Build a capacity report from per-bucket word counts."""
    per_bucket = [
        WordCountByLength(letter_count=bucket, count=counts.get(bucket, 0))
        for bucket in LETTER_BUCKETS
    ]
    total = sum(item.count for item in per_bucket)
    min_bucket = min(item.count for item in per_bucket)

    max_multi = max_participants(counts)
    is_valid = total >= WORDS_PER_PARTICIPANT and min_bucket >= WORDS_PER_BUCKET

    if not is_valid:
        if total < WORDS_PER_PARTICIPANT:
            message = f"❌ Oynanamaz: En az {WORDS_PER_PARTICIPANT} kelime gerekli (mevcut: {total})"
        else:
            message = (
                f"❌ Oynanamaz: Her harf uzunluğundan en az {WORDS_PER_BUCKET} kelime gerekli "
                f"(en az: {min_bucket})"
            )
    elif max_multi == 1:
        message = f"✅ Sadece tek yarışmacı modu için oynanabilir ({total} kelime)"
    else:
        message = f"✅ {max_multi} yarışmacıya/takıma kadar oynanabilir ({total} kelime)"

    return CapacityReport(
        is_valid=is_valid,
        total_words=total,
        words_by_length=per_bucket,
        max_players_single=1 if is_valid else 0,
        max_players_multi=max_multi,
        max_teams=max_multi,
        message=message,
    )


async def check_capacity(db: AsyncSession, category_id: int) -> CapacityReport:
    """Capacity report for a stored category."""
    await get_category(db, category_id)
    counts = await count_words_by_length(db, category_id)
    return evaluate_capacity(counts)


def effective_participants(mode: GameMode, participant_count: int) -> int:
    """Participant count a check evaluates: single mode is always one."""
    if mode == GameMode.SINGLE:
        return 1

    if participant_count < 1:
        raise ValidationFailedError("Yarışmacı sayısı en az 1 olmalıdır")

    return participant_count


async def check_capacity_for(
        db: AsyncSession,
        category_id: int,
        mode: GameMode,
        participant_count: int) -> bool:
    """Whether a category has enough words for `participant_count` players or teams."""
    participant_count = effective_participants(mode, participant_count)

    await get_category(db, category_id)
    counts = await count_words_by_length(db, category_id)
    return supports_participants(counts, participant_count)
