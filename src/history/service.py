"""Recording finished games and reading them back."""
from datetime import datetime, time, timedelta
from typing import List

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.categories.models import Category
from src.database import unit_of_work
from src.errors import NotFoundError, ValidationFailedError
from src.history.models import GameHistory, GameParticipant, GameWordResult
from src.history.schemas import (
    GameHistoryStats,
    GameSessionData,
    HistoryFilter,
    HistorySort,
    MostPlayedCategory,
    ParticipantData,
)
from src.logging_config import get_logger

logger = get_logger(__name__)


# ========== Recording ==========


async def _add_participant(db: AsyncSession, history_id: int, participant: ParticipantData) -> int:
    """Insert a participant row and return its generated id."""
    db_participant = GameParticipant(
        game_history_id=history_id,
        participant_name=participant.name,
        participant_type=participant.participant_type.value,
        score=participant.score,
        words_found=participant.words_found,
        words_skipped=participant.words_skipped,
        letters_revealed=participant.letters_revealed,
        rank=participant.rank,
    )
    db.add(db_participant)
    await db.flush()
    return db_participant.id


async def record_session(db: AsyncSession, session: GameSessionData) -> int:
    """
    Persist a finished game as one atomic unit.

    Writes the history row, then every participant, then each participant's
    word results. If any insert fails nothing is kept and PersistenceError
    is raised. Returns the new history id.
    """
    async with unit_of_work(db):
        history = GameHistory(
            category_id=session.category_id,
            category_name=session.category_name,
            game_mode=session.game_mode.value,
            played_at=session.played_at,
            total_time_seconds=session.total_time_seconds,
        )
        db.add(history)
        await db.flush()

        for participant in session.participants:
            participant_id = await _add_participant(db, history.id, participant)

            db.add_all([
                GameWordResult(
                    game_history_id=history.id,
                    participant_id=participant_id,
                    word=result.word,
                    word_hint=result.word_hint,
                    result=result.result.value,
                    points_earned=result.points_earned,
                    letters_used=result.letters_used,
                )
                for result in participant.word_results
            ])

        await db.flush()
        history_id = history.id

    logger.info(
        f"💾 Recorded game {history_id} ({session.game_mode.value}, "
        f"{len(session.participants)} participants) for '{session.category_name}'"
    )
    return history_id


# ========== Queries ==========


def build_history_query(filters: HistoryFilter) -> Select:
    """Compose the history list query from the optional filters."""
    query = select(GameHistory)

    if filters.category_id is not None:
        query = query.where(GameHistory.category_id == filters.category_id)
    if filters.game_mode is not None:
        query = query.where(GameHistory.game_mode == filters.game_mode.value)
    if filters.start_date is not None:
        query = query.where(GameHistory.played_at >= datetime.combine(filters.start_date, time.min))
    if filters.end_date is not None:
        # Inclusive: everything before the start of the following day
        next_day = datetime.combine(filters.end_date + timedelta(days=1), time.min)
        query = query.where(GameHistory.played_at < next_day)

    if filters.sort_by == HistorySort.DATE_ASC:
        query = query.order_by(GameHistory.played_at.asc(), GameHistory.id.asc())
    elif filters.sort_by == HistorySort.SCORE_DESC:
        best_score = (
            select(func.max(GameParticipant.score))
            .where(GameParticipant.game_history_id == GameHistory.id)
            .correlate(GameHistory)
            .scalar_subquery()
        )
        query = query.order_by(best_score.desc(), GameHistory.played_at.desc())
    else:
        query = query.order_by(GameHistory.played_at.desc(), GameHistory.id.desc())

    return query.limit(filters.limit).offset(filters.offset)


async def list_game_history(db: AsyncSession, filters: HistoryFilter | None = None) -> List[GameHistory]:
    filters = filters or HistoryFilter()
    if filters.start_date and filters.end_date and filters.start_date > filters.end_date:
        raise ValidationFailedError("Başlangıç tarihi bitiş tarihinden sonra olamaz")

    result = await db.execute(build_history_query(filters))
    return list(result.scalars().all())


async def get_game_history(db: AsyncSession, history_id: int) -> GameHistory:
    result = await db.execute(select(GameHistory).where(GameHistory.id == history_id))
    history = result.scalar_one_or_none()

    if not history:
        raise NotFoundError("Oyun kaydı bulunamadı")

    return history


async def get_game_history_detail(db: AsyncSession, history_id: int) -> GameHistory:
    """History entry with participants and word results loaded."""
    result = await db.execute(
        select(GameHistory)
        .options(selectinload(GameHistory.participants).selectinload(GameParticipant.word_results))
        .where(GameHistory.id == history_id)
    )
    history = result.scalar_one_or_none()

    if not history:
        raise NotFoundError("Oyun kaydı bulunamadı")

    return history


async def get_game_participants(db: AsyncSession, history_id: int) -> List[GameParticipant]:
    """Participants ranked first (unranked last), then by score."""
    await get_game_history(db, history_id)
    result = await db.execute(
        select(GameParticipant)
        .where(GameParticipant.game_history_id == history_id)
        .order_by(
            GameParticipant.rank.is_(None),
            GameParticipant.rank.asc(),
            GameParticipant.score.desc(),
        )
    )
    return list(result.scalars().all())


async def get_participant_word_results(db: AsyncSession, participant_id: int) -> List[GameWordResult]:
    result = await db.execute(
        select(GameWordResult)
        .where(GameWordResult.participant_id == participant_id)
        .order_by(GameWordResult.id.asc())
    )
    return list(result.scalars().all())


async def get_game_history_stats(db: AsyncSession) -> GameHistoryStats:
    total_games = (await db.execute(select(func.count(GameHistory.id)))).scalar_one()

    most_played = None
    if total_games > 0:
        # Grouped by the name snapshot alone; rows of a deleted category have
        # no emoji, so it is taken from whichever rows still have one
        play_count = func.count(GameHistory.id).label("play_count")
        row = (await db.execute(
            select(GameHistory.category_name, func.max(Category.emoji).label("emoji"), play_count)
            .outerjoin(Category, GameHistory.category_id == Category.id)
            .group_by(GameHistory.category_name)
            .order_by(play_count.desc(), GameHistory.category_name.asc())
            .limit(1)
        )).first()
        if row:
            most_played = MostPlayedCategory(name=row.category_name, emoji=row.emoji)

    highest_score = (await db.execute(
        select(func.coalesce(func.max(GameParticipant.score), 0))
    )).scalar_one()

    total_play_time = (await db.execute(
        select(func.coalesce(func.sum(GameHistory.total_time_seconds), 0))
    )).scalar_one()

    return GameHistoryStats(
        total_games=total_games,
        most_played_category=most_played,
        highest_score=highest_score,
        total_play_time_seconds=total_play_time,
    )


# ========== Deletion ==========


async def delete_game_history(db: AsyncSession, history_id: int) -> None:
    """Delete one game; its participants and word results go with it."""
    async with unit_of_work(db):
        history = await get_game_history(db, history_id)
        await db.delete(history)
    logger.info(f"🗑️ Deleted game history {history_id}")


async def delete_game_history_bulk(db: AsyncSession, history_ids: List[int]) -> int:
    """Delete several games at once. Returns how many existed."""
    async with unit_of_work(db):
        result = await db.execute(
            delete(GameHistory).where(GameHistory.id.in_(history_ids))
        )
    logger.info(f"🗑️ Deleted {result.rowcount} game history entries")
    return result.rowcount


async def delete_all_game_history(db: AsyncSession) -> int:
    async with unit_of_work(db):
        result = await db.execute(delete(GameHistory))
    logger.info(f"🗑️ Cleared game history ({result.rowcount} entries)")
    return result.rowcount
