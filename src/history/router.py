from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.game.schemas import GameMode
from src.history import service
from src.history.schemas import (
    BulkDeleteRequest,
    DeleteCountResponse,
    GameHistoryDetail,
    GameHistoryResponse,
    GameHistoryStats,
    GameParticipantResponse,
    GameSessionData,
    GameWordResultResponse,
    HistoryFilter,
    HistorySort,
    RecordSessionResponse,
)

router = APIRouter(prefix="/history", tags=["History"])


@router.post("/", response_model=RecordSessionResponse, status_code=status.HTTP_201_CREATED)
async def record_session(
    session: GameSessionData,
    db: AsyncSession = Depends(get_db)
):
    """Record a finished game with all participants and word results."""
    history_id = await service.record_session(db, session)
    return RecordSessionResponse(id=history_id)


@router.get("/", response_model=List[GameHistoryResponse])
async def list_game_history(
    category_id: int | None = None,
    game_mode: GameMode | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    sort_by: HistorySort = HistorySort.DATE_DESC,
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db)
):
    """List recorded games, filtered and sorted."""
    filters = HistoryFilter(
        category_id=category_id,
        game_mode=game_mode,
        start_date=start_date,
        end_date=end_date,
        sort_by=sort_by,
        limit=limit,
        offset=offset,
    )
    return await service.list_game_history(db, filters)


@router.get("/stats", response_model=GameHistoryStats)
async def get_game_history_stats(db: AsyncSession = Depends(get_db)):
    """Totals across all recorded games."""
    return await service.get_game_history_stats(db)


@router.post("/delete", response_model=DeleteCountResponse)
async def delete_game_history_bulk(
    request: BulkDeleteRequest,
    db: AsyncSession = Depends(get_db)
):
    """Delete several recorded games by id."""
    deleted = await service.delete_game_history_bulk(db, request.ids)
    return DeleteCountResponse(deleted=deleted)


@router.delete("/", response_model=DeleteCountResponse)
async def delete_all_game_history(db: AsyncSession = Depends(get_db)):
    """Delete every recorded game."""
    deleted = await service.delete_all_game_history(db)
    return DeleteCountResponse(deleted=deleted)


@router.get("/participants/{participant_id}/results", response_model=List[GameWordResultResponse])
async def get_participant_word_results(
    participant_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Word-by-word results of one participant, in play order."""
    return await service.get_participant_word_results(db, participant_id)


@router.get("/{history_id}", response_model=GameHistoryDetail)
async def get_game_history(
    history_id: int,
    db: AsyncSession = Depends(get_db)
):
    """A recorded game with its participants and word results."""
    return await service.get_game_history_detail(db, history_id)


@router.get("/{history_id}/participants", response_model=List[GameParticipantResponse])
async def get_game_participants(
    history_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Participants of a recorded game, best rank first."""
    return await service.get_game_participants(db, history_id)


@router.delete("/{history_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game_history(
    history_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Delete a recorded game together with its participants and results."""
    await service.delete_game_history(db, history_id)
