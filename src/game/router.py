from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.game.logic import draft_session, draft_words
from src.game.schemas import DraftRequest, DraftResponse, DraftSessionRequest, DraftSessionResponse
from src.words.schemas import WordResponse

router = APIRouter(prefix="/game", tags=["Game"])


@router.post("/draft", response_model=DraftResponse)
async def draft(
    request: DraftRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Draft the 14 words of one participant.

    Pass the ids already dealt to other participants of the same session
    in `exclude_ids` so no word repeats.
    """
    words = await draft_words(db, request.category_id, request.exclude_ids)
    return DraftResponse(words=[WordResponse.model_validate(word) for word in words])


@router.post("/draft-session", response_model=DraftSessionResponse)
async def draft_for_session(
    request: DraftSessionRequest,
    db: AsyncSession = Depends(get_db)
):
    """Draft words for every participant of a session at once."""
    drafts = await draft_session(db, request.category_id, request.participant_count)
    return DraftSessionResponse(
        drafts=[[WordResponse.model_validate(word) for word in words] for words in drafts]
    )
