from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from src.game.schemas import GameMode


class ParticipantType(str, Enum):
    """Who played: a single player or a team."""
    PLAYER = "player"
    TEAM = "team"


class WordOutcome(str, Enum):
    """How a word ended."""
    FOUND = "found"
    SKIPPED = "skipped"
    TIMEOUT = "timeout"


class HistorySort(str, Enum):
    """Sort orders for the history list."""
    DATE_DESC = "date_desc"
    DATE_ASC = "date_asc"
    SCORE_DESC = "score_desc"


# ========== Session input ==========

class WordResultData(BaseModel):
    """Result of one word, as played."""
    word: str = Field(..., min_length=1, max_length=20)
    word_hint: str | None = Field(None, max_length=500)
    result: WordOutcome
    points_earned: int = Field(0, description="May be zero or negative")
    letters_used: int = Field(0, ge=0, description="Letters revealed for this word")


class ParticipantData(BaseModel):
    """A player or team with their word results, in play order."""
    name: str = Field(..., min_length=1, max_length=100)
    participant_type: ParticipantType
    score: int = 0
    words_found: int = Field(0, ge=0)
    words_skipped: int = Field(0, ge=0)
    letters_revealed: int = Field(0, ge=0)
    rank: int | None = Field(None, ge=1)
    word_results: list[WordResultData] = Field(default_factory=list)


class GameSessionData(BaseModel):
    """A finished game ready to be recorded."""
    category_id: int | None = Field(None, gt=0)
    category_name: str = Field(..., min_length=1, max_length=100)
    game_mode: GameMode
    played_at: datetime
    total_time_seconds: int | None = Field(None, ge=0)
    participants: list[ParticipantData] = Field(..., min_length=1)


class RecordSessionResponse(BaseModel):
    """ID of the recorded history entry."""
    id: int


# ========== Stored history ==========

class GameWordResultResponse(BaseModel):
    id: int
    game_history_id: int
    participant_id: int
    word: str
    word_hint: str | None
    result: WordOutcome
    points_earned: int
    letters_used: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GameParticipantResponse(BaseModel):
    id: int
    game_history_id: int
    participant_name: str
    participant_type: ParticipantType
    score: int
    words_found: int
    words_skipped: int
    letters_revealed: int
    rank: int | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GameParticipantDetail(GameParticipantResponse):
    word_results: list[GameWordResultResponse] = []


class GameHistoryResponse(BaseModel):
    id: int
    category_id: int | None
    category_name: str
    game_mode: GameMode
    played_at: datetime
    total_time_seconds: int | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GameHistoryDetail(GameHistoryResponse):
    """History entry with participants and their word results."""
    participants: list[GameParticipantDetail] = []


class HistoryFilter(BaseModel):
    """Optional filters, sort order and page for the history list."""
    category_id: int | None = None
    game_mode: GameMode | None = None
    start_date: date | None = None
    end_date: date | None = None
    sort_by: HistorySort = HistorySort.DATE_DESC
    limit: int = Field(50, ge=1, le=500)
    offset: int = Field(0, ge=0)


class MostPlayedCategory(BaseModel):
    name: str
    emoji: str | None = None


class GameHistoryStats(BaseModel):
    total_games: int
    most_played_category: MostPlayedCategory | None
    highest_score: int
    total_play_time_seconds: int


class BulkDeleteRequest(BaseModel):
    ids: list[int] = Field(..., min_length=1)


class DeleteCountResponse(BaseModel):
    deleted: int
