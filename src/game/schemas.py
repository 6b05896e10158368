"""Schemas for capacity checks and word drafts."""
from enum import Enum

from pydantic import BaseModel, Field

from src.words.schemas import WordResponse


class GameMode(str, Enum):
    """Game modes."""
    SINGLE = "single"
    MULTI = "multi"
    TEAM = "team"


class WordCountByLength(BaseModel):
    """Word count of one letter bucket."""
    letter_count: int
    count: int


class CapacityReport(BaseModel):
    """How playable a category is."""
    is_valid: bool
    total_words: int
    words_by_length: list[WordCountByLength]
    max_players_single: int
    max_players_multi: int
    max_teams: int
    message: str


class CapacityForModeResponse(BaseModel):
    """Result of a capacity check for a specific game setup."""
    category_id: int
    mode: GameMode
    participant_count: int
    playable: bool


class DraftRequest(BaseModel):
    """Request to draft one participant's words."""
    category_id: int = Field(..., gt=0)
    exclude_ids: list[int] = Field(default_factory=list, description="Word IDs already dealt in this session")


class DraftSessionRequest(BaseModel):
    """Request to draft words for every participant of a session."""
    category_id: int = Field(..., gt=0)
    participant_count: int = Field(1, ge=1, le=50)


class DraftResponse(BaseModel):
    """14 words, two per length from 4 to 10 letters, shortest first."""
    words: list[WordResponse]


class DraftSessionResponse(BaseModel):
    """One word list per participant, no word repeated across lists."""
    drafts: list[list[WordResponse]]
