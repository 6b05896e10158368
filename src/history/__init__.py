from src.history.models import GameHistory, GameParticipant, GameWordResult
from src.history.schemas import (
    GameHistoryDetail,
    GameHistoryResponse,
    GameHistoryStats,
    GameParticipantResponse,
    GameSessionData,
    GameWordResultResponse,
    HistoryFilter,
    HistorySort,
    ParticipantData,
    ParticipantType,
    WordOutcome,
    WordResultData,
)

__all__ = [
    # Models
    "GameHistory",
    "GameParticipant",
    "GameWordResult",
    # Schemas - input
    "GameSessionData",
    "ParticipantData",
    "WordResultData",
    "ParticipantType",
    "WordOutcome",
    # Schemas - output
    "GameHistoryResponse",
    "GameHistoryDetail",
    "GameParticipantResponse",
    "GameWordResultResponse",
    "GameHistoryStats",
    "HistoryFilter",
    "HistorySort",
]
