from src.words.models import Word
from src.words.schemas import (
    WordBase,
    WordCreate,
    WordResponse,
    WordUpdate,
)

__all__ = [
    # Models
    "Word",
    # Schemas
    "WordBase",
    "WordCreate",
    "WordUpdate",
    "WordResponse",
]
