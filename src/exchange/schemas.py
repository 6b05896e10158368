"""Transfer format for moving a category between stores. Carries no ids."""
from pydantic import BaseModel, Field


class CategoryExportInfo(BaseModel):
    """Category metadata."""
    name: str = Field(..., min_length=1, max_length=100)
    emoji: str = Field("📦", min_length=1, max_length=16)
    description: str | None = None


class WordExportInfo(BaseModel):
    """One word entry. `letter_count` must match the word's real length on import."""
    word: str
    letter_count: int
    hint: str | None = None


class ExchangePayload(BaseModel):
    """A category and its words, ordered by length then alphabetically."""
    category: CategoryExportInfo
    words: list[WordExportInfo] = Field(default_factory=list)


class ImportSummary(BaseModel):
    """Outcome of an import."""
    words_added: int
    words_skipped: int
    message: str
