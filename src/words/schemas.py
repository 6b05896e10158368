from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ========== Word Schemas ==========

class WordBase(BaseModel):
    """Base schema for Word."""
    word: str = Field(..., min_length=1, max_length=20, description="Word text, stored uppercase (e.g. 'KALEM')")
    hint: str | None = Field(None, max_length=500, description="Optional hint shown during play")


class WordCreate(WordBase):
    """Schema for creating a Word."""
    category_id: int = Field(..., gt=0, description="Category ID this word belongs to")


class WordUpdate(WordBase):
    """Schema for updating a Word."""
    pass


class WordResponse(WordBase):
    """Schema for Word response."""
    id: int
    category_id: int
    letter_count: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
