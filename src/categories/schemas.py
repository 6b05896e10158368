from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ========== Category Schemas ==========

class CategoryBase(BaseModel):
    """Base schema for Category."""
    name: str = Field(..., min_length=1, max_length=100, description="Display name (e.g. 'Hayvanlar')")
    emoji: str = Field("📦", min_length=1, max_length=16, description="Icon shown next to the name")
    description: str | None = Field(None, max_length=500, description="Optional description")


class CategoryCreate(CategoryBase):
    """Schema for creating a Category."""
    pass


class CategoryUpdate(BaseModel):
    """Schema for updating a Category."""
    name: str | None = Field(None, min_length=1, max_length=100, description="Display name")
    emoji: str | None = Field(None, min_length=1, max_length=16, description="Icon")
    description: str | None = Field(None, max_length=500, description="Optional description")


class CategoryResponse(CategoryBase):
    """Schema for Category response."""
    id: int
    is_default: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
