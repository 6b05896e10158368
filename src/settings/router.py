from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.settings import service

router = APIRouter(prefix="/settings", tags=["Settings"])


class SettingUpdate(BaseModel):
    """Schema for updating a setting."""
    value: str = Field(..., max_length=500)


class ResetResponse(BaseModel):
    message: str


@router.get("/", response_model=dict[str, str])
async def get_settings(db: AsyncSession = Depends(get_db)):
    """All application settings."""
    return await service.get_settings(db)


@router.post("/reset", response_model=ResetResponse)
async def reset_all_data(db: AsyncSession = Depends(get_db)):
    """
    Delete all games, words and non-default categories and restore the
    default settings. The default category is kept, without words.
    """
    message = await service.reset_all_data(db)
    return ResetResponse(message=message)


@router.put("/{key}", response_model=dict[str, str])
async def update_setting(
    key: str,
    setting: SettingUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Create or replace a setting and return all settings."""
    await service.update_setting(db, key, setting.value)
    return await service.get_settings(db)
