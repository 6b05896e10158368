from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.categories import service
from src.categories.schemas import CategoryCreate, CategoryResponse, CategoryUpdate
from src.database import get_db
from src.exchange.schemas import ExchangePayload, ImportSummary
from src.exchange.service import export_category, import_category
from src.game.capacity import check_capacity, check_capacity_for, effective_participants
from src.game.schemas import CapacityForModeResponse, CapacityReport, GameMode

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.post("/", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category: CategoryCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a new category."""
    return await service.create_category(db, category)


@router.get("/", response_model=List[CategoryResponse])
async def list_categories(db: AsyncSession = Depends(get_db)):
    """List all categories, the default one first."""
    return await service.list_categories(db)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Get a category by ID."""
    return await service.get_category(db, category_id)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    category: CategoryUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update a category's name, emoji or description."""
    return await service.update_category(db, category_id, category)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Delete a category and its words. The default category is protected."""
    await service.delete_category(db, category_id)


# ========== Capacity Endpoints ==========


@router.get("/{category_id}/capacity", response_model=CapacityReport)
async def get_capacity(
    category_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Per-bucket word counts and how many participants the category supports."""
    return await check_capacity(db, category_id)


@router.get("/{category_id}/capacity/{mode}", response_model=CapacityForModeResponse)
async def get_capacity_for_mode(
    category_id: int,
    mode: GameMode,
    participant_count: int = Query(1, ge=1, description="Number of players or teams"),
    db: AsyncSession = Depends(get_db)
):
    """
    Whether the category has enough words for the requested game.

    The response carries the participant count actually evaluated, which
    is 1 in single mode whatever was requested.
    """
    playable = await check_capacity_for(db, category_id, mode, participant_count)
    return CapacityForModeResponse(
        category_id=category_id,
        mode=mode,
        participant_count=effective_participants(mode, participant_count),
        playable=playable,
    )


# ========== Import / Export Endpoints ==========


@router.get("/{category_id}/export", response_model=ExchangePayload)
async def export_category_json(
    category_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Export a category and its words without storage ids."""
    return await export_category(db, category_id)


@router.post("/{category_id}/import", response_model=ImportSummary)
async def import_category_json(
    category_id: int,
    payload: ExchangePayload,
    db: AsyncSession = Depends(get_db)
):
    """Import words into a category, skipping invalid and duplicate entries."""
    return await import_category(db, category_id, payload)
