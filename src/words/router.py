from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.categories.service import get_category
from src.database import get_db
from src.words import service
from src.words.schemas import WordCreate, WordResponse, WordUpdate

router = APIRouter(prefix="/words", tags=["Words"])


@router.post("/", response_model=WordResponse, status_code=status.HTTP_201_CREATED)
async def create_word(
    word: WordCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a new word. The text is stored uppercase with its letter count."""
    return await service.insert_word(db, word.category_id, word.word, word.hint)


@router.get("/", response_model=List[WordResponse])
async def list_words(
    category_id: int,
    db: AsyncSession = Depends(get_db)
):
    """List the words of a category ordered by length, then alphabetically."""
    await get_category(db, category_id)
    return await service.list_words_by_category(db, category_id)


@router.get("/{word_id}", response_model=WordResponse)
async def get_word(
    word_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Get a word by ID."""
    return await service.get_word(db, word_id)


@router.put("/{word_id}", response_model=WordResponse)
async def update_word(
    word_id: int,
    word: WordUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Replace a word's text and hint."""
    return await service.update_word(db, word_id, word.word, word.hint)


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_word(
    word_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Delete a word."""
    await service.delete_word(db, word_id)
