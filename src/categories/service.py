"""Category catalog operations."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.categories.models import Category
from src.categories.schemas import CategoryCreate, CategoryUpdate
from src.database import unit_of_work
from src.errors import NotFoundError, ValidationFailedError
from src.logging_config import get_logger

logger = get_logger(__name__)


async def get_category(db: AsyncSession, category_id: int) -> Category:
    """Fetch a category or raise NotFoundError."""
    result = await db.execute(select(Category).where(Category.id == category_id))
    category = result.scalar_one_or_none()

    if not category:
        raise NotFoundError("Kategori bulunamadı")

    return category


async def category_exists(db: AsyncSession, category_id: int) -> bool:
    result = await db.execute(select(Category.id).where(Category.id == category_id))
    return result.scalar_one_or_none() is not None


async def list_categories(db: AsyncSession) -> list[Category]:
    """All categories, the default one first, then by name."""
    result = await db.execute(
        select(Category).order_by(Category.is_default.desc(), Category.name.asc())
    )
    return list(result.scalars().all())


async def create_category(db: AsyncSession, data: CategoryCreate) -> Category:
    db_category = Category(
        name=data.name,
        emoji=data.emoji,
        description=data.description,
        is_default=False,
    )
    async with unit_of_work(db):
        db.add(db_category)

    await db.refresh(db_category)
    logger.info(f"📁 Created category {db_category.id} '{db_category.name}'")
    return db_category


async def update_category(db: AsyncSession, category_id: int, data: CategoryUpdate) -> Category:
    async with unit_of_work(db):
        db_category = await get_category(db, category_id)

        for field, value in data.model_dump(exclude_unset=True).items():
            if field in ("name", "emoji") and value is None:
                continue
            setattr(db_category, field, value)

    await db.refresh(db_category)
    return db_category


async def delete_category(db: AsyncSession, category_id: int) -> None:
    """
    Delete a category and, through the cascade, all of its words.

    History rows keep their category name snapshot; their category
    reference is cleared by the store.
    """
    async with unit_of_work(db):
        db_category = await get_category(db, category_id)

        if db_category.is_default:
            logger.warning(f"🚫 Refused to delete default category {category_id}")
            raise ValidationFailedError("Varsayılan kategori silinemez")

        await db.delete(db_category)

    logger.info(f"🗑️ Deleted category {category_id}")
