from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.categories.models import Category
from src.database import unit_of_work
from src.history.models import GameHistory
from src.logging_config import get_logger
from src.settings.models import Setting
from src.words.models import Word

logger = get_logger(__name__)

DEFAULT_SETTINGS = {
    "sound_enabled": "true",
    "default_time": "300",
    "default_guesses": "3",
    "animation_speed": "normal",
}

RESET_MESSAGE = "Tüm veriler varsayılanlara sıfırlandı. Varsayılan kategori yeni kelimeler için hazır."


async def get_settings(db: AsyncSession) -> dict[str, str]:
    result = await db.execute(select(Setting))
    return {setting.key: setting.value for setting in result.scalars().all()}


async def update_setting(db: AsyncSession, key: str, value: str) -> None:
    """Create or replace one setting."""
    async with unit_of_work(db):
        await db.merge(Setting(key=key, value=value))


async def reset_all_data(db: AsyncSession) -> str:
    """
    Return the store to a freshly installed state in one transaction.

    Deletes every recorded game, every word and every category except the
    default one, which is kept empty. Settings go back to their defaults
    and unknown keys are dropped.
    """
    async with unit_of_work(db):
        await db.execute(delete(GameHistory))
        await db.execute(delete(Word))
        await db.execute(delete(Category).where(Category.is_default.is_(False)))
        await db.execute(delete(Setting).where(Setting.key.notin_(list(DEFAULT_SETTINGS))))

        for key, value in DEFAULT_SETTINGS.items():
            await db.merge(Setting(key=key, value=value))

    logger.warning("♻️ All data reset to defaults")
    return RESET_MESSAGE
