from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.history.schemas import GameSessionData


def make_word(length: int, index: int) -> str:
    """A unique A-Z word of the given length for each index."""
    letters = []
    for _ in range(length):
        letters.append(chr(ord("A") + index % 26))
        index //= 26
    return "".join(letters)


async def count_rows(session: AsyncSession, model) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


def build_session_data(category_id, category_name="Test", participants=2, words_each=14, mode="multi"):
    """A finished game with `participants` players and `words_each` results each."""
    return GameSessionData.model_validate({
        "category_id": category_id,
        "category_name": category_name,
        "game_mode": mode,
        "played_at": datetime(2026, 3, 1, 14, 30),
        "total_time_seconds": 420,
        "participants": [
            {
                "name": f"Oyuncu {p + 1}",
                "participant_type": "player",
                "score": 100 * (p + 1),
                "words_found": words_each - 1,
                "words_skipped": 1,
                "letters_revealed": 3,
                "rank": participants - p,
                "word_results": [
                    {
                        "word": make_word(4 + w // 2, p * 100 + w),
                        "word_hint": f"ipucu {w}",
                        "result": "skipped" if w == 0 else "found",
                        "points_earned": 0 if w == 0 else 100 - w,
                        "letters_used": w % 3,
                    }
                    for w in range(words_each)
                ],
            }
            for p in range(participants)
        ],
    })
