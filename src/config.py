"""Application configuration loaded from the environment."""
import os

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Configurations:
    APP_NAME: str = os.getenv("APP_NAME", "Kelime Oyunu API")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./word-game.db")
    DATABASE_ECHO: bool = _as_bool(os.getenv("DATABASE_ECHO", "false"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: list[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:1420,http://127.0.0.1:1420").split(",")
        if origin.strip()
    ]


config = Configurations()
