from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.categories.router import router as categories_router
from src.config import config
from src.database import async_session_maker, init_db
from src.errors import AppError
from src.game.router import router as game_router
from src.history.router import router as history_router
from src.logging_config import setup_logging, get_logger
from src.seed import seed_database
from src.settings.router import router as settings_router
from src.words.router import router as words_router

# Initialize logging
setup_logging(config.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed the default category on startup."""
    await init_db()

    async with async_session_maker() as session:
        await seed_database(session)

    yield


app = FastAPI(
    title=config.APP_NAME,
    description="API for the word game catalog, word drafts and game history",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Render service errors as {"error": kind, "message": ...}."""
    if exc.status_code >= 500:
        logger.error(f"❌ {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Include routers
app.include_router(categories_router)
app.include_router(words_router)
app.include_router(game_router)
app.include_router(history_router)
app.include_router(settings_router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
