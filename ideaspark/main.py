import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from ideaspark.api.routes import auth, content, health, users
from ideaspark.core import config
from ideaspark.core.error_handlers import register_exception_handlers
from ideaspark.core.logging_config import setup_logging

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


# ============================================
# ✅ STARTUP
# ============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL, config.LOG_DIR)

    if config.SECRET_KEY == config.DEFAULT_SECRET_KEY:
        logger.warning("SECRET_KEY not set - using the development default, tokens are forgeable")

    if config.RUN_MIGRATIONS:
        from ideaspark.db.migrate import run_migrations
        run_migrations(config.DATABASE_URL)
    else:
        from ideaspark.db.init_db import init_db
        init_db()

    logger.info(f"IdeaSpark API started (provider: {config.LLM_PROVIDER})")
    yield


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="IdeaSpark API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Authorization", "Content-Type"],
)

register_exception_handlers(app)


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(content.router)
app.include_router(health.router)

# Generator page at "/", auth page at "/auth.html"; API routes above take precedence
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")
