"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lighthouse.config import settings
from lighthouse.db.database import engine, Base
from lighthouse.utils.logger import setup_logger

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables (dev only; production schema is managed by the host)
    import lighthouse.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Slot catalog started ({settings.APP_ENV})")
    yield
    # Shutdown: close connections
    await engine.dispose()


app = FastAPI(
    title="Lighthouse Slot Catalog",
    description="Level catalog for a level-sharing game server: slot listing, filters and statistics",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Routes ---
from lighthouse.api.routes import slots  # noqa: E402

app.include_router(slots.router, prefix="/api/slots", tags=["slots"])


@app.get("/health")
async def health_check():
    return {"status": "ok"}
