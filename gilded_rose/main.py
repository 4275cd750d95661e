"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from gilded_rose.api.health import router as health_router
from gilded_rose.api.inventory import router as inventory_router
from gilded_rose.config import settings
from gilded_rose.core.logging import get_logger, setup_logging
from gilded_rose.services.inventory_service import InventoryService

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Initializing InventoryService...")
    app.state.inventory_service = InventoryService()
    logger.info("InventoryService initialized (seed=%s).", settings.SEED_ITEMS_PATH)

    yield

    logger.info("Shutting down...")


app = FastAPI(title="Gilded Rose", debug=settings.DEBUG, lifespan=lifespan)

app.include_router(health_router)
app.include_router(inventory_router)
