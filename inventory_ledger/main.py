"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from inventory_ledger.config import settings, configure_logging
from inventory_ledger.ledger import InventoryLedger
from inventory_ledger.routes import products, warehouses

logger = logging.getLogger(__name__)


def create_app(ledger: Optional[InventoryLedger] = None) -> FastAPI:
    """Build the application around ``ledger`` (the configured database by default)."""
    if ledger is None:
        ledger = InventoryLedger.from_url(settings.DATABASE_URL, echo=settings.DEBUG)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        app.state.ledger.create_all()
        logger.info("Inventory ledger ready")
        yield
        app.state.ledger.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Warehouse and product inventory ledger with per-warehouse credentials",
        lifespan=lifespan,
    )
    app.state.ledger = ledger

    # Include routers
    app.include_router(warehouses.router, prefix="/api")
    app.include_router(products.router, prefix="/api")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
