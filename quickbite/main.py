"""
Application entry point.
Run with:  uvicorn quickbite.main:app --reload

The starter menu is seeded on startup while the table is empty
(see quickbite/db/seeder.py). Set SEED_ON_STARTUP=false to disable it.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quickbite.core.logging_config import configure_logging
from quickbite.core.config import settings
from quickbite.core.exceptions import register_exception_handlers
from quickbite.api.v1.router import api_router
from quickbite.db.database import dispose_engine, init_db
from quickbite.db.seeder import seed_menu_items

configure_logging()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""
    logger = logging.getLogger(__name__)
    logger.info("Starting FastAPI application setup")
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        description="REST API for managing QuickBite restaurant menu items.",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ── Middleware ──────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Error handling ──────────────────────────────────────────────────────
    register_exception_handlers(app)

    # ── Routers ─────────────────────────────────────────────────────────────
    app.include_router(api_router)

    # ── Startup / shutdown events ───────────────────────────────────────────
    @app.on_event("startup")
    async def on_startup() -> None:
        """Create the schema and seed the starter menu."""
        logger.info("Initializing database and seed data")
        await init_db()
        if settings.SEED_ON_STARTUP:
            await seed_menu_items()

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        await dispose_engine()

    return app


app = create_app()
