"""Application lifespan event handlers.

This module defines the lifespan context manager that handles:
- Application startup: logging, Redis, auth provider, search client, services
- Application shutdown: drop sessions, close clients and connections
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from app.auth.providers import initialize_auth_provider, shutdown_auth_provider
from app.clients.spoonacular import SpoonacularClient
from app.core.config import Settings, get_settings
from app.database import (
    RecipeRepository,
    SavedListRepository,
    UserListsRepository,
    close_redis_pool,
    get_redis_client,
    init_redis_pool,
)
from app.observability.logging import get_logger, setup_logging
from app.services.recipes import RecipeService
from app.services.saved_lists import SavedListService
from app.services.shopping import ShoppingListExporter, ShoppingListService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

logger = get_logger(__name__)


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize all application services during startup."""
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
        log_file=settings.logging.file,
    )

    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    # Auth is critical - will raise on failure
    await _init_auth(settings)

    # Document store and the services built on it (non-critical at startup)
    await _init_store_services(app, settings)

    # Recipe search (optional - non-critical)
    await _init_recipe_search(app)

    logger.info("Application startup complete")


async def _init_auth(settings: Settings) -> None:
    """Initialize auth provider (critical service)."""
    try:
        await initialize_auth_provider()
        logger.info("Auth provider initialized", mode=settings.auth.mode)
    except Exception:
        logger.exception("Failed to initialize auth provider")
        raise


async def _init_store_services(app: FastAPI, settings: Settings) -> None:
    """Connect to Redis and build the services that persist to it."""
    app.state.recipe_service = None
    app.state.shopping_list_service = None
    app.state.saved_list_service = None

    try:
        await init_redis_pool()
    except Exception:
        logger.exception(
            "Failed to initialize Redis - recipes and shopping lists unavailable"
        )
        return

    client = get_redis_client()
    key_prefix = settings.redis.key_prefix
    recipe_repository = RecipeRepository(client, key_prefix)
    exporter = ShoppingListExporter(settings.exports)

    shopping_list_service = ShoppingListService(
        lists_repository=UserListsRepository(client, key_prefix),
        recipe_repository=recipe_repository,
        exporter=exporter,
    )
    app.state.recipe_service = RecipeService(recipe_repository)
    app.state.shopping_list_service = shopping_list_service
    app.state.saved_list_service = SavedListService(
        repository=SavedListRepository(client, key_prefix),
        shopping_service=shopping_list_service,
        exporter=exporter,
    )
    logger.info("Store-backed services initialized", key_prefix=key_prefix)


async def _init_recipe_search(app: FastAPI) -> None:
    """Initialize the Spoonacular client."""
    try:
        client = SpoonacularClient()
        await client.initialize()
        app.state.recipe_search_client = client
    except Exception:
        logger.exception(
            "Failed to initialize SpoonacularClient - recipe search unavailable"
        )
        app.state.recipe_search_client = None


async def _shutdown(app: FastAPI) -> None:
    """Shutdown all application services."""
    logger.info("Shutting down application")

    shopping_list_service = getattr(app.state, "shopping_list_service", None)
    if shopping_list_service is not None:
        await shopping_list_service.shutdown()

    search_client = getattr(app.state, "recipe_search_client", None)
    if search_client is not None:
        await search_client.shutdown()

    await shutdown_auth_provider()
    await close_redis_pool()

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Resources initialized here live on ``app.state`` for the lifetime of the
    application.
    """
    settings = get_settings()
    await _startup(app, settings)
    yield
    await _shutdown(app)
