"""FastAPI dependencies for service access.

Services are initialized during application startup and stored in
``app.state``. A service missing from state means its backing store or
client failed to start, which is reported as 503.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import Request

from app.core.exceptions import ServiceUnavailableError


if TYPE_CHECKING:
    from app.clients.spoonacular import SpoonacularClient
    from app.services.recipes import RecipeService
    from app.services.saved_lists import SavedListService
    from app.services.shopping import ShoppingListService


def _from_state(request: Request, name: str, description: str) -> Any:
    service = getattr(request.app.state, name, None)
    if service is None:
        msg = f"{description} not available"
        raise ServiceUnavailableError(msg)
    return service


async def get_recipe_service(request: Request) -> RecipeService:
    """Get the recipe service from app state.

    Raises:
        ServiceUnavailableError: If the document store did not start.
    """
    service: RecipeService = _from_state(request, "recipe_service", "Recipe storage")
    return service


async def get_shopping_list_service(request: Request) -> ShoppingListService:
    """Get the shopping list service from app state.

    Raises:
        ServiceUnavailableError: If the document store did not start.
    """
    service: ShoppingListService = _from_state(
        request, "shopping_list_service", "Shopping list storage"
    )
    return service


async def get_saved_list_service(request: Request) -> SavedListService:
    """Get the saved shopping list service from app state.

    Raises:
        ServiceUnavailableError: If the document store did not start.
    """
    service: SavedListService = _from_state(
        request, "saved_list_service", "Saved shopping list storage"
    )
    return service


async def get_recipe_search_client(request: Request) -> SpoonacularClient:
    """Get the Spoonacular client from app state.

    Raises:
        ServiceUnavailableError: If the client is not initialized.
    """
    client: SpoonacularClient = _from_state(
        request, "recipe_search_client", "Recipe search"
    )
    return client
