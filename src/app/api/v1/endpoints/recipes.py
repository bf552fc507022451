"""Recipe endpoints.

Provides:
- GET /recipes/search and GET /recipes/search/{spoonacularId} for Spoonacular search
- CRUD on /recipes for recipes owned by the caller
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.api.dependencies import get_recipe_search_client, get_recipe_service
from app.auth.dependencies import CurrentUser, get_current_user
from app.clients.spoonacular import (
    RecipeSearchError,
    RecipeSearchNotFoundError,
    RecipeSearchUnavailableError,
    SpoonacularClient,  # noqa: TC001
)
from app.core.exceptions import (
    NotFoundError,
    ServiceUnavailableError,
    UpstreamError,
)
from app.observability.logging import get_logger
from app.schemas.recipe import (
    Recipe,
    RecipeCreateRequest,
    RecipeDetails,
    RecipeListResponse,
    RecipeSearchPage,
    RecipeUpdateRequest,
)
from app.services.recipes import RecipeService  # noqa: TC001
from app.services.recipes.exceptions import RecipeNotFoundError


logger = get_logger(__name__)

router = APIRouter(tags=["Recipes"])

_RecipeId = Annotated[str, Path(alias="recipeId", description="Recipe identifier")]


# =============================================================================
# Search
# =============================================================================


@router.get(
    "/recipes/search",
    response_model=RecipeSearchPage,
    summary="Search recipes",
    description="Searches Spoonacular recipes by free text with optional cuisine.",
    responses={
        401: {"description": "Authentication required"},
        502: {"description": "Spoonacular returned an error"},
        503: {"description": "Recipe search unavailable or quota exhausted"},
    },
)
async def search_recipes(
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    client: Annotated[SpoonacularClient, Depends(get_recipe_search_client)],
    query: Annotated[str, Query(min_length=1, description="Search text")],
    page: Annotated[int, Query(ge=1, description="1-based page number")] = 1,
    page_size: Annotated[
        int | None,
        Query(alias="pageSize", ge=1, le=100, description="Results per page"),
    ] = None,
    cuisine: Annotated[str, Query(description="Cuisine filter")] = "",
) -> RecipeSearchPage:
    """Search the third-party recipe catalogue."""
    try:
        return await client.search(query, page=page, page_size=page_size, cuisine=cuisine)
    except RecipeSearchUnavailableError as e:
        raise ServiceUnavailableError(f"Recipe search unavailable: {e}") from None
    except RecipeSearchError as e:
        raise UpstreamError(f"Recipe search failed: {e}") from None


@router.get(
    "/recipes/search/{spoonacularId}",
    response_model=RecipeDetails,
    summary="Get search result details",
    responses={
        401: {"description": "Authentication required"},
        404: {"description": "Recipe not found"},
        502: {"description": "Spoonacular returned an error"},
        503: {"description": "Recipe search unavailable or quota exhausted"},
    },
)
async def get_search_result(
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    client: Annotated[SpoonacularClient, Depends(get_recipe_search_client)],
    spoonacular_id: Annotated[int, Path(alias="spoonacularId", ge=1)],
) -> RecipeDetails:
    """Full information for one search result."""
    try:
        return await client.get_details(spoonacular_id)
    except RecipeSearchNotFoundError:
        raise NotFoundError("Recipe", spoonacular_id) from None
    except RecipeSearchUnavailableError as e:
        raise ServiceUnavailableError(f"Recipe search unavailable: {e}") from None
    except RecipeSearchError as e:
        raise UpstreamError(f"Recipe search failed: {e}") from None


# =============================================================================
# User Recipes
# =============================================================================


@router.get(
    "/recipes",
    response_model=RecipeListResponse,
    summary="List my recipes",
    description="Returns the caller's recipes, newest first.",
)
async def list_recipes(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
) -> RecipeListResponse:
    return RecipeListResponse(recipes=await service.list_recipes(user.id))


@router.post(
    "/recipes",
    response_model=Recipe,
    status_code=status.HTTP_201_CREATED,
    summary="Create a recipe",
)
async def create_recipe(
    request_body: RecipeCreateRequest,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
) -> Recipe:
    return await service.create(user.id, request_body)


@router.get(
    "/recipes/{recipeId}",
    response_model=Recipe,
    summary="Get a recipe",
    responses={404: {"description": "Recipe not found"}},
)
async def get_recipe(
    recipe_id: _RecipeId,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
) -> Recipe:
    try:
        return await service.get(user.id, recipe_id)
    except RecipeNotFoundError:
        raise NotFoundError("Recipe", recipe_id) from None


@router.patch(
    "/recipes/{recipeId}",
    response_model=Recipe,
    summary="Update a recipe",
    description="Partial update. Omitted fields keep their current value.",
    responses={404: {"description": "Recipe not found"}},
)
async def update_recipe(
    recipe_id: _RecipeId,
    request_body: RecipeUpdateRequest,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
) -> Recipe:
    try:
        return await service.update(user.id, recipe_id, request_body)
    except RecipeNotFoundError:
        raise NotFoundError("Recipe", recipe_id) from None


@router.delete(
    "/recipes/{recipeId}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a recipe",
    description=(
        "Deletes the recipe. The shopping list is not rewritten; the recipe's "
        "ingredients drop out on the next selection change."
    ),
    responses={404: {"description": "Recipe not found"}},
)
async def delete_recipe(
    recipe_id: _RecipeId,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
) -> Response:
    try:
        await service.delete(user.id, recipe_id)
    except RecipeNotFoundError:
        raise NotFoundError("Recipe", recipe_id) from None
    logger.debug("Recipe deleted", recipe_id=recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
