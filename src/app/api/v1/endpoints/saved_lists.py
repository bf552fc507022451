"""Saved shopping list endpoints.

Provides:
- POST /saved-shopping-lists to snapshot the current shopping list
- GET /saved-shopping-lists for the caller's saved lists, newest first
- PUT/DELETE /saved-shopping-lists/{listId} to edit or remove a saved list
- GET /saved-shopping-lists/{listId}/export/{format} for downloads
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.api.dependencies import get_saved_list_service
from app.api.responses import download_response
from app.auth.dependencies import CurrentUser, get_current_user
from app.core.exceptions import (
    BadRequestError,
    ConfirmationRequiredError,
    NotFoundError,
    ServiceUnavailableError,
)
from app.schemas.enums import ExportFormat
from app.schemas.shopping import (
    SavedShoppingList,
    SavedShoppingListsResponse,
    SavedShoppingListUpdateRequest,
)
from app.services.saved_lists import SavedListService  # noqa: TC001
from app.services.saved_lists.exceptions import (
    EmptyShoppingListError,
    SavedListNotFoundError,
)
from app.services.shopping.exceptions import ShoppingListLoadError


router = APIRouter(prefix="/saved-shopping-lists", tags=["Saved Shopping Lists"])

_ListId = Annotated[str, Path(alias="listId", description="Saved list identifier")]


@router.post(
    "",
    response_model=SavedShoppingList,
    status_code=status.HTTP_201_CREATED,
    summary="Save the current shopping list",
    responses={
        400: {"description": "The shopping list is empty"},
        401: {"description": "Authentication required"},
    },
)
async def save_shopping_list(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[SavedListService, Depends(get_saved_list_service)],
) -> SavedShoppingList:
    try:
        return await service.save_current(user.id)
    except EmptyShoppingListError as e:
        raise BadRequestError(str(e)) from None
    except ShoppingListLoadError:
        raise ServiceUnavailableError("Shopping list could not be loaded") from None


@router.get(
    "",
    response_model=SavedShoppingListsResponse,
    summary="List saved shopping lists",
    description="Returns the caller's saved lists, newest first.",
)
async def list_saved_shopping_lists(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[SavedListService, Depends(get_saved_list_service)],
) -> SavedShoppingListsResponse:
    return SavedShoppingListsResponse(lists=await service.list_saved(user.id))


@router.put(
    "/{listId}",
    response_model=SavedShoppingList,
    summary="Replace the items of a saved list",
    responses={404: {"description": "Saved list not found"}},
)
async def update_saved_shopping_list(
    list_id: _ListId,
    request_body: SavedShoppingListUpdateRequest,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[SavedListService, Depends(get_saved_list_service)],
) -> SavedShoppingList:
    try:
        return await service.update_items(user.id, list_id, request_body.items)
    except SavedListNotFoundError:
        raise NotFoundError("Saved shopping list", list_id) from None


@router.delete(
    "/{listId}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a saved list",
    responses={
        400: {"description": "Confirmation missing"},
        404: {"description": "Saved list not found"},
    },
)
async def delete_saved_shopping_list(
    list_id: _ListId,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[SavedListService, Depends(get_saved_list_service)],
    confirm: Annotated[
        bool, Query(description="Must be true to delete the saved list")
    ] = False,
) -> Response:
    if not confirm:
        raise ConfirmationRequiredError("delete saved shopping list")
    try:
        await service.delete(user.id, list_id)
    except SavedListNotFoundError:
        raise NotFoundError("Saved shopping list", list_id) from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{listId}/export/{format}",
    summary="Export a saved list",
    description="Downloads the saved list as shopping_list_<listId>.<format>.",
    response_class=Response,
    responses={
        200: {"description": "The exported file as an attachment"},
        404: {"description": "Saved list not found"},
    },
)
async def export_saved_shopping_list(
    list_id: _ListId,
    fmt: Annotated[ExportFormat, Path(alias="format")],
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[SavedListService, Depends(get_saved_list_service)],
) -> Response:
    try:
        result = await service.export(user.id, list_id, fmt)
    except SavedListNotFoundError:
        raise NotFoundError("Saved shopping list", list_id) from None
    return download_response(result)
