"""Exceptions for the saved shopping list service."""

from __future__ import annotations

from app.services.shopping.exceptions import ShoppingListError


class SavedListError(ShoppingListError):
    """Base exception for saved list errors."""


class EmptyShoppingListError(SavedListError):
    """Raised when saving a shopping list that has no items."""


class SavedListNotFoundError(SavedListError):
    """Raised when a saved list does not exist or belongs to another user."""

    def __init__(self, list_id: str) -> None:
        self.list_id = list_id
        super().__init__(f"Saved shopping list not found: {list_id}")
