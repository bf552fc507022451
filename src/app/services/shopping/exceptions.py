"""Exceptions for the shopping list services."""

from __future__ import annotations


class ShoppingListError(Exception):
    """Base exception for shopping list errors."""


class ShoppingListIndexError(ShoppingListError, IndexError):
    """Raised when an item position does not exist in the shopping list."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Item index {index} out of range for list of {length}")


class ShoppingListPersistenceError(ShoppingListError):
    """Raised when the list document could not be written to the store.

    The in-memory state keeps the mutation that triggered the write.
    """

    def __init__(self, user_id: str, message: str) -> None:
        self.user_id = user_id
        super().__init__(message)


class ShoppingListLoadError(ShoppingListError):
    """Raised when the list document could not be read from the store."""

    def __init__(self, user_id: str, message: str) -> None:
        self.user_id = user_id
        super().__init__(message)
