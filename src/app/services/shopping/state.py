"""In-memory shopping list state for a single user.

``ShoppingListState`` is the only place the four user lists change. Every
mutation is a plain synchronous method so it completes without yielding to
the event loop; callers persist a snapshot afterwards with
``to_document()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.schemas.shopping import IngredientEntry, ShoppingListItem, UserListsDocument
from app.services.shopping.aggregation import derive_ingredients
from app.services.shopping.exceptions import ShoppingListIndexError


if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.schemas.recipe import Recipe


def merge_items(items: Iterable[ShoppingListItem]) -> list[ShoppingListItem]:
    """Fold items whose names differ only by case.

    The first casing and position are kept and counts are summed.
    """
    merged: dict[str, ShoppingListItem] = {}
    for item in items:
        key = item.name.casefold()
        existing = merged.get(key)
        if existing is None:
            merged[key] = item.model_copy()
        else:
            merged[key] = existing.model_copy(
                update={"count": existing.count + item.count}
            )
    return list(merged.values())


class ShoppingListState:
    """Selected recipes, derived ingredients, shopping list and favorites."""

    def __init__(self, document: UserListsDocument | None = None) -> None:
        document = document or UserListsDocument()
        self._selected_recipes: list[str] = list(
            dict.fromkeys(document.selected_recipes)
        )
        self._ingredients: list[IngredientEntry] = [
            entry.model_copy() for entry in document.ingredients_list
        ]
        # Older documents may hold case-variant duplicates
        self._items: list[ShoppingListItem] = merge_items(document.shopping_list)
        self._favorites: list[str] = list(dict.fromkeys(document.favorite_list))

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def selected_recipes(self) -> tuple[str, ...]:
        return tuple(self._selected_recipes)

    @property
    def ingredients(self) -> tuple[IngredientEntry, ...]:
        return tuple(self._ingredients)

    @property
    def items(self) -> tuple[ShoppingListItem, ...]:
        return tuple(self._items)

    @property
    def favorites(self) -> tuple[str, ...]:
        return tuple(self._favorites)

    def is_favorite(self, name: str) -> bool:
        return name in self._favorites

    def to_document(self) -> UserListsDocument:
        """Snapshot the state as a persistable document."""
        return UserListsDocument(
            selected_recipes=list(self._selected_recipes),
            ingredients_list=[entry.model_copy() for entry in self._ingredients],
            shopping_list=[item.model_copy() for item in self._items],
            favorite_list=list(self._favorites),
        )

    # ------------------------------------------------------------------
    # Recipe selection and ingredients
    # ------------------------------------------------------------------

    def toggle_recipe(self, recipe_id: str, recipes: Iterable[Recipe]) -> bool:
        """Select or unselect a recipe and recompute the ingredient list.

        Returns:
            True if the recipe is selected after the call.
        """
        if recipe_id in self._selected_recipes:
            self._selected_recipes.remove(recipe_id)
            selected = False
        else:
            self._selected_recipes.append(recipe_id)
            selected = True
        self.refresh_ingredients(recipes)
        return selected

    def refresh_ingredients(self, recipes: Iterable[Recipe]) -> None:
        """Recompute the ingredient list from the current selection."""
        self._ingredients = derive_ingredients(self._selected_recipes, recipes)

    def clear_ingredients(self) -> None:
        """Unselect every recipe and drop the derived ingredients."""
        self._selected_recipes = []
        self._ingredients = []

    # ------------------------------------------------------------------
    # Shopping list
    # ------------------------------------------------------------------

    def add_item(self, name: str) -> ShoppingListItem:
        """Add one unit of ``name``, merging with an entry of the same name.

        Names match ignoring case; the first spelling added is kept.

        Returns:
            The entry after the update.
        """
        return self._merge(name, 1)

    def remove_item(self, index: int) -> ShoppingListItem | None:
        """Take one unit off the entry at ``index``.

        Returns:
            The decremented entry, or None when the entry was removed.

        Raises:
            ShoppingListIndexError: If ``index`` is not a valid position.
        """
        if not 0 <= index < len(self._items):
            raise ShoppingListIndexError(index, len(self._items))

        item = self._items[index]
        if item.count > 1:
            updated = item.model_copy(update={"count": item.count - 1})
            self._items[index] = updated
            return updated

        del self._items[index]
        return None

    def clear_items(self) -> None:
        """Empty the shopping list."""
        self._items = []

    def _merge(self, name: str, count: int) -> ShoppingListItem:
        key = name.casefold()
        for position, item in enumerate(self._items):
            if item.name.casefold() == key:
                updated = item.model_copy(update={"count": item.count + count})
                self._items[position] = updated
                return updated

        created = ShoppingListItem(name=name, count=count)
        self._items.append(created)
        return created

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def toggle_favorite(self, name: str) -> bool:
        """Add ``name`` to favorites or remove it if already there.

        Returns:
            True if ``name`` is a favorite after the call.
        """
        if name in self._favorites:
            self._favorites.remove(name)
            return False
        self._favorites.append(name)
        return True

    def clear_favorites(self) -> None:
        """Empty the favorites."""
        self._favorites = []
