"""Database repositories."""

from app.database.repositories.lists import UserListsRepository
from app.database.repositories.recipes import RecipeRepository
from app.database.repositories.saved_lists import SavedListRepository


__all__ = ["RecipeRepository", "SavedListRepository", "UserListsRepository"]
