"""Redis document store layer.

This module provides:
- Connection pool management
- Repository classes for per-user documents
- Health check utilities
"""

from app.database.connection import (
    check_redis_health,
    close_redis_pool,
    get_redis_client,
    init_redis_pool,
)
from app.database.repositories import (
    RecipeRepository,
    SavedListRepository,
    UserListsRepository,
)


__all__ = [
    "RecipeRepository",
    "SavedListRepository",
    "UserListsRepository",
    "check_redis_health",
    "close_redis_pool",
    "get_redis_client",
    "init_redis_pool",
]
