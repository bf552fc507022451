"""API v1 router aggregating all endpoint routers.

All endpoints are mounted under the configured v1_prefix (default /api/v1).
"""

from __future__ import annotations

from fastapi import APIRouter

from app.api.v1.endpoints import health, recipes, saved_lists, shopping


router = APIRouter()

router.include_router(health.router)
router.include_router(recipes.router)
router.include_router(shopping.router)
router.include_router(saved_lists.router)

# Authentication is handled by the external auth provider.
# Token URL: /oauth/token (see the OpenAPI schema)
