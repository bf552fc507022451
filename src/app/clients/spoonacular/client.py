"""Spoonacular recipe search HTTP client.

This module provides an async HTTP client for the Spoonacular
``complexSearch`` and ``information`` endpoints.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import orjson

from app.clients.spoonacular.exceptions import (
    RecipeSearchNotFoundError,
    RecipeSearchQuotaError,
    RecipeSearchResponseError,
    RecipeSearchTimeoutError,
    RecipeSearchUnavailableError,
)
from app.clients.spoonacular.schemas import (
    SpoonacularRecipeInformation,
    SpoonacularSearchResponse,
)
from app.core.config import get_settings
from app.mappers import build_recipe_details, build_search_page
from app.observability.logging import get_logger


if TYPE_CHECKING:
    from app.schemas.recipe import RecipeDetails, RecipeSearchPage

logger = get_logger(__name__)


class SpoonacularClient:
    """HTTP client for the Spoonacular recipe API.

    Example:
        ```python
        client = SpoonacularClient()
        await client.initialize()

        page = await client.search("pasta", page=2, page_size=10)

        await client.shutdown()
        ```
    """

    def __init__(self) -> None:
        """Initialize the client."""
        self._settings = get_settings()
        self._http_client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._settings.recipe_search.base_url.rstrip("/")

    async def initialize(self) -> None:
        """Initialize HTTP client."""
        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.recipe_search.timeout),
            headers={"Accept": "application/json"},
        )
        if not self._settings.SPOONACULAR_API_KEY:
            logger.warning("SPOONACULAR_API_KEY not set, recipe search disabled")
        logger.info("SpoonacularClient initialized", base_url=self.base_url)

    async def shutdown(self) -> None:
        """Release resources."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None
        logger.debug("SpoonacularClient shutdown")

    async def search(
        self,
        query: str,
        page: int = 1,
        page_size: int | None = None,
        cuisine: str = "",
    ) -> RecipeSearchPage:
        """Search recipes by free text.

        Args:
            query: Search text.
            page: 1-based page number.
            page_size: Results per page. Defaults to the configured size and
                is capped at the configured maximum.
            cuisine: Optional cuisine filter, passed through as-is.

        Returns:
            One page of search results.

        Raises:
            RecipeSearchUnavailableError: If Spoonacular is unreachable, the
                quota is exhausted or no API key is configured.
            RecipeSearchResponseError: For other HTTP errors.
        """
        settings = self._settings.recipe_search
        number = min(page_size or settings.default_page_size, settings.max_page_size)
        params: dict[str, Any] = {
            "query": query,
            "number": number,
            "offset": (max(page, 1) - 1) * number,
            "cuisine": cuisine,
        }

        logger.debug("Searching recipes", query=query, page=page, number=number)
        data = await self._get("/recipes/complexSearch", params)
        return build_search_page(SpoonacularSearchResponse.model_validate(data))

    async def get_details(self, recipe_id: int) -> RecipeDetails:
        """Fetch full information for one recipe.

        Raises:
            RecipeSearchNotFoundError: If the recipe does not exist.
            RecipeSearchUnavailableError: If Spoonacular cannot be used.
            RecipeSearchResponseError: For other HTTP errors.
        """
        logger.debug("Fetching recipe details", recipe_id=recipe_id)
        data = await self._get(f"/recipes/{recipe_id}/information", {})
        return build_recipe_details(SpoonacularRecipeInformation.model_validate(data))

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        if not self._http_client:
            msg = "Client not initialized. Call initialize() first."
            raise RuntimeError(msg)

        api_key = self._settings.SPOONACULAR_API_KEY
        if not api_key:
            msg = "Recipe search is not configured"
            raise RecipeSearchUnavailableError(msg)

        url = f"{self.base_url}{path}"
        try:
            response = await self._http_client.get(
                url,
                params={"apiKey": api_key, **params},
            )
        except httpx.TimeoutException as e:
            logger.warning("Request to Spoonacular timed out", path=path)
            raise RecipeSearchTimeoutError(str(e)) from e
        except httpx.RequestError as e:
            logger.warning("Failed to connect to Spoonacular", error=str(e))
            msg = f"Failed to connect to Spoonacular: {e}"
            raise RecipeSearchUnavailableError(msg) from e

        if response.status_code == 200:
            return orjson.loads(response.content)

        self._handle_error_response(response, path)
        return None

    @staticmethod
    def _handle_error_response(response: httpx.Response, path: str) -> None:
        """Handle error responses from Spoonacular.

        Raises:
            RecipeSearchQuotaError: For 402 responses.
            RecipeSearchNotFoundError: For 404 responses.
            RecipeSearchResponseError: For other error responses.
        """
        status_code = response.status_code

        try:
            message = orjson.loads(response.content).get("message", "Unknown error")
        except (orjson.JSONDecodeError, AttributeError):
            message = response.text or f"HTTP {status_code}"

        logger.warning(
            "Spoonacular returned error",
            path=path,
            status_code=status_code,
            message=message,
        )

        if status_code == 402:
            raise RecipeSearchQuotaError(message)
        if status_code == 404:
            raise RecipeSearchNotFoundError(message)
        raise RecipeSearchResponseError(status_code, message)
