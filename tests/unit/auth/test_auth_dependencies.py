"""Unit tests for auth dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import HTTPException

from app.auth.dependencies import CurrentUser, get_auth_result, get_current_user
from app.auth.providers import (
    AuthResult,
    HeaderAuthProvider,
    TokenExpiredError,
    TokenInvalidError,
    set_auth_provider,
)
from app.auth.providers import factory as factory_module
from app.observability.logging import clear_context, get_context


if TYPE_CHECKING:
    from collections.abc import Generator


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def reset_provider() -> Generator[None]:
    factory_module._state["provider"] = None
    clear_context()
    yield
    factory_module._state["provider"] = None
    clear_context()


def _provider(**kwargs: object) -> MagicMock:
    provider = MagicMock()
    provider.provider_name = "mock"
    provider.validate_token = AsyncMock(**kwargs)
    return provider


class TestGetAuthResult:
    """Tests for get_auth_result."""

    async def test_passes_token_and_request(self) -> None:
        result = AuthResult(user_id="user-123")
        provider = _provider(return_value=result)
        set_auth_provider(provider)
        request = MagicMock()

        assert await get_auth_result(request, "tok") is result
        provider.validate_token.assert_awaited_once_with("tok", request)

    async def test_missing_token_passed_as_empty(self) -> None:
        provider = _provider(return_value=AuthResult(user_id="u"))
        set_auth_provider(provider)

        await get_auth_result(MagicMock(), None)

        assert provider.validate_token.await_args.args[0] == ""

    async def test_expired_is_401(self) -> None:
        set_auth_provider(_provider(side_effect=TokenExpiredError("expired")))

        with pytest.raises(HTTPException) as exc_info:
            await get_auth_result(MagicMock(), "tok")

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Token has expired"
        assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}

    async def test_invalid_is_401(self) -> None:
        set_auth_provider(_provider(side_effect=TokenInvalidError("Invalid token")))

        with pytest.raises(HTTPException) as exc_info:
            await get_auth_result(MagicMock(), "tok")

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Invalid token"

    async def test_header_provider_end_to_end(self) -> None:
        set_auth_provider(HeaderAuthProvider())
        request = MagicMock()
        request.headers = {}

        with pytest.raises(HTTPException) as exc_info:
            await get_auth_result(request, None)

        assert exc_info.value.status_code == 401


class TestGetCurrentUser:
    """Tests for get_current_user."""

    async def test_builds_user_and_binds_log_context(self) -> None:
        user = await get_current_user(AuthResult(user_id="user-123", roles=["user"]))

        assert user == CurrentUser(id="user-123", roles=["user"])
        assert get_context()["user_id"] == "user-123"
