"""Database unit test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

import app.database.connection as db_module


if TYPE_CHECKING:
    from collections.abc import Generator

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def reset_redis_globals() -> Generator[None]:
    """Reset the module-level pool and client before and after each test."""
    db_module._pool = None
    db_module._client = None
    yield
    db_module._pool = None
    db_module._client = None
