"""Application configuration using Pydantic Settings with YAML support.

This module provides centralized configuration management with:
- YAML-based configuration files organized by domain
- Environment-specific overrides (local, test, development, staging, production)
- Environment variable loading for secrets
- Type validation and coercion
- Caching for performance
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


class AuthMode(StrEnum):
    """Authentication mode configuration.

    Determines how callers are identified:
    - LOCAL_JWT: Validate JWTs issued by the external auth provider locally
    - HEADER: Extract user from X-User-ID header (testing/development only)
    - DISABLED: No authentication required
    """

    LOCAL_JWT = "local_jwt"
    HEADER = "header"
    DISABLED = "disabled"


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Application identity settings."""

    name: str = "Recipe Shopping Service"
    version: str = "0.1.0"
    debug: bool = False


class ServerSettings(BaseModel):
    """Server configuration settings."""

    host: str = "127.0.0.1"
    port: int = 8000


class ApiSettings(BaseModel):
    """API configuration settings."""

    v1_prefix: str = "/api/v1"
    cors_origins: list[str] = []


class JwtSettings(BaseModel):
    """JWT token settings."""

    algorithm: str = "HS256"
    issuer: str | None = None
    audience: list[str] = []


class AuthHeaderSettings(BaseModel):
    """Header-based auth settings."""

    user_id: str = "X-User-ID"
    roles: str = "X-User-Roles"


class AuthSettings(BaseModel):
    """Authentication configuration settings."""

    mode: str = "local_jwt"
    jwt: JwtSettings = JwtSettings()
    headers: AuthHeaderSettings = AuthHeaderSettings()


class RedisSettings(BaseModel):
    """Redis document store settings."""

    host: str = "localhost"
    port: int = 6379
    user: str | None = None  # Redis ACL username (Redis 6.0+)
    db: int = 0
    max_connections: int = 20
    key_prefix: str = "recipes-app"


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"
    file: str | None = None


class MetricsSettings(BaseModel):
    """Metrics configuration settings."""

    enabled: bool = True


class ObservabilitySettings(BaseModel):
    """Observability configuration settings."""

    metrics: MetricsSettings = MetricsSettings()


class RecipeSearchSettings(BaseModel):
    """Spoonacular recipe search client settings."""

    base_url: str = "https://api.spoonacular.com"
    timeout: float = 10.0
    default_page_size: int = 10
    max_page_size: int = 100


class ExportSettings(BaseModel):
    """Shopping list export settings."""

    title: str = "Shopping List"
    filename_stem: str = "shopping_list"
    image_width: int = 640
    image_font_size: int = 18


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Application settings with YAML + environment variable support.

    Configuration is loaded from multiple sources with the following priority
    (highest to lowest):
    1. Environment variables
    2. .env file (secrets only)
    3. Environment-specific YAML files (config/environments/{APP_ENV}/)
    4. Base YAML files (config/base/)
    5. Default values in code

    Environment variables can override any setting using the nested delimiter '__'.
    For example: REDIS__HOST=prod-redis overrides redis.host.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    server: ServerSettings = ServerSettings()
    api: ApiSettings = ApiSettings()
    auth: AuthSettings = AuthSettings()
    redis: RedisSettings = RedisSettings()
    logging: LoggingSettings = LoggingSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
    recipe_search: RecipeSearchSettings = RecipeSearchSettings()
    exports: ExportSettings = ExportSettings()

    # =========================================================================
    # Secrets (from .env only - never in YAML)
    # =========================================================================
    JWT_SECRET_KEY: str = ""
    REDIS_PASSWORD: str = ""
    SPOONACULAR_API_KEY: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings loading order.

        Priority (highest to lowest):
        1. init_settings - Values passed to Settings()
        2. env_settings - Environment variables
        3. dotenv_settings - .env file (secrets)
        4. yaml_settings - YAML files (base + environment)
        5. file_secret_settings - Docker secrets
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @property
    def auth_mode_enum(self) -> AuthMode:
        """Get auth mode as enum with validation."""
        try:
            return AuthMode(self.auth.mode.lower())
        except ValueError:
            msg = (
                f"Invalid auth mode: {self.auth.mode}. "
                f"Must be one of: {', '.join(m.value for m in AuthMode)}"
            )
            raise ValueError(msg) from None

    @property
    def redis_url(self) -> str:
        """Build Redis connection URL with optional authentication.

        URL format: redis://[user:password@]host:port/db
        """
        auth_part = ""
        if self.redis.user and self.REDIS_PASSWORD:
            auth_part = f"{self.redis.user}:{self.REDIS_PASSWORD}@"
        elif self.REDIS_PASSWORD:
            auth_part = f":{self.REDIS_PASSWORD}@"
        elif self.redis.user:
            auth_part = f"{self.redis.user}@"

        return f"redis://{auth_part}{self.redis.host}:{self.redis.port}/{self.redis.db}"

    # =========================================================================
    # Environment Helpers
    # =========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_non_production(self) -> bool:
        """Check if API docs and verbose errors should be enabled."""
        return self.APP_ENV in ("local", "test", "development")

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.APP_ENV == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Using lru_cache ensures settings are only loaded once,
    improving performance and consistency.
    """
    return Settings()
