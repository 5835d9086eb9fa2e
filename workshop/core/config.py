"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, with no scattered magic strings.
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix mounted in front of every router.
        repository_backend: Which PersonRepository adapter to wire.
        database_url: SQLAlchemy URL used by the SQL backend.
        database_create_schema: Create the person table at startup.
            The migration tool owns the schema in production.
        rate_limit_enabled: Toggle per-client rate limiting.
        rate_limit_default: Default rate limit for all endpoints.
        cors_allowed_origins: Origins allowed by CORS. Empty disables CORS.
        auth_enabled: Require a bearer token on the people routes.
        auth_jwt_key: Secret or PEM public key that signs issued tokens.
        auth_algorithms: Accepted token signing algorithms.
        auth_audience: Expected `aud` claim, if any.
        auth_issuer: Expected `iss` claim, if any.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Person Workshop"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = ""

    repository_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite:///./workshop.db"
    database_create_schema: bool = False

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    cors_allowed_origins: list[str] = []

    auth_enabled: bool = False
    auth_jwt_key: Optional[str] = None
    auth_algorithms: list[str] = ["RS256"]
    auth_audience: Optional[str] = None
    auth_issuer: Optional[str] = None


settings = Settings()
