"""Runtime configuration read from the environment and an optional .env file."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_SYNC_DRIVERS = {
    "sqlite+aiosqlite": "sqlite",
    "postgresql+asyncpg": "postgresql",
}


class Settings(BaseSettings):
    """StackIt settings. Every field maps to an upper-case environment variable."""

    # Application
    app_name: str = Field(default="StackIt", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Auth tokens
    secret_key: str = Field(default="change-me-in-production", alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Store
    database_url: str = Field(default="sqlite:///./stackit.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Voting rules
    allow_self_vote: bool = Field(default=True, alias="ALLOW_SELF_VOTE")
    vote_max_attempts: int = Field(default=3, ge=1, alias="VOTE_MAX_ATTEMPTS")

    # Listing limits
    related_questions_limit: int = Field(default=5, ge=1, le=20, alias="RELATED_QUESTIONS_LIMIT")
    notifications_page_size: int = Field(default=50, ge=1, alias="NOTIFICATIONS_PAGE_SIZE")

    # Browser clients
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def database_url_sync(self) -> str:
        """Return the effective URL with any async driver swapped for its sync twin.

        Alembic and the request path both use blocking drivers.
        """
        url = self.effective_database_url
        for async_driver, sync_driver in _SYNC_DRIVERS.items():
            if url.startswith(async_driver):
                return sync_driver + url[len(async_driver):]
        return url

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides."""
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url


settings = Settings()
