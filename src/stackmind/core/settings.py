"""Application settings and configuration.

This module defines all configuration options for the StackMind API.
Settings are loaded from environment variables with sensible defaults.
"""

from urllib.parse import quote_plus

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="StackMind API", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    api_prefix: str = Field(default="", alias="API_PREFIX")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")

    # Session tokens
    secret_key: str = Field(alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_days: int = Field(default=7, alias="ACCESS_TOKEN_EXPIRE_DAYS")
    session_cookie_name: str = Field(default="token", alias="SESSION_COOKIE_NAME")
    cookie_secure: bool = Field(default=True, alias="COOKIE_SECURE")
    cookie_samesite: str = Field(default="none", alias="COOKIE_SAMESITE")

    # MongoDB configuration
    mongodb_url: str | None = Field(default=None, alias="MONGODB_URL")
    db_user: str | None = Field(default=None, alias="DB_USER")
    db_pass: str | None = Field(default=None, alias="DB_PASS")
    db_cluster: str = Field(default="cluster0.mongodb.net", alias="DB_CLUSTER")
    db_app_name: str = Field(default="Cluster0", alias="DB_APP_NAME")
    database_name: str = Field(default="StackMind", alias="DATABASE_NAME")
    mongo_timeout_ms: int = Field(default=5000, alias="MONGO_TIMEOUT_MS")

    # Listing limits
    recent_posts_limit: int = Field(default=6, alias="RECENT_POSTS_LIMIT")
    featured_posts_limit: int = Field(default=10, alias="FEATURED_POSTS_LIMIT")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["http://localhost:5173"],
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
    def effective_mongodb_url(self) -> str:
        """Return the MongoDB connection string.

        An explicit ``MONGODB_URL`` wins. Otherwise an Atlas SRV URI is built
        from ``DB_USER``/``DB_PASS``/``DB_CLUSTER``, falling back to a local
        server when no credentials are configured.

        Returns:
            Connection string suitable for ``pymongo.MongoClient``
        """
        if self.mongodb_url:
            return self.mongodb_url
        if self.db_user and self.db_pass:
            return (
                f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
                f"@{self.db_cluster}/?retryWrites=true&w=majority&appName={self.db_app_name}"
            )
        return "mongodb://localhost:27017"

    @property
    def access_token_max_age(self) -> int:
        """Return the session lifetime in seconds."""
        return self.access_token_expire_days * 24 * 60 * 60


settings = Settings()  # type: ignore[call-arg]
