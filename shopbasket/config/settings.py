import json
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

KNOWN_DECORATORS = ("bundle", "category", "select", "stock")


class Settings(BaseSettings):
    """
    Basket core configuration loaded from environment variables (and `.env`).
    """

    # Order rate limiting (denial of service mitigation)
    BASKET_LIMIT_COUNT: int = Field(5, description="Maximum number of orders within the time frame")
    BASKET_LIMIT_SECONDS: int = Field(900, description="Order limitation time frame in seconds")

    # Basket behaviour
    BASKET_COUPON_ALLOWED: int = Field(1, description="Number of coupon codes a customer may enter per basket")
    BASKET_REQUIRE_VARIANT: bool = Field(
        True, description="Selection products must resolve to a concrete article before being added"
    )
    BASKET_CHECK_STOCK: bool = Field(True, description="Clamp quantities to the available stock level")
    BASKET_DECORATORS: Annotated[list[str], NoDecode] = Field(
        default=["select", "bundle", "stock", "category"],
        description="Basket controller decorators, innermost first",
    )
    BASKET_MAX_PAGE_SIZE: int = Field(100, description="Maximum page size for delegated listings")
    BASKET_DEFAULT_TYPE: str = Field("default", description="Basket type used until another one is set")

    # Order store
    DATABASE_URL: str = Field("sqlite+pysqlite:///:memory:", description="SQLAlchemy URL of the order store")
    DB_ECHO: bool = Field(False, description="Log SQL queries (debug only)")

    # Redis (session + message queue)
    REDIS_HOST: str = Field("localhost", description="Redis host")
    REDIS_PORT: int = Field(6379, description="Redis port")
    REDIS_DB: int = Field(0, description="Redis database")
    REDIS_PASSWORD: str | None = Field(None, description="Redis password")
    SESSION_PREFIX: str = Field("shopbasket", description="Key prefix for session and queue entries")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Log level")
    LOG_FORMAT: str = Field("colored", description="colored, json or plain")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("BASKET_DECORATORS", mode="before")
    @classmethod
    def parse_decorators(cls, value: Any) -> Any:
        """Accept a JSON array or a comma-separated string."""
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                return json.loads(value)
            return [name.strip() for name in value.split(",") if name.strip()]
        return value

    @field_validator("BASKET_DECORATORS")
    @classmethod
    def validate_decorators(cls, value: list[str]) -> list[str]:
        names = [name.lower() for name in value]
        unknown = [name for name in names if name not in KNOWN_DECORATORS]
        if unknown:
            raise ValueError(f"Unknown basket decorators: {', '.join(unknown)}")
        return names

    @field_validator("BASKET_LIMIT_COUNT", "BASKET_LIMIT_SECONDS", "BASKET_COUPON_ALLOWED")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Basket limits must be 0 or greater")
        return v

    @field_validator("BASKET_MAX_PAGE_SIZE")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("BASKET_MAX_PAGE_SIZE must be at least 1")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in ("colored", "json", "plain"):
            raise ValueError("LOG_FORMAT must be one of: colored, json, plain")
        return v


# Settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance so the environment is read once.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
