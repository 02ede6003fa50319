"""Application settings and configuration."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "99Dresses API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Security. No default secret: a missing SECRET_KEY fails at startup.
    secret_key: str = Field(..., min_length=32)
    algorithm: str = "HS256"
    access_token_expire_days: int = 7
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # CORS
    cors_origins: list[str] = ["*"]

    # Marketplace
    starting_balance: int = Field(default=100, ge=0)
    feed_limit: int = Field(default=12, ge=1)  # trending / new arrivals size
    seed_demo_data: bool = True


settings = Settings()
