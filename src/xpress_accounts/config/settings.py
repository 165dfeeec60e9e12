"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]
PositiveInt = Annotated[int, Field(gt=0)]
BcryptRounds = Annotated[int, Field(ge=4, le=31)]


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: NonEmptyStr = Field(validation_alias="DATABASE_URL")
    public_base_url: HttpUrl = Field(validation_alias="PUBLIC_BASE_URL")
    session_secret_key: NonEmptyStr = Field(validation_alias="SESSION_SECRET_KEY")
    admin_api_token: NonEmptyStr = Field(validation_alias="ADMIN_API_TOKEN")
    session_max_age_seconds: PositiveInt = Field(
        default=28_800,
        validation_alias="SESSION_MAX_AGE_SECONDS",
    )
    session_cookie_secure: bool = Field(
        default=True,
        validation_alias="SESSION_COOKIE_SECURE",
    )
    bcrypt_rounds: BcryptRounds = Field(default=12, validation_alias="BCRYPT_ROUNDS")
    reveal_generated_password: bool = Field(
        default=False,
        validation_alias="REVEAL_GENERATED_PASSWORD",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()  # type: ignore[call-arg]
