"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from bookstore.validation.validators import PasswordPolicy


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    auth_provider: Literal["jwt", "mock"] = "jwt"

    jwt_access_secret: str
    jwt_refresh_secret: str | None = None
    jwt_algorithm: str = "HS256"
    access_token_ttl_minutes: int = 60 * 24
    refresh_token_ttl_minutes: int = 60 * 24 * 7

    cookie_secure: bool = True
    cookie_samesite: Literal["lax", "strict", "none"] = "none"

    web_url: str = "http://localhost:3000"
    password_reset_ttl_minutes: int = 60

    password_min_length: int = 8
    password_min_lowercase: int = 1
    password_min_uppercase: int = 1
    password_min_digits: int = 1
    password_min_symbols: int = 1

    model_config = SettingsConfigDict(env_prefix="BOOKSTORE_", extra="ignore")

    @property
    def refresh_secret(self) -> str:
        return self.jwt_refresh_secret or self.jwt_access_secret

    @property
    def password_policy(self) -> PasswordPolicy:
        return PasswordPolicy(
            min_length=self.password_min_length,
            min_lowercase=self.password_min_lowercase,
            min_uppercase=self.password_min_uppercase,
            min_digits=self.password_min_digits,
            min_symbols=self.password_min_symbols,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
