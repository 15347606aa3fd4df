# === Pydantic BaseSettings for all env vars ===

import logging
from typing import Optional
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):

    # SRP-6a parameters (None = built-in 2048-bit group, g = 2)
    hash_algorithm: str = Field("sha256")
    large_safe_prime: Optional[str] = Field(None)
    generator: Optional[str] = Field(None)

    # pending step-1 state
    pending_ttl_seconds: int = Field(300, gt=0)
    sweep_interval_seconds: int = Field(60, gt=0)
    redis_url: Optional[str] = Field(None) # Redis store when set, in-memory otherwise

    # account store
    database_url: str = Field("sqlite:///./srp_accounts.db")

    # secret suffix for fake salts of unknown users (random per provider if unset)
    unknown_user_salt: Optional[SecretStr] = Field(None)

    log_level: str = Field("INFO")

    model_config = SettingsConfigDict(
        env_prefix = "SRP_",
        env_file = ".env",
        case_sensitive = False,
        extra="ignore"
    )

settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
