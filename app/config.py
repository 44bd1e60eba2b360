# app/config.py

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="HELLO_PROXY_",
        case_sensitive=False,
        extra="ignore",
    )

    SERVICE_NAME: str = "hello-proxy"

    # Placeholder host; it is not expected to resolve outside a cluster.
    EXTERNAL_SERVICE_URL: str = Field(
        default="http://external-service/api",
        description="URL hit once per /hello request",
    )
    EXTERNAL_TIMEOUT_SECONDS: float = Field(default=5.0, gt=0)

    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
