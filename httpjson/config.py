# httpjson/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Content type for values served without an explicit charset request
    RESPONSE_CONTENT_TYPE: str = "application/json;charset=utf-8"

    # Seconds; applies to clients created without an httpx.Client
    CLIENT_TIMEOUT: float = 30.0

    LOG_LEVEL: str = "info"

    model_config = SettingsConfigDict(env_prefix="HTTPJSON_", env_file=".env", extra="ignore")


settings = Settings()
