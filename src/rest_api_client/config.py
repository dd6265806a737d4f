'''
Import configuration using .env
'''
from pathlib import Path
from functools import lru_cache
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# from src/rest_api_client/config.py up to project root (where .env lives)
BASE_DIR = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=BASE_DIR / ".env")

SENSITIVE_FIELDS = {
    "AUTH_CLIENT_ID",
    "AUTH_CLIENT_SECRET",
}


class Settings(BaseSettings):
    '''
    Project Settings class
    Values are read from the environment or the .env file.
    The core classes never read these; only the cached factories do.
    '''
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    API_BASE_URL: str = "http://localhost:8000"

    AUTH_BASE_URL: str | None = None
    AUTH_TOKEN_PATH: str = "/oauth/token"
    AUTH_CLIENT_ID: str | None = None
    AUTH_CLIENT_SECRET: str | None = None
    AUTH_GRANT_TYPE: str | None = "client_credentials"
    AUTH_SCOPE: str | None = None

    HTTP_TIMEOUT: float | None = None

    DEBUG: bool = False
    LOG_FILE: str = "logs/rest_api_client.log"

    @field_validator("AUTH_GRANT_TYPE", "AUTH_SCOPE", "AUTH_BASE_URL", mode="before")
    @classmethod
    def _blank_as_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def token_server_url(self) -> str:
        return self.AUTH_BASE_URL or self.API_BASE_URL


@lru_cache()
def get_settings() -> Settings:
    '''
    Get settings for something like singleton
    '''
    return Settings()


def masked_settings_dump(settings: BaseSettings) -> dict:
    '''
    Settings as a dict with credentials replaced, safe to log.
    '''
    data = settings.model_dump()
    for key in SENSITIVE_FIELDS:
        if key in data and data[key]:
            data[key] = "********"
    return data
