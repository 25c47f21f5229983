"""Configuration handling for the NauSYS client."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

from .schemas import Credentials

BASE_URL = "http://ws.nausys.com/CBMS-external/rest/"
CATALOGUE_URL = "catalogue/v6"
RESERVATION_URL = "yachtReservation/v6"
REQUEST_CONTENT_TYPE = "application/json"


class Settings(BaseSettings):
    """Client configuration loaded from environment variables."""

    base_url: str = BASE_URL
    http_timeout_seconds: float = 30

    model_config = SettingsConfigDict(
        env_prefix="NAUSYS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class CredentialSettings(BaseSettings):
    """Provider account read from NAUSYS_API_USERNAME / NAUSYS_API_PASSWORD."""

    username: str = ""
    password: str = ""

    model_config = SettingsConfigDict(
        env_prefix="NAUSYS_API_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()


def env_credentials() -> Credentials:
    """Read the provider credentials from the environment.

    Not cached: every outbound call picks up rotated credentials.
    """
    current = CredentialSettings()
    return Credentials(username=current.username, password=current.password)
