import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="BILLED_", extra="ignore")

    api_url: str = "http://localhost:5678"
    api_timeout: float = 10.0
    api_token: str = ""

    store_backend: str = "api"
    session_path: str = "./.billed/session.json"

    receipt_preview_width: int = 500

    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
