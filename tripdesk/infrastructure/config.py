from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TRIPDESK_")

    database_url: str = "sqlite+pysqlite:///:memory:"
    openapi_path: Path = Path(__file__).resolve().parents[1] / "openapi/openapi.yaml"
    cors_origins: list[str] = ["http://localhost:3000"]
    # Reject unknown statuses and inverted date ranges on create/update
    strict_validation: bool = False
    log_level: str = "INFO"

    # Web client
    api_base_url: str = "http://localhost:8000/api/reservations"
    http_timeout: float = 10.0


settings = Settings()
