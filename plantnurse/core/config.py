"""Plant Nurse configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///plantnurse.db"

    # Species catalog (defaults to the YAML files shipped with the package)
    knowledge_dir: str | None = None

    # Care defaults
    default_check_frequency: int = 7
    default_room_name: str = "My Room"

    # General
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = {
        "env_file": ".env",
        "env_prefix": "PLANTNURSE_",
        "extra": "ignore",
    }


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
