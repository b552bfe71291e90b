"""Configuration via pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings

SEED_DATA_DIR = Path(__file__).parent / "db_seed_data" / "giveth"


class Settings(BaseSettings):
    # MongoDB
    mongodb_url: str = "mongodb://localhost:27017/giveth-test"
    mongodb_server_selection_timeout_ms: int = 5000

    # Fixture snapshot restored by seed_data(); one sub-directory per collection
    seed_data_dir: str = str(SEED_DATA_DIR)

    # Auth / JWT (mirrors the backend's feathers authentication block)
    auth_secret: str = "giveth-e2e-test-secret-do-not-use-in-production"
    jwt_audience: str = "https://yourdomain.com"
    jwt_algorithm: str = "HS256"
    jwt_expires_in: int = 86400  # 1d
    jwt_issuer: str = "feathers"
    jwt_subject: str = "anonymous"
    jwt_header: dict = {"typ": "access"}

    model_config = {"env_prefix": "GIVETH_", "env_file": ".env", "extra": "ignore"}


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return a cached singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
