from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client configuration loaded from BOSONNLP_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BOSONNLP_", env_file=".env", extra="ignore"
    )

    api_token: str = ""
    base_url: str = "http://api.bosonnlp.com"
    compress: bool = True
    request_timeout_seconds: float = 60.0
    log_level: str = "INFO"

    task_timeout_seconds: float | None = 1800.0
    task_poll_interval_seconds: float = 1.0
    task_max_poll_interval_seconds: float = 64.0

    cluster_alpha: float = 0.8
    cluster_beta: float = 0.45
