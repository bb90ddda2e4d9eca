from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime settings for the task registry.
    Values come from TASK_REGISTRY_* environment variables or a local .env file.
    """
    app_name: str = "Task Registry"
    env: str = Field(default="local", description="Deployment environment (local, qa, prod...)")
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = "INFO"
    log_format: str | None = Field(default=None, description="json | console; derived from env when unset")
    seed_sample_task: bool = Field(default=True, description="Start with the sample task in the registry")

    model_config = SettingsConfigDict(
        env_prefix="TASK_REGISTRY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )
