"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "skill-router"

    # Session state
    session_state_key: str = "_alexaTsState"  # Reserved session attribute key
    response_version: str = "1.0"

    # Webhook
    webhook_path: str = "/alexa"
    trace_requests: bool = False  # Log every request/response pair

    # CORS
    cors_origins: list[str] = ["*"]

    class Config:
        env_prefix = "SKILL_ROUTER_"
        case_sensitive = False


settings = Settings()
