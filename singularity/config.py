from functools import lru_cache

from pydantic_settings import BaseSettings

# Environment value that switches the galvanic gateway to local HTTP forwarding
LOCAL_ENV = "NONE"


class Settings(BaseSettings):
    """Gateway and build settings loaded from environment."""

    # Logging
    log_level: str = "INFO"

    # Deployment tier, read from ENV
    env: str | None = None

    # Local development
    local_gateway_url: str = "http://localhost:4000"

    # AWS
    aws_region: str = "us-east-1"
    aws_endpoint_url: str | None = None  # For LocalStack

    # Service worker build
    node_binary: str = "node"
    workbox_project_dir: str | None = None  # Directory holding node_modules/workbox-build

    @property
    def local_mode(self) -> bool:
        return self.env == LOCAL_ENV

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once."""
    return Settings()


settings = get_settings()
