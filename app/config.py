"""Application settings loaded from environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings

# Always listen on every interface
HOST = "0.0.0.0"
DEFAULT_PORT = 3000


class Settings(BaseSettings):
    # API
    port: int = DEFAULT_PORT

    @field_validator("port", mode="before")
    @classmethod
    def fall_back_to_default_port(cls, value):
        """Unset, non-numeric or out-of-range PORT values resolve to the default."""
        try:
            port = int(value)
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 1 <= port <= 65535:
            return DEFAULT_PORT
        return port


settings = Settings()
