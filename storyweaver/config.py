"""
Application settings
Read once from the environment (and a .env file) and passed explicitly to services
"""
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from storyweaver.exceptions import ConfigurationError

DEFAULT_API_ENDPOINT = "https://llama70b.gaia.domains/v1"
DEFAULT_API_MODEL = "llama70b"
DEFAULT_TIMEOUT_SECONDS = 60.0


def _clean(value: Optional[str]) -> Optional[str]:
    """Strip whitespace and stray quotes copied from .env files"""
    if value is None:
        return None
    value = value.strip().strip('"').strip("'")
    return value or None


class Settings(BaseModel):
    """Settings for the completion service and the web server"""
    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., description="API key for the chat-completion service")
    api_endpoint: str = Field(DEFAULT_API_ENDPOINT, description="Base URL of the OpenAI-compatible API")
    model: str = Field(DEFAULT_API_MODEL, description="Model identifier")
    request_timeout: float = Field(DEFAULT_TIMEOUT_SECONDS, description="Upstream request timeout in seconds")
    port: int = Field(8000, description="HTTP port")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from GAIA_* environment variables"""
        load_dotenv()

        api_key = _clean(os.getenv("GAIA_API_KEY"))
        if not api_key:
            raise ConfigurationError("Missing GAIA_API_KEY in environment or .env file")

        timeout_raw = _clean(os.getenv("GAIA_API_TIMEOUT"))
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_SECONDS
        except ValueError:
            raise ConfigurationError(f"GAIA_API_TIMEOUT must be a number, got {timeout_raw!r}")
        if timeout <= 0:
            raise ConfigurationError("GAIA_API_TIMEOUT must be greater than zero")

        return cls(
            api_key=api_key,
            api_endpoint=_clean(os.getenv("GAIA_API_ENDPOINT")) or DEFAULT_API_ENDPOINT,
            model=_clean(os.getenv("GAIA_API_MODEL")) or DEFAULT_API_MODEL,
            request_timeout=timeout,
            port=int(os.getenv("PORT", 8000)),
        )
