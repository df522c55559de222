from functools import lru_cache
from typing import Dict, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from SANDBOX_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SANDBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # --- Containers ---
    DEFAULT_IMAGE: str = "busybox"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"


class RuntimeConfig(BaseSettings):
    """
    Connection parameters for the container runtime daemon.

    Uses the variables the docker CLI understands (DOCKER_HOST,
    DOCKER_TLS_VERIFY, DOCKER_CERT_PATH, DOCKER_API_VERSION). Resolved once
    at startup and handed to the runtime client; nothing reads the process
    environment after that.
    """

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    DOCKER_HOST: Optional[str] = None
    DOCKER_TLS_VERIFY: Optional[str] = None
    DOCKER_CERT_PATH: Optional[str] = None
    DOCKER_API_VERSION: Optional[str] = None

    @property
    def api_version(self) -> str:
        # "auto" asks the daemon for its version before the first call
        return self.DOCKER_API_VERSION or "auto"

    def as_environment(self) -> Dict[str, str]:
        """The captured values in the shape docker.utils.kwargs_from_env expects."""
        env = {
            "DOCKER_HOST": self.DOCKER_HOST,
            "DOCKER_TLS_VERIFY": self.DOCKER_TLS_VERIFY,
            "DOCKER_CERT_PATH": self.DOCKER_CERT_PATH,
        }
        return {k: v for k, v in env.items() if v is not None}


@lru_cache
def get_settings() -> Settings:
    return Settings()
