"""Configuration for the default logger, loaded from environment variables.

Only the fallback logger built when no logger is injected reads these
settings. An injected logger is always used exactly as given.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ---- Default logger ----
    log_level: str = "INFO"  # Threshold of the stdout logger
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    logger_name: str = "httpx_detailed_logger"

    model_config = {
        "env_prefix": "DETAILED_LOGGER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """Cached singleton accessor for library settings."""
    return Settings()
