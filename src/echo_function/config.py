import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from .exceptions import ConfigurationError
from .handlers import HANDLERS

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration loaded from environment variables."""

    # --- Service Identity ---
    service_name: str
    environment: str
    log_level: str

    # --- Function Deployment Settings ---
    handler_name: str
    namespace: str
    runtime: str
    timeout_seconds: int
    memory_limit: str | None

    @classmethod
    def load_from_env(cls) -> "AppConfig":
        """
        Loads configuration from environment variables, performing validation and type casting.
        Fails fast with a ConfigurationError if anything is invalid.
        """
        try:
            service_name = os.getenv("SERVICE_NAME", "echo-function")
            if not service_name:
                raise ValueError("SERVICE_NAME must not be empty.")
            environment = os.getenv("ENVIRONMENT", "dev")

            # --- Handle special-case variables like log level ---
            log_level = os.getenv("LOG_LEVEL", "INFO").upper()
            allowed_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
            if log_level not in allowed_log_levels:
                raise ValueError(
                    f"LOG_LEVEL must be one of {allowed_log_levels}, not '{log_level}'"
                )

            handler_name = os.getenv("FUNC_HANDLER", "echo")
            if handler_name not in HANDLERS:
                raise ValueError(
                    f"FUNC_HANDLER must be one of {sorted(HANDLERS)}, not '{handler_name}'"
                )

            namespace = os.getenv("FUNC_NAMESPACE", "default")
            runtime = os.getenv("FUNC_RUNTIME", "python")

            timeout_seconds = int(os.getenv("FUNC_TIMEOUT", "180"))
            if timeout_seconds <= 0:
                raise ValueError("FUNC_TIMEOUT must be a positive integer.")

            memory_limit = os.getenv("FUNC_MEMORY_LIMIT") or None

        except (ValueError, TypeError) as e:
            raise ConfigurationError(
                f"Invalid value for an environment variable: {e}"
            ) from e

        return cls(
            service_name=service_name,
            environment=environment,
            log_level=log_level,
            handler_name=handler_name,
            namespace=namespace,
            runtime=runtime,
            timeout_seconds=timeout_seconds,
            memory_limit=memory_limit,
        )


# --- Singleton Factory Function (Lazy-loaded and Cached) ---
@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Loads the application configuration from environment variables.
    The result is cached using lru_cache, so the environment is only read once
    on the first call. This avoids import-time side effects.
    """
    logger.info("Loading application configuration from environment...")
    return AppConfig.load_from_env()
