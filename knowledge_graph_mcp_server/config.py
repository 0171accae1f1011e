"""Server configuration read from environment variables."""
import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_SERVER_NAME = "memory-server"
DEFAULT_SERVER_VERSION = "1.0.0"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_METRICS_WINDOW = 3600  # 1 hour


@dataclass(frozen=True)
class ServerConfig:
    server_name: str = DEFAULT_SERVER_NAME
    server_version: str = DEFAULT_SERVER_VERSION
    log_level: str = DEFAULT_LOG_LEVEL
    metrics_window: int = DEFAULT_METRICS_WINDOW

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ServerConfig':
        """Build a config from MEMORY_* environment variables.

        Raises:
            ValueError: If a numeric setting is not a positive integer or the
                log level is unknown
        """
        env = os.environ if environ is None else environ

        log_level = env.get("MEMORY_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown log level: {log_level}")

        raw_window = env.get("MEMORY_METRICS_WINDOW", str(DEFAULT_METRICS_WINDOW))
        try:
            metrics_window = int(raw_window)
        except ValueError:
            raise ValueError(f"MEMORY_METRICS_WINDOW must be an integer, got {raw_window!r}")
        if metrics_window <= 0:
            raise ValueError("MEMORY_METRICS_WINDOW must be positive")

        return cls(
            server_name=env.get("MEMORY_SERVER_NAME", DEFAULT_SERVER_NAME),
            server_version=env.get("MEMORY_SERVER_VERSION", DEFAULT_SERVER_VERSION),
            log_level=log_level,
            metrics_window=metrics_window
        )
