"""
Configuration — Runtime settings read from the environment.
"""

import os
from dataclasses import dataclass

from tsenum.observability.debug import disable_debug, enable_debug
from tsenum.observability.logging import configure_logging

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class EnumConfig:
    """Configuration for tsenum logging and debug mode."""
    debug: bool = False  # Trace every canonicalize call
    log_level: str = "WARNING"
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "EnumConfig":
        """
        Read configuration from TSENUM_DEBUG, TSENUM_LOG_LEVEL and
        TSENUM_LOG_JSON. Unset variables keep their defaults.
        """
        return cls(
            debug=os.environ.get("TSENUM_DEBUG", "").lower() in _TRUTHY,
            log_level=os.environ.get("TSENUM_LOG_LEVEL", cls.log_level).upper(),
            json_logs=os.environ.get("TSENUM_LOG_JSON", "").lower() in _TRUTHY,
        )


def apply_config(config: EnumConfig | None = None) -> EnumConfig:
    """
    Configure logging and debug mode.

    Args:
        config: Settings to apply (default: read from the environment)

    Returns:
        The applied configuration
    """
    config = config or EnumConfig.from_env()

    configure_logging(level=config.log_level, json_format=config.json_logs)
    if config.debug:
        enable_debug()
    else:
        disable_debug()

    return config
