"""Shared logging setup for commands."""

from typing import Literal, Optional, cast

from orderflow.system import LoggerFactory, SystemConfig


def configure_logging(system_config: SystemConfig, log_level: Optional[str]) -> None:
    """Configure logging from system config, applying a CLI level override."""
    if log_level:
        # click already validated the choice
        level = cast(Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], log_level.upper())
        system_config.logging.level = level
    LoggerFactory.configure(system_config.logging)
