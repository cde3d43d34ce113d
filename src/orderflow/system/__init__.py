"""
System configuration package.

Exports:
    - SystemConfig: Complete system configuration model
    - ComponentsConfig: Capability wiring section
    - ComponentSpec: One capability variant selection
    - get_system_config: Get system config singleton
    - reload_system_config: Force reload system config
    - LoggerFactory: Factory for creating configured loggers
    - LoggingConfig: Logging configuration model
"""

from orderflow.system.config import (
    ComponentsConfig,
    ComponentSpec,
    SystemConfig,
    ValidationPolicy,
    get_system_config,
    reload_system_config,
)
from orderflow.system.log_system import LoggerFactory, LoggingConfig

__all__ = [
    "ComponentSpec",
    "ComponentsConfig",
    "SystemConfig",
    "ValidationPolicy",
    "get_system_config",
    "reload_system_config",
    "LoggerFactory",
    "LoggingConfig",
]
