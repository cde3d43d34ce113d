"""System configuration.

One configuration for the entire system: logging settings plus which
capability variants the order manager is wired with.

Loaded from YAML (``config/system.yaml`` relative to the working directory
by default). Missing file means defaults everywhere.

Example system.yaml:

    logging:
      level: INFO
      format: console

    components:
      validation: permissive
      order:
        name: surcharge
        params:
          surcharge_rate: 0.2
      invoice:
        name: format
        params:
          extension: html
      notifier:
        name: sms
"""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from orderflow.system.log_system import LoggingConfig

DEFAULT_CONFIG_PATH = Path("config/system.yaml")

ValidationPolicy = Literal["permissive", "strict"]


class ComponentSpec(BaseModel):
    """Selects one registered capability variant by name."""

    name: str = Field(description="Registry name of the variant")
    params: dict[str, Any] = Field(default_factory=dict, description="Constructor keyword arguments")


class ComponentsConfig(BaseModel):
    """Capability wiring for the order manager."""

    order: ComponentSpec = Field(default_factory=lambda: ComponentSpec(name="standard"))
    invoice: ComponentSpec = Field(default_factory=lambda: ComponentSpec(name="pdf"))
    notifier: ComponentSpec = Field(default_factory=lambda: ComponentSpec(name="email"))
    validation: ValidationPolicy = Field(
        default="permissive",
        description="permissive=accept every input, strict=reject negative amounts and empty strings",
    )


class SystemConfig(BaseModel):
    """Complete system configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    components: ComponentsConfig = Field(default_factory=ComponentsConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> "SystemConfig":
        """Load configuration from YAML.

        Args:
            path: Explicit config path. Must exist when given.

        Returns:
            Parsed SystemConfig (defaults when no path given and the default file is absent)

        Raises:
            FileNotFoundError: If an explicit path does not exist
            ValueError: If the file is not valid YAML or not a mapping
            pydantic.ValidationError: If values are malformed
        """
        if path is None:
            if not DEFAULT_CONFIG_PATH.exists():
                return cls()
            path = DEFAULT_CONFIG_PATH
        elif not path.exists():
            raise FileNotFoundError(f"System config not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML from {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"System config {path} must be a mapping, got {type(data).__name__}")
        return cls(**data)


_system_config: SystemConfig | None = None


def get_system_config() -> SystemConfig:
    """Get system config singleton (loads on first use)."""
    global _system_config
    if _system_config is None:
        _system_config = SystemConfig.load()
    return _system_config


def reload_system_config(path: Path | None = None) -> SystemConfig:
    """Force reload of the system config singleton."""
    global _system_config
    _system_config = SystemConfig.load(path)
    return _system_config
