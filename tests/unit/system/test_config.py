"""Tests for system configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from orderflow.system import ComponentsConfig, SystemConfig, get_system_config, reload_system_config
from orderflow.system import config as config_module


@pytest.fixture(autouse=True)
def reset_singleton():
    config_module._system_config = None
    yield
    config_module._system_config = None


def test_defaults() -> None:
    config = SystemConfig()

    assert config.logging.level == "INFO"
    assert config.components.order.name == "standard"
    assert config.components.invoice.name == "pdf"
    assert config.components.notifier.name == "email"
    assert config.components.order.params == {}
    assert config.components.validation == "permissive"


def test_load_without_file_uses_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert SystemConfig.load() == SystemConfig()


def test_load_default_path(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "system.yaml").write_text("components:\n  notifier:\n    name: sms\n")

    config = SystemConfig.load()

    assert config.components.notifier.name == "sms"
    assert config.components.order.name == "standard"


def test_load_explicit_path(tmp_path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text(
        """
logging:
  level: DEBUG
  format: json
components:
  validation: strict
  order:
    name: surcharge
    params:
      surcharge_rate: 0.2
  invoice:
    name: format
    params:
      extension: txt
"""
    )

    config = SystemConfig.load(path)

    assert config.logging.level == "DEBUG"
    assert config.logging.format == "json"
    assert config.components.validation == "strict"
    assert config.components.order.params == {"surcharge_rate": 0.2}
    assert config.components.invoice.params == {"extension": "txt"}


def test_empty_file(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert SystemConfig.load(path) == SystemConfig()


def test_malformed_yaml(tmp_path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("components: [unclosed\n")

    with pytest.raises(ValueError, match="Failed to parse YAML"):
        SystemConfig.load(path)


def test_non_mapping_top_level(tmp_path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- order\n- invoice\n")

    with pytest.raises(ValueError, match="must be a mapping, got list"):
        SystemConfig.load(path)


def test_missing_explicit_path(tmp_path) -> None:
    with pytest.raises(FileNotFoundError, match="System config not found"):
        SystemConfig.load(tmp_path / "nope.yaml")


def test_invalid_validation_policy() -> None:
    with pytest.raises(ValidationError):
        ComponentsConfig(validation="lenient")  # type: ignore[arg-type]


def test_invalid_log_level(tmp_path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("logging:\n  level: LOUD\n")

    with pytest.raises(ValidationError):
        SystemConfig.load(path)


def test_sample_config_matches_defaults() -> None:
    """Test the shipped sample config parses and selects the baseline components."""
    sample = Path(__file__).parents[3] / "config" / "system.yaml"

    config = SystemConfig.load(sample)

    assert config.components == ComponentsConfig()


def test_singleton(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert get_system_config() is get_system_config()


def test_reload(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    first = get_system_config()
    path = tmp_path / "system.yaml"
    path.write_text("components:\n  order:\n    name: surcharge\n")

    reloaded = reload_system_config(path)

    assert reloaded is not first
    assert get_system_config() is reloaded
    assert reloaded.components.order.name == "surcharge"
