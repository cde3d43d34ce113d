"""Rich table formatters for CLI output."""

from typing import Any

from rich.table import Table

from orderflow.services.registry import BaseRegistry


def create_components_table() -> Table:
    """
    Create a Rich table for listing registered capability variants.

    Returns:
        Configured Rich Table with columns
    """
    table = Table(title="Registered Components")
    table.add_column("Capability", style="cyan", no_wrap=True)
    table.add_column("Name", style="magenta", no_wrap=True)
    table.add_column("Class", style="white")
    table.add_column("Description", style="dim")
    return table


def add_registry_rows(table: Table, registry: BaseRegistry[Any], default: str | None = None) -> None:
    """
    Add one row per registered variant.

    Args:
        table: Table from create_components_table()
        registry: Capability registry to list
        default: Name of the configured variant, marked with '*'
    """
    for name, component_class in registry.list_components().items():
        description = registry.get_metadata(name).get("description", "")
        label = f"{name} *" if name == default else name
        table.add_row(registry.component_type, label, component_class.__name__, description)
