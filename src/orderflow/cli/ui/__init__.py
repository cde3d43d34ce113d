"""CLI UI components - formatters."""

from orderflow.cli.ui.formatters import add_registry_rows, create_components_table

__all__ = [
    "add_registry_rows",
    "create_components_table",
]
