"""Commands __init__ - exports all commands."""

from orderflow.cli.commands.components import components_command
from orderflow.cli.commands.demo import demo_command
from orderflow.cli.commands.process import process_command

__all__ = ["components_command", "demo_command", "process_command"]
