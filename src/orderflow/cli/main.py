"""orderflow CLI main entry point."""

import click

from orderflow import __version__
from orderflow.cli.commands import components_command, demo_command, process_command


@click.group()
@click.version_option(version=__version__)
def main():
    """orderflow - Order processing through pluggable capabilities"""
    pass


# Register commands
main.add_command(process_command)
main.add_command(demo_command)
main.add_command(components_command)


if __name__ == "__main__":
    main()
