"""Console output for capability reports.

Capabilities report what they did as plain lines on stdout. Lines are
written as-is through click.echo: free text from the caller (tabs, control
characters, escape sequences, bracketed text) reaches stdout unchanged.
"""

import click


def report(line: str) -> None:
    """Write one report line to stdout verbatim."""
    click.echo(line, color=True)
