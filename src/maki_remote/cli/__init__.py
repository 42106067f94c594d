"""
maki-remote CLI: discover and query remote nodes from the shell.

Commands live in ``maki_remote.cli.remote``:
- resources: run discovery and list what a node exposes
- get, options: read a resource
- put, post, patch: write a resource
"""

import typer

from maki_remote.cli.remote import register_commands
from maki_remote.logger import setup_logging

app = typer.Typer(help="maki-remote - talk to remote nodes over HTTP")


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    setup_logging(level="DEBUG" if verbose else "WARNING")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging (DEBUG level)"
    ),
):
    """
    maki-remote - talk to remote nodes over HTTP.
    """
    configure_logging(verbose)


register_commands(app)

if __name__ == "__main__":
    app()
