"""
Logging setup for the keyreader CLI.

Diagnostics go to stderr through rich so they never mix with the report on stdout.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(debug: bool = False) -> None:
    """
    Configure root logging.

    Args:
        debug: Log at DEBUG level, including Azure SDK HTTP traffic
    """
    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=debug)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    # azure-core logs every request at INFO
    logging.getLogger("azure").setLevel(logging.DEBUG if debug else logging.WARNING)
