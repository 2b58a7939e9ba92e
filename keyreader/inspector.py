"""
Key inspection: fetch one key or walk the whole vault and print each record.
"""

import logging
from typing import Iterator, Optional, Protocol

from rich.console import Console

from .config import ReaderConfig
from .formatting import format_key
from .models import KeyRecord

logger = logging.getLogger(__name__)


class KeySource(Protocol):
    """Anything that can fetch key records (the SDK client, or a fake in tests)."""

    def get_key(self, key_name: str) -> KeyRecord: ...

    def list_keys(self) -> Iterator[KeyRecord]: ...


def report_console() -> Console:
    """Console for the report: plain text, no markup, no wrapping."""
    return Console(markup=False, emoji=False, highlight=False, soft_wrap=True)


class KeyInspector:
    """
    Writes key metadata reports.

    Errors from the key source are not caught: a failed fetch or page aborts
    the report, and anything already written stays written.

    Example:
        ```python
        with KeyVaultKeysClient.create(config) as client:
            KeyInspector(client, config).run(config.key_name)
        ```
    """

    def __init__(self, source: KeySource, config: ReaderConfig, console: Optional[Console] = None) -> None:
        self.source = source
        self.config = config
        self.console = console or report_console()

    def _write(self, text: str) -> None:
        self.console.out(text, end="")

    def show_key(self, key_name: str) -> KeyRecord:
        """Fetch and print a single key."""
        record = self.source.get_key(key_name)
        self._write(format_key(record))
        return record

    def list_keys(self) -> int:
        """
        Print every key in the vault.

        Returns:
            Number of keys printed
        """
        self._write(
            f'Keys in vault "{self.config.vault_name}" '
            f'(resource group: "{self.config.resource_group}"):\n\n'
        )

        count = 0
        for record in self.source.list_keys():
            count += 1
            self._write(format_key(record))

        if count == 0:
            self._write("No keys found.\n")

        logger.debug("Listed %d key(s) in vault %s", count, self.config.vault_name)
        return count

    def run(self, key_name: Optional[str] = None) -> int:
        """
        Fetch one key when a name is given, otherwise list the vault.

        Returns:
            Number of keys printed
        """
        if key_name:
            self.show_key(key_name)
            return 1
        return self.list_keys()
