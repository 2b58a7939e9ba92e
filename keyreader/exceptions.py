"""
Keyreader exceptions.

Every error is terminal: library code raises, the CLI reports and exits.
"""

from typing import List, Optional


class KeyReaderError(Exception):
    """Base exception for keyreader failures."""

    pass


class ConfigurationError(KeyReaderError):
    """A required parameter is missing or invalid."""

    def __init__(self, message: str, missing: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.missing = missing or []


class CredentialError(KeyReaderError):
    """The identity provider could not produce a usable credential."""

    pass


class RequestError(KeyReaderError):
    """
    A key fetch or listing page fetch failed.

    Attributes:
        context: The key name that was requested, or "list" for a listing
    """

    def __init__(self, message: str, context: Optional[str] = None) -> None:
        super().__init__(message)
        self.context = context


class KeyNotFoundError(RequestError):
    """The requested key does not exist in the vault."""

    pass
