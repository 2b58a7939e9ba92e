"""
Pytest configuration and fixtures for keyreader tests.

Provides stand-ins for Azure SDK key objects and a mock management client.
"""

import io
from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Optional
from unittest.mock import Mock

import pytest
from rich.console import Console

from keyreader.config import ReaderConfig
from keyreader.models import KeyRecord


def make_azure_key(name: str = "cmk-storage", **overrides: Any) -> SimpleNamespace:
    """
    Build an object shaped like ``azure.mgmt.keyvault.models.Key``.

    Every optional field defaults to None, as the SDK leaves it when the
    service omits it.
    """
    fields: Dict[str, Any] = {
        "name": name,
        "id": None,
        "location": None,
        "tags": None,
        "attributes": None,
        "kty": None,
        "key_ops": None,
        "key_size": None,
        "curve_name": None,
        "key_uri": None,
        "key_uri_with_version": None,
        "rotation_policy": None,
        "release_policy": None,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


def make_attributes(**overrides: Any) -> SimpleNamespace:
    """Build an object shaped like ``azure.mgmt.keyvault.models.KeyAttributes``."""
    fields: Dict[str, Any] = {
        "enabled": None,
        "not_before": None,
        "expires": None,
        "created": None,
        "updated": None,
        "recovery_level": None,
        "exportable": None,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


def make_pager(pages: List[List[Any]], error: Optional[Exception] = None) -> Mock:
    """
    Build a mock ``ItemPaged`` whose ``by_page()`` yields the given pages.

    If ``error`` is set it is raised after the last page is served.
    """

    def by_page() -> Iterator[Iterator[Any]]:
        for page in pages:
            yield iter(page)
        if error is not None:
            raise error

    pager = Mock()
    pager.by_page = Mock(side_effect=by_page)
    return pager


class FakeKeySource:
    """In-memory key source for inspector and CLI tests."""

    def __init__(self, records: Optional[List[KeyRecord]] = None, error: Optional[Exception] = None) -> None:
        self.records = records or []
        self.error = error
        self.requested: List[str] = []

    def get_key(self, key_name: str) -> KeyRecord:
        self.requested.append(key_name)
        if self.error is not None:
            raise self.error
        for record in self.records:
            if record.name == key_name:
                return record
        raise LookupError(key_name)

    def list_keys(self) -> Iterator[KeyRecord]:
        for record in self.records:
            yield record
        if self.error is not None:
            raise self.error

    def close(self) -> None:
        pass

    def __enter__(self) -> "FakeKeySource":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


@pytest.fixture(autouse=True)
def clear_keyreader_env(monkeypatch):
    """Keep KEYREADER_* variables from the developer's shell out of tests."""
    for name in (
        "KEYREADER_SUBSCRIPTION_ID",
        "KEYREADER_RESOURCE_GROUP",
        "KEYREADER_VAULT_NAME",
        "KEYREADER_KEY_NAME",
        "KEYREADER_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def reader_config():
    """Create a test ReaderConfig."""
    return ReaderConfig(
        subscription_id="00000000-0000-0000-0000-000000000000",
        resource_group="rg-security",
        vault_name="kv-prod",
    )


@pytest.fixture
def mock_mgmt_client():
    """Create a mock KeyVaultManagementClient."""
    client = Mock()
    client.keys = Mock()
    return client


@pytest.fixture
def capture_console():
    """Create a plain-text console writing to a buffer (read it with ``.file.getvalue()``)."""
    return Console(
        file=io.StringIO(),
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
        force_terminal=False,
    )


@pytest.fixture
def sample_record():
    """A fully populated key record."""
    return KeyRecord(
        name="cmk-storage",
        id="/subscriptions/sub/resourceGroups/rg-security/providers/Microsoft.KeyVault/vaults/kv-prod/keys/cmk-storage",
        location="westeurope",
        kty="RSA",
        key_size=2048,
        key_ops=["encrypt", "decrypt"],
        key_uri="https://kv-prod.vault.azure.net/keys/cmk-storage",
        key_uri_with_version="https://kv-prod.vault.azure.net/keys/cmk-storage/abc123",
        attributes={"enabled": True, "exportable": False, "created": 1700000000, "updated": 1700003600},
        has_rotation_policy=True,
        tags={"env": "prod", "team": "core"},
    )


@pytest.fixture
def azure_key():
    """Factory for SDK-shaped Key objects."""
    return make_azure_key


@pytest.fixture
def azure_attributes():
    """Factory for SDK-shaped KeyAttributes objects."""
    return make_attributes


@pytest.fixture
def pager():
    """Factory for mock ItemPaged pagers."""
    return make_pager


@pytest.fixture
def key_source():
    """Factory for in-memory key sources."""
    return FakeKeySource
