"""
Keyreader - read key properties from an Azure Key Vault.

Example:
    ```python
    from keyreader import KeyInspector, KeyVaultKeysClient, load_config

    config = load_config(
        subscription_id="00000000-0000-0000-0000-000000000000",
        resource_group="rg-security",
        vault_name="kv-prod",
    )

    with KeyVaultKeysClient.create(config) as client:
        # One key
        record = client.get_key("cmk-storage")
        print(record.kty, record.key_size)

        # Whole vault, printed as text
        KeyInspector(client, config).list_keys()
    ```
"""

from .client import KeyVaultKeysClient
from .config import ReaderConfig, load_config
from .exceptions import (
    ConfigurationError,
    CredentialError,
    KeyNotFoundError,
    KeyReaderError,
    RequestError,
)
from .formatting import format_key, format_timestamp
from .inspector import KeyInspector, KeySource
from .models import KeyLifecycle, KeyRecord

__version__ = "0.1.0"

__all__ = [
    # Main client
    "KeyVaultKeysClient",
    "ReaderConfig",
    "load_config",
    # Models
    "KeyRecord",
    "KeyLifecycle",
    # Reporting
    "KeyInspector",
    "KeySource",
    "format_key",
    "format_timestamp",
    # Errors
    "KeyReaderError",
    "ConfigurationError",
    "CredentialError",
    "RequestError",
    "KeyNotFoundError",
]
