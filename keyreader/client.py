"""
Azure Key Vault management-plane client for keyreader.

Provides a thin wrapper around KeyVaultManagementClient that returns KeyRecord
snapshots and translates azure-core errors into keyreader errors.

Source references:
- azure.mgmt.keyvault.operations.KeysOperations.get / list
- azure.core.paging.ItemPaged.by_page
"""

import logging
from typing import Any, Iterator, Optional

from azure.core.exceptions import (
    AzureError,
    ClientAuthenticationError,
    ResourceNotFoundError,
)
from azure.identity import DefaultAzureCredential
from azure.mgmt.keyvault import KeyVaultManagementClient

from .config import ReaderConfig
from .exceptions import CredentialError, KeyNotFoundError, RequestError
from .models import KeyRecord

logger = logging.getLogger(__name__)

LIST_CONTEXT = "list"


class KeyVaultKeysClient:
    """
    Read-only access to the keys of one vault.

    Example:
        ```python
        from keyreader.client import KeyVaultKeysClient
        from keyreader.config import load_config

        config = load_config(
            subscription_id="00000000-0000-0000-0000-000000000000",
            resource_group="rg-security",
            vault_name="kv-prod",
        )
        with KeyVaultKeysClient.create(config) as client:
            key = client.get_key("cmk-storage")
            for record in client.list_keys():
                print(record.name)
        ```
    """

    def __init__(
        self,
        config: ReaderConfig,
        client: KeyVaultManagementClient,
        credential: Optional[Any] = None,
    ) -> None:
        """
        Initialize the keys client.

        Args:
            config: Keyreader configuration
            client: Initialized KeyVaultManagementClient
            credential: Credential owned by this wrapper, closed on close()

        Note:
            Use KeyVaultKeysClient.create() instead of direct instantiation.
        """
        self.config = config
        self._client = client
        self._owned_credential = credential

    @classmethod
    def create(cls, config: ReaderConfig, credential: Optional[Any] = None) -> "KeyVaultKeysClient":
        """
        Create an authenticated keys client.

        Args:
            config: Keyreader configuration with the target subscription
            credential: Token credential to use (defaults to DefaultAzureCredential)

        Returns:
            Initialized KeyVaultKeysClient

        Raises:
            CredentialError: If no credential could be constructed
            RequestError: If the management client could not be constructed
        """
        owned = None
        if credential is None:
            logger.debug("Building DefaultAzureCredential")
            try:
                credential = DefaultAzureCredential()
            except (AzureError, ValueError) as e:
                raise CredentialError(f"failed to obtain credential: {e}") from e
            owned = credential

        try:
            client = KeyVaultManagementClient(credential, config.subscription_id)
        except (AzureError, ValueError) as e:
            raise RequestError(f"failed to create client factory: {e}", context="create client") from e

        logger.debug("Key Vault management client ready for subscription %s", config.subscription_id)
        return cls(config=config, client=client, credential=owned)

    def get_key(self, key_name: str) -> KeyRecord:
        """
        Fetch one key by name.

        Args:
            key_name: Name of the key in the vault

        Returns:
            KeyRecord for the key

        Raises:
            CredentialError: If no token could be acquired
            KeyNotFoundError: If the key does not exist
            RequestError: On any other service or transport failure
        """
        logger.debug(
            "Fetching key %s from vault %s (resource group %s)",
            key_name,
            self.config.vault_name,
            self.config.resource_group,
        )
        try:
            key = self._client.keys.get(self.config.resource_group, self.config.vault_name, key_name)
        except ClientAuthenticationError as e:
            # No response: the token was never acquired. A 401 from the service is a failed fetch.
            if e.response is None:
                raise CredentialError(f"failed to obtain credential: {e}") from e
            raise RequestError(f'failed to get key "{key_name}": {e}', context=key_name) from e
        except ResourceNotFoundError as e:
            raise KeyNotFoundError(f'failed to get key "{key_name}": {e}', context=key_name) from e
        except AzureError as e:
            raise RequestError(f'failed to get key "{key_name}": {e}', context=key_name) from e

        return KeyRecord.from_azure(key)

    def list_keys(self) -> Iterator[KeyRecord]:
        """
        Iterate over every key in the vault, page by page.

        Pages are fetched lazily and the iterator cannot be restarted.

        Yields:
            KeyRecord for each key, in the order the service returns them

        Raises:
            CredentialError: If no token could be acquired
            RequestError: If any page could not be fetched
        """
        pager = self._client.keys.list(self.config.resource_group, self.config.vault_name)
        try:
            for page_number, page in enumerate(pager.by_page(), start=1):
                logger.debug("Reading page %d of keys in vault %s", page_number, self.config.vault_name)
                for key in page:
                    yield KeyRecord.from_azure(key)
        except ClientAuthenticationError as e:
            if e.response is None:
                raise CredentialError(f"failed to obtain credential: {e}") from e
            raise RequestError(f"failed to list keys: {e}", context=LIST_CONTEXT) from e
        except AzureError as e:
            raise RequestError(f"failed to list keys: {e}", context=LIST_CONTEXT) from e

    def close(self) -> None:
        """Close the management client and any credential created here."""
        self._client.close()
        if self._owned_credential is not None:
            self._owned_credential.close()

    def __enter__(self) -> "KeyVaultKeysClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
