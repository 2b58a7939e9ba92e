"""
Keyreader models.

Pydantic snapshots of key metadata returned by the Key Vault management plane.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


def _plain(value: Any) -> Any:
    """Unwrap SDK string enums (JsonWebKeyType, JsonWebKeyOperation, ...)."""
    return getattr(value, "value", value)


class KeyLifecycle(BaseModel):
    """
    Lifecycle attributes of a key.

    Timestamps are epoch seconds, as the management API returns them.
    """

    enabled: Optional[bool] = None
    exportable: Optional[bool] = None

    # Timestamps
    created: Optional[int] = None
    updated: Optional[int] = None
    expires: Optional[int] = None
    not_before: Optional[int] = None

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }


class KeyRecord(BaseModel):
    """
    Read-only snapshot of a vault key's metadata at fetch time.

    Only ``name`` is required. Every other field is left empty when the
    service did not return it, and the formatter skips empty fields.
    """

    # Identity
    name: str
    id: Optional[str] = None
    location: Optional[str] = None

    # Cryptographic properties
    kty: Optional[str] = None
    key_size: Optional[int] = None
    curve_name: Optional[str] = None
    key_ops: List[str] = Field(default_factory=list)
    key_uri: Optional[str] = None
    key_uri_with_version: Optional[str] = None

    # Lifecycle
    attributes: Optional[KeyLifecycle] = None

    # Policies (contents are not inspected)
    has_release_policy: bool = False
    has_rotation_policy: bool = False

    tags: Dict[str, str] = Field(default_factory=dict)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "name": "cmk-storage",
                "id": "/subscriptions/.../providers/Microsoft.KeyVault/vaults/kv-prod/keys/cmk-storage",
                "location": "westeurope",
                "kty": "RSA",
                "key_size": 2048,
                "key_ops": ["encrypt", "decrypt", "wrapKey", "unwrapKey"],
                "key_uri": "https://kv-prod.vault.azure.net/keys/cmk-storage",
                "attributes": {"enabled": True, "created": 1700000000},
                "has_rotation_policy": True,
                "tags": {"env": "prod"},
            }
        },
    }

    @classmethod
    def from_azure(cls, key: Any) -> "KeyRecord":
        """
        Build a record from an ``azure.mgmt.keyvault.models.Key``.

        Args:
            key: Key resource as returned by ``KeysOperations.get`` or ``list``

        Returns:
            KeyRecord snapshot
        """
        attributes = getattr(key, "attributes", None)
        tags = getattr(key, "tags", None) or {}

        return cls(
            name=key.name or "",
            id=key.id,
            location=key.location,
            kty=_plain(key.kty),
            key_size=key.key_size,
            curve_name=_plain(key.curve_name),
            key_ops=[_plain(op) for op in (key.key_ops or [])],
            key_uri=key.key_uri,
            key_uri_with_version=key.key_uri_with_version,
            attributes=KeyLifecycle.model_validate(attributes) if attributes is not None else None,
            has_release_policy=getattr(key, "release_policy", None) is not None,
            has_rotation_policy=getattr(key, "rotation_policy", None) is not None,
            tags={k: v if v is not None else "" for k, v in tags.items()},
        )
