"""
Keyreader configuration management.

Loads parameters from keyword arguments (the CLI flags) or environment variables.
"""

from typing import Dict, List, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

# Field name -> CLI flag, in the order flags are reported
REQUIRED_FLAGS: Dict[str, str] = {
    "subscription_id": "-subscription",
    "resource_group": "-resource-group",
    "vault_name": "-vault",
}


class ReaderConfig(BaseSettings):
    """
    Keyreader configuration settings.

    Can be loaded from:
    1. Direct instantiation with kwargs (what the CLI does)
    2. Environment variables (KEYREADER_SUBSCRIPTION_ID, KEYREADER_VAULT_NAME, etc.)

    Example:
        ```python
        # From environment
        config = ReaderConfig()

        # Direct instantiation
        config = ReaderConfig(
            subscription_id="00000000-0000-0000-0000-000000000000",
            resource_group="rg-security",
            vault_name="kv-prod",
        )
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="KEYREADER_",
        case_sensitive=False,
        extra="ignore",
    )

    # Target vault
    subscription_id: str = Field(
        default="",
        description="Azure subscription ID",
    )

    resource_group: str = Field(
        default="",
        description="Resource group containing the vault",
    )

    vault_name: str = Field(
        default="",
        description="Key vault name",
    )

    # None switches to listing every key in the vault
    key_name: Optional[str] = Field(
        default=None,
        description="Key name (omit to list all keys)",
    )

    # Debug
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    @field_validator("subscription_id", "resource_group", "vault_name")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip surrounding whitespace from identifiers."""
        return v.strip()

    @field_validator("key_name")
    @classmethod
    def empty_key_name_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty key name as absent."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    def missing_fields(self) -> List[str]:
        """Return the CLI flags of required parameters that are empty."""
        return [flag for field, flag in REQUIRED_FLAGS.items() if not getattr(self, field)]

    @property
    def list_mode(self) -> bool:
        """True when no key name was given and every key should be listed."""
        return self.key_name is None


def load_config(**kwargs) -> ReaderConfig:
    """
    Load and validate keyreader configuration.

    Priority order:
    1. Keyword arguments (None values are skipped)
    2. Environment variables (KEYREADER_*)

    Args:
        **kwargs: Override configuration values

    Returns:
        ReaderConfig instance

    Raises:
        ConfigurationError: If a required parameter is missing or a value is invalid
    """
    overrides = {k: v for k, v in kwargs.items() if v is not None}

    try:
        config = ReaderConfig(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"invalid configuration: {e}") from e

    missing = config.missing_fields()
    if missing:
        raise ConfigurationError(
            "-subscription, -resource-group, and -vault are required "
            f"(missing: {', '.join(missing)})",
            missing=missing,
        )

    return config
