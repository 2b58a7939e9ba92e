"""
Basic keyreader usage example.

This example demonstrates the library side of keyreader:
- Loading configuration from KEYREADER_* environment variables
- Fetching a single key and inspecting its fields
- Walking every key in the vault

Run with:
    KEYREADER_SUBSCRIPTION_ID=... KEYREADER_RESOURCE_GROUP=... KEYREADER_VAULT_NAME=... \
        python examples/basic_usage.py
"""

from keyreader import KeyInspector, KeyNotFoundError, KeyVaultKeysClient, format_timestamp, load_config


def main():
    # Loads subscription, resource group and vault from the environment
    config = load_config()

    with KeyVaultKeysClient.create(config) as client:
        # =================================================================
        # 1. Walk the vault
        # =================================================================
        print("Scanning keys...")

        expiring = []
        for record in client.list_keys():
            if record.attributes and record.attributes.expires:
                expiring.append(record)
            print(f"  {record.name}: {record.kty} {record.key_size or record.curve_name or ''}")

        # =================================================================
        # 2. Keys with an expiry date
        # =================================================================
        print("\nKeys with an expiry date:")
        for record in sorted(expiring, key=lambda r: r.attributes.expires):
            print(f"  {record.name} expires {format_timestamp(record.attributes.expires)}")

        # =================================================================
        # 3. One key, printed the way the CLI prints it
        # =================================================================
        print()
        try:
            KeyInspector(client, config).show_key("cmk-storage")
        except KeyNotFoundError as e:
            print(f"cmk-storage not found: {e}")


if __name__ == "__main__":
    main()
