#!/usr/bin/env python3
"""
Vault management script.
Stores provider credentials such as RESEND_API_KEY in the vault_secrets table.
"""

import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from app.domain.models.base import StoreError
from app.infrastructure.db.database import create_all_tables
from app.infrastructure.repositories.secret_repository import get_secret_repository


def set_secret(key_name: str, value: str):
    """Insert or update a secret."""
    metadata = get_secret_repository().set(key_name, value)
    print(f"Stored {metadata['key_name']} (updated {metadata['updated_at']})")


def get_secret(key_name: str):
    """Print a secret value."""
    value = get_secret_repository().get(key_name)
    if value is None:
        print(f"{key_name} is not set")
    else:
        print(value)


def list_secrets():
    """List secret names without values."""
    secrets = get_secret_repository().list()
    if not secrets:
        print("No secrets stored.")
        return
    for secret in secrets:
        print(f"  {secret['key_name']:<30} updated {secret['updated_at']}")


def delete_secret(key_name: str):
    """Delete a secret."""
    get_secret_repository().delete(key_name)
    print(f"Deleted {key_name}")


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_secrets.py [command]")
        print("Commands:")
        print("  set <key> <value>  - Store a secret")
        print("  get <key>          - Show a secret value")
        print("  list               - List secret names")
        print("  delete <key>       - Delete a secret")
        return 1

    command_name = sys.argv[1]
    args = sys.argv[2:]

    create_all_tables()

    try:
        if command_name == "set" and len(args) == 2:
            set_secret(args[0], args[1])
        elif command_name == "get" and len(args) == 1:
            get_secret(args[0])
        elif command_name == "list":
            list_secrets()
        elif command_name == "delete" and len(args) == 1:
            delete_secret(args[0])
        else:
            print(f"Unknown command or wrong arguments: {' '.join(sys.argv[1:])}")
            return 1
    except StoreError as e:
        print(f"Vault error: {e.message}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
