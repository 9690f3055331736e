"""
Secret repository interface.
Key/value storage for sensitive configuration such as provider API keys.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class SecretRepository(ABC):
    """
    Repository interface for vault secrets.
    All backend failures surface as StoreError.
    """

    @abstractmethod
    def get(self, key_name: str) -> Optional[str]:
        """
        Return the secret value, or None when the key does not exist.
        """
        pass

    @abstractmethod
    def set(self, key_name: str, value: str) -> Dict[str, Any]:
        """
        Insert or update a secret. Returns its metadata (no value).
        """
        pass

    @abstractmethod
    def list(self) -> List[Dict[str, Any]]:
        """
        List secret metadata ordered by key name. Values are never returned.
        """
        pass

    @abstractmethod
    def delete(self, key_name: str) -> bool:
        """
        Delete a secret. Deleting a missing key is not an error.
        """
        pass
