"""Abstract base class for key-value store implementations."""

from abc import ABC, abstractmethod
from typing import Optional, Set


class KeyValueStoreBase(ABC):
    """Minimal key-value interface the redirect records are kept in.

    No operation spans more than one key; callers must not assume that two
    calls are applied atomically.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get the value stored under a key.

        Args:
            key: The key to lookup

        Returns:
            The stored value, or None if the key is absent
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value.

        Args:
            key: The key to write
            value: The value to store
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a key.

        Args:
            key: The key to delete

        Returns:
            True if the key existed
        """
        pass

    @abstractmethod
    async def set_add(self, set_key: str, member: str) -> bool:
        """Add a member to a set.

        Returns:
            True if the member was not present before
        """
        pass

    @abstractmethod
    async def set_remove(self, set_key: str, member: str) -> bool:
        """Remove a member from a set.

        Returns:
            True if the member was present
        """
        pass

    @abstractmethod
    async def set_members(self, set_key: str) -> Set[str]:
        """Get all members of a set (empty if the set does not exist)."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass
