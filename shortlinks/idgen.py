"""Identifier and edit key generation."""

import secrets
import string
from typing import Optional

from .keys import redirect_key
from .store.base import KeyValueStoreBase


class IdGenerator:
    """Generate random alphanumeric identifiers and edit keys."""

    # Base62 characters (alphanumeric, case-sensitive)
    ALPHABET = string.ascii_letters + string.digits

    def __init__(self, length: int = 10):
        """Initialize generator.

        Args:
            length: Length of generated identifiers and edit keys
        """
        if length < 1:
            raise ValueError("length must be positive")
        self.length = length

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random string.

        Also used for edit keys, which are never checked for uniqueness.

        Args:
            length: Length of the string (uses default if not specified)

        Returns:
            Random alphanumeric string
        """
        if length is None:
            length = self.length
        if length < 1:
            raise ValueError("length must be positive")
        return "".join(secrets.choice(self.ALPHABET) for _ in range(length))

    async def generate_unique_id(self, store: KeyValueStoreBase) -> str:
        """Generate an identifier that no redirect currently uses.

        Retries until an unused candidate is found. Store failures propagate
        as ``StoreError``; they are never taken to mean "available".

        Args:
            store: Store to check candidates against

        Returns:
            Unused identifier
        """
        while True:
            candidate = self.generate_random()
            if await store.get(redirect_key(candidate)) is None:
                return candidate

    @classmethod
    def is_valid_format(cls, code: str) -> bool:
        """Check if code only uses generator characters."""
        return bool(code) and all(c in cls.ALPHABET for c in code)
