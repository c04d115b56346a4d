"""
Account Repository Port - Interface for registered accounts (server side).

Implementations:
- MemoryAccountRepository: In-memory accounts with salted password hashes
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from profile_auth.domain.account import Account


class AccountRepositoryPort(ABC):
    """Port: Store accounts and check passwords."""

    @abstractmethod
    def create(
        self,
        username: str,
        password: str,
        firstname: str,
        lastname: str,
        profile: Optional[Dict[str, Any]] = None,
    ) -> Account:
        """
        Register a new account.

        Args:
            username: Unique login name
            password: Plain-text password (hashed before storage)
            firstname: Given name
            lastname: Family name
            profile: Additional profile fields

        Returns:
            Created account

        Raises:
            AccountExistsError: If the username is taken
        """
        pass

    @abstractmethod
    def get(self, username: str) -> Optional[Account]:
        """
        Get an account by username.

        Returns:
            Account if found, None otherwise
        """
        pass

    @abstractmethod
    def verify_password(self, username: str, password: str) -> Optional[Account]:
        """
        Check a username/password pair.

        Returns:
            Account if the password matches, None otherwise
        """
        pass
