"""
Memory Account Repository - In-memory accounts with salted password hashes.
"""

import hashlib
import hmac
import logging
import secrets
from typing import Any, Dict, Optional
from profile_auth.ports.account_port import AccountRepositoryPort
from profile_auth.domain.account import Account
from profile_auth.exceptions import AccountExistsError

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 200_000


class MemoryAccountRepository(AccountRepositoryPort):
    """
    In-memory account storage.

    Passwords are stored as PBKDF2-SHA256 hashes with a per-account salt,
    encoded as "pbkdf2_sha256$<iterations>$<salt>$<hex digest>".
    Accounts are lost on restart.
    """

    def __init__(self, iterations: int = PBKDF2_ITERATIONS):
        """
        Initialize repository.

        Args:
            iterations: PBKDF2 work factor (lower it in tests)
        """
        self._iterations = iterations
        # Format: {username: Account}
        self._accounts: Dict[str, Account] = {}

    def create(
        self,
        username: str,
        password: str,
        firstname: str,
        lastname: str,
        profile: Optional[Dict[str, Any]] = None,
    ) -> Account:
        if username in self._accounts:
            raise AccountExistsError(username)

        account = Account(
            username=username,
            password_hash=self._hash_password(password),
            firstname=firstname,
            lastname=lastname,
            profile=dict(profile or {}),
        )
        self._accounts[username] = account
        logger.info(f"Registered account {username}")
        return account

    def get(self, username: str) -> Optional[Account]:
        return self._accounts.get(username)

    def verify_password(self, username: str, password: str) -> Optional[Account]:
        account = self._accounts.get(username)
        if account is None:
            # Burn the same work so unknown usernames are not cheaper to probe
            self._hash_password(password)
            return None

        if not self._check_password(password, account.password_hash):
            return None
        return account

    def __len__(self) -> int:
        return len(self._accounts)

    def _hash_password(self, password: str, salt: Optional[str] = None) -> str:
        """Hash a password with PBKDF2-SHA256."""
        salt = salt or secrets.token_hex(16)
        digest = hashlib.pbkdf2_hmac(
            "sha256", password.encode(), salt.encode(), self._iterations
        )
        return f"pbkdf2_sha256${self._iterations}${salt}${digest.hex()}"

    @staticmethod
    def _check_password(password: str, encoded: str) -> bool:
        """Compare a password against an encoded hash in constant time."""
        try:
            _, iterations, salt, expected = encoded.split("$")
            rounds = int(iterations)
        except ValueError:
            return False

        digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), rounds)
        return hmac.compare_digest(digest.hex(), expected)
