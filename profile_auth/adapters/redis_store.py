"""
Redis Session Store - Credential kept under a single Redis key.
"""

import logging
from typing import Optional
import redis
from profile_auth.ports.session_store_port import SessionStorePort
from profile_auth.exceptions import SessionStoreError

logger = logging.getLogger(__name__)


class RedisSessionStore(SessionStorePort):
    """
    Redis-backed credential storage.

    Stores the credential as a plain string, optionally with a TTL so an
    abandoned credential expires on its own.
    """

    def __init__(
        self,
        redis_client=None,
        redis_url: str = "redis://localhost:6379/0",
        key: str = "profile_auth:token",
        ttl: Optional[int] = None,
    ):
        """
        Initialize Redis session store.

        Args:
            redis_client: Redis client instance (created from redis_url if omitted)
            redis_url: Connection URL used when no client is given
            key: Redis key holding the credential
            ttl: Optional expiry in seconds
        """
        self._redis = redis_client
        self._redis_url = redis_url
        self._key = key
        self._ttl = ttl

    def _get_redis(self):
        """Lazy load Redis client."""
        if self._redis is None:
            self._redis = redis.Redis.from_url(self._redis_url, decode_responses=True)
        return self._redis

    def get(self) -> Optional[str]:
        try:
            value = self._get_redis().get(self._key)
        except redis.exceptions.RedisError as e:
            logger.warning(f"Session store read failed: {e}")
            return None

        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value or None

    def set(self, credential: str) -> None:
        client = self._get_redis()
        try:
            if self._ttl:
                client.setex(self._key, self._ttl, credential)
            else:
                client.set(self._key, credential)
        except redis.exceptions.RedisError as e:
            logger.warning(f"Session store write failed: {e}")
            raise SessionStoreError(f"Could not store session: {e}") from e

    def clear(self) -> None:
        try:
            self._get_redis().delete(self._key)
        except redis.exceptions.RedisError as e:
            logger.warning(f"Session store clear failed: {e}")
