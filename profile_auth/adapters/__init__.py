"""
Adapters - Implementations of ports.

Session Stores (client credential):
- MemorySessionStore: In-process storage (testing)
- FileSessionStore: JSON document on disk
- RedisSessionStore: Single Redis key

Identity Service:
- HttpIdentityService: httpx client for /login, /user/me, /register

Navigation:
- RecordingNavigator: Keeps a navigation history
- CallbackNavigator: Delegates to a UI callback

Server:
- JWTTokenIssuer: JWT bearer tokens
- MemoryAccountRepository: In-memory accounts with hashed passwords
"""

# Session Stores
from profile_auth.adapters.memory_store import MemorySessionStore
from profile_auth.adapters.file_store import FileSessionStore
from profile_auth.adapters.redis_store import RedisSessionStore

# Identity Service
from profile_auth.adapters.http_identity import HttpIdentityService

# Navigation
from profile_auth.adapters.navigator import RecordingNavigator, CallbackNavigator

# Server
from profile_auth.adapters.jwt_auth import JWTTokenIssuer
from profile_auth.adapters.memory_accounts import MemoryAccountRepository

__all__ = [
    # Session Stores
    "MemorySessionStore",
    "FileSessionStore",
    "RedisSessionStore",
    # Identity Service
    "HttpIdentityService",
    # Navigation
    "RecordingNavigator",
    "CallbackNavigator",
    # Server
    "JWTTokenIssuer",
    "MemoryAccountRepository",
]
