"""
Ports - Interfaces for session storage, the identity service, navigation,
token issuance and account storage.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from profile_auth.ports.session_store_port import SessionStorePort
from profile_auth.ports.identity_port import IdentityServicePort
from profile_auth.ports.navigation_port import NavigatorPort, Route
from profile_auth.ports.auth_port import TokenIssuerPort
from profile_auth.ports.account_port import AccountRepositoryPort

__all__ = [
    # Client
    "SessionStorePort",
    "IdentityServicePort",
    "NavigatorPort",
    "Route",
    # Server
    "TokenIssuerPort",
    "AccountRepositoryPort",
]
