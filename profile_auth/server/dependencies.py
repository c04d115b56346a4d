"""
FastAPI dependencies - collaborators from app.state and bearer auth.

Usage:
    @router.get("/protected")
    async def protected(account: Account = Depends(get_current_account)):
        return {"username": account.username}
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from profile_auth.config import Settings
from profile_auth.domain.account import Account
from profile_auth.exceptions import AuthenticationRequiredError
from profile_auth.ports.account_port import AccountRepositoryPort
from profile_auth.ports.auth_port import TokenIssuerPort

logger = logging.getLogger(__name__)

# auto_error=False so a missing header goes through our {"message"} errors
security = HTTPBearer(auto_error=False)


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_accounts(request: Request) -> AccountRepositoryPort:
    return request.app.state.accounts


def get_tokens(request: Request) -> TokenIssuerPort:
    return request.app.state.tokens


async def get_current_account(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenIssuerPort = Depends(get_tokens),
    accounts: AccountRepositoryPort = Depends(get_accounts),
) -> Account:
    """
    Resolve the bearer token to a registered account.

    Raises:
        AuthenticationRequiredError: 401 if the token is missing, invalid,
            expired, or names an unknown account
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationRequiredError("Missing bearer token")

    username = tokens.authenticate(credentials.credentials)
    if username is None:
        raise AuthenticationRequiredError("Invalid or expired token")

    account = accounts.get(username)
    if account is None:
        logger.warning(f"Token subject has no account: {username}")
        raise AuthenticationRequiredError("Unknown account")

    return account
