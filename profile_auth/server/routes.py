"""
Auth routes - login, registration and the current user's profile.
"""

import logging

from fastapi import APIRouter, Depends, status

from profile_auth.config import Settings
from profile_auth.domain.account import Account
from profile_auth.exceptions import InvalidCredentialsError
from profile_auth.ports.account_port import AccountRepositoryPort
from profile_auth.ports.auth_port import TokenIssuerPort
from profile_auth.server.dependencies import (
    get_accounts,
    get_current_account,
    get_settings_dep,
    get_tokens,
)
from profile_auth.server.schemas import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
    UserEnvelope,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest,
    accounts: AccountRepositoryPort = Depends(get_accounts),
) -> MessageResponse:
    """
    Register a new account.

    Raises:
        409: If the username is taken
        400: If a required field is missing or empty
    """
    accounts.create(
        username=body.username,
        password=body.password,
        firstname=body.firstname,
        lastname=body.lastname,
        profile=body.extra_profile,
    )
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    accounts: AccountRepositoryPort = Depends(get_accounts),
    tokens: TokenIssuerPort = Depends(get_tokens),
    settings: Settings = Depends(get_settings_dep),
) -> TokenResponse:
    """
    Exchange a username and password for a bearer token.

    Raises:
        401: If the credentials do not match
    """
    account = accounts.verify_password(body.username, body.password)
    if account is None:
        logger.info(f"Failed login for {body.username}")
        raise InvalidCredentialsError()

    account.record_login()
    token = tokens.create_token(account.username, expires_in=settings.TOKEN_TTL_SECONDS)
    logger.info(f"Issued token for {account.username}")
    return TokenResponse(token=token)


@router.get("/user/me", response_model=UserEnvelope)
async def get_me(account: Account = Depends(get_current_account)) -> UserEnvelope:
    """
    Get the current authenticated user's profile.

    Raises:
        401: If not authenticated
    """
    return UserEnvelope(user=account.to_dict())
