"""
FastAPI application factory for the auth backend.

Usage:
    uvicorn profile_auth.server.app:create_app --factory
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from profile_auth import __version__
from profile_auth.adapters.jwt_auth import JWTTokenIssuer
from profile_auth.adapters.memory_accounts import MemoryAccountRepository
from profile_auth.config import Settings, get_settings
from profile_auth.exceptions import APIError
from profile_auth.ports.account_port import AccountRepositoryPort
from profile_auth.ports.auth_port import TokenIssuerPort
from profile_auth.server.routes import router

logger = logging.getLogger(__name__)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render APIError as {"message": ...}."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as a 400 with the first problem."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"message": message})


def create_app(
    settings: Optional[Settings] = None,
    accounts: Optional[AccountRepositoryPort] = None,
    tokens: Optional[TokenIssuerPort] = None,
) -> FastAPI:
    """
    Build the auth API.

    Args:
        settings: Settings (defaults to the process-wide settings)
        accounts: Account repository (defaults to an in-memory one)
        tokens: Token issuer (defaults to a JWT issuer from settings)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(title="Profile Auth API", version=__version__)
    app.state.settings = settings
    app.state.accounts = accounts or MemoryAccountRepository()
    app.state.tokens = tokens or JWTTokenIssuer(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        issuer=settings.JWT_ISSUER,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        allow_credentials=True,
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(router)

    logger.info(f"Auth API configured (CORS origins: {settings.cors_origins_list})")
    return app
