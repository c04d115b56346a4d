"""
JWT Token Issuer - Implements TokenIssuerPort with signed JWT bearer tokens.
"""

import logging
import jwt
from datetime import datetime, timedelta, timezone
from typing import Optional
from profile_auth.ports.auth_port import TokenIssuerPort

logger = logging.getLogger(__name__)


class JWTTokenIssuer(TokenIssuerPort):
    """
    JWT-based token issuer.

    Uses PyJWT for token creation and verification. Tokens carry only the
    account's username as `sub`; profile data is served by /user/me.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        issuer: str = "profile-auth",
    ):
        """
        Initialize JWT issuer.

        Args:
            secret: JWT signing secret
            algorithm: JWT algorithm (default HS256)
            issuer: Token issuer claim
        """
        self._secret = secret
        self._algorithm = algorithm
        self._issuer = issuer

    def create_token(self, subject: str, expires_in: int = 3600) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": subject,
            "iat": now,
            "exp": now + timedelta(seconds=expires_in),
            "iss": self._issuer,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def authenticate(self, token: str) -> Optional[str]:
        if not token:
            return None

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                issuer=self._issuer,
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            return None
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected invalid token: {e}")
            return None

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            return None
        return subject
