"""
Request/response models for the auth API.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Keys the account itself owns; extra registration fields may not shadow them.
RESERVED_PROFILE_KEYS = frozenset({
    "username",
    "password",
    "password_hash",
    "firstname",
    "lastname",
    "created_at",
    "last_login",
})


class LoginRequest(BaseModel):
    """Credentials submitted to POST /login."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    """
    Profile submitted to POST /register.

    Names are stripped before validation, so whitespace-only names are
    rejected the same way the client rejects them in identity payloads.
    Any extra fields (email, bio, ...) are kept as profile data.
    """
    model_config = ConfigDict(extra="allow")

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    firstname: str = Field(..., min_length=1)
    lastname: str = Field(..., min_length=1)

    @field_validator("firstname", "lastname", mode="before")
    @classmethod
    def strip_names(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def extra_profile(self) -> Dict[str, Any]:
        return {
            key: value
            for key, value in (self.model_extra or {}).items()
            if key not in RESERVED_PROFILE_KEYS
        }


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str


class UserEnvelope(BaseModel):
    user: Dict[str, Any]
