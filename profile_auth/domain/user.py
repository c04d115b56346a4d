"""
User Domain Model - The authenticated user as seen by the client.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Mapping
from profile_auth.exceptions import InvalidUserError


REQUIRED_NAME_FIELDS = ("firstname", "lastname")


@dataclass(frozen=True)
class User:
    """
    User entity - the single source of truth for "who is logged in".

    Domain rules:
    - firstname and lastname are required non-empty strings
    - any other profile fields are carried through untouched
    """
    firstname: str
    lastname: str
    profile: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "User":
        """
        Build a User from an identity payload.

        Args:
            data: The `user` object returned by the identity service

        Returns:
            Validated user

        Raises:
            InvalidUserError: If a name field is missing, not a string or blank
        """
        if not isinstance(data, Mapping):
            raise InvalidUserError(REQUIRED_NAME_FIELDS[0])

        for name in REQUIRED_NAME_FIELDS:
            value = data.get(name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidUserError(name)

        extras = {k: v for k, v in data.items() if k not in REQUIRED_NAME_FIELDS}
        return cls(
            firstname=data["firstname"],
            lastname=data["lastname"],
            profile=extras,
        )

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}"

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a profile field (name fields included)."""
        return self.to_dict().get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the flat payload shape."""
        return {
            **self.profile,
            "firstname": self.firstname,
            "lastname": self.lastname,
        }
