"""Protocol for external identity verification."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ExternalIdentity:
    """Claims extracted from a verified external identity token."""

    subject_id: str
    email: str
    name: str
    avatar: str | None = None


class IdentityVerificationError(Exception):
    """Raised when an identity token cannot be verified."""


class IdentityVerifier(Protocol):
    """Protocol for services that verify identity provider tokens.

    Implementations must raise `IdentityVerificationError` for every kind of
    failure so callers can report it uniformly.
    """

    async def verify(self, token: str) -> ExternalIdentity:
        """Verify the token and return the identity it asserts."""
        ...
