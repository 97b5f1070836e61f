"""Service protocols for the auth feature."""

from .identity_verifier import (
    ExternalIdentity,
    IdentityVerificationError,
    IdentityVerifier,
)

__all__ = ["ExternalIdentity", "IdentityVerificationError", "IdentityVerifier"]
