"""Google ID token verification using google-auth."""

import logging
from typing import Any

from google.auth.transport import requests as google_requests
from google.oauth2 import id_token
from starlette.concurrency import run_in_threadpool

from app.features.auth.services.protocols import (
    ExternalIdentity,
    IdentityVerificationError,
)

logger = logging.getLogger(__name__)


class GoogleIdentityVerifier:
    """Verifies Google ID tokens against the configured OAuth client id.

    Signature, issuer, expiry and audience are checked by google-auth; the
    certificate fetch is blocking, so verification runs in a worker thread.
    """

    def __init__(self, client_id: str | None):
        self.client_id = client_id
        self._request = google_requests.Request()

    async def verify(self, token: str) -> ExternalIdentity:
        if not self.client_id:
            raise IdentityVerificationError("Google client id is not configured")

        try:
            claims: dict[str, Any] = await run_in_threadpool(
                id_token.verify_oauth2_token, token, self._request, self.client_id
            )
        except Exception as e:
            logger.warning("Google ID token verification failed: %s", e)
            raise IdentityVerificationError(str(e)) from e

        subject_id = claims.get("sub")
        email = claims.get("email")
        if not subject_id or not email:
            raise IdentityVerificationError("Token is missing subject or email")

        email = str(email).strip().lower()
        return ExternalIdentity(
            subject_id=str(subject_id),
            email=email,
            name=claims.get("name") or email.split("@")[0],
            avatar=claims.get("picture"),
        )
