"""Per-client request rate limiting."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.settings import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Create the application-wide limiter.

    The limit is one window per client address shared by every route.
    Requests whose method no route accepts (such as a bare OPTIONS) are
    not counted. `X-RateLimit-*` headers are added to limited responses.
    """
    return Limiter(
        key_func=get_remote_address,
        application_limits=[settings.rate_limit],
        headers_enabled=True,
        enabled=settings.rate_limit_enabled,
    )
