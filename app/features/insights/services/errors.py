"""Errors raised by text-generation providers."""


class ProviderError(Exception):
    """The provider call failed."""


class ProviderAuthenticationError(ProviderError):
    """The provider rejected, or was never given, an API key."""
