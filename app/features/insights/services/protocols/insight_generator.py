"""Protocol for text-generation providers."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class GeneratedText:
    """Text produced by a provider and the model that produced it."""

    content: str
    model: str


class InsightGenerator(Protocol):
    """Turns a free-form prompt into generated text."""

    async def generate(self, prompt: str) -> GeneratedText:
        """Generate text for a prompt.

        Raises:
            ProviderAuthenticationError: if the provider rejected the credentials
            ProviderError: for any other provider failure
        """
        ...
