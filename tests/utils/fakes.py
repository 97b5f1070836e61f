"""In-process stand-ins for external providers."""

from app.features.auth.services.protocols import (
    ExternalIdentity,
    IdentityVerificationError,
)
from app.features.insights.services.errors import ProviderError
from app.features.insights.services.protocols import GeneratedText


class FakeIdentityVerifier:
    """Accepts the tokens it was told about and rejects everything else."""

    def __init__(self):
        self.identities: dict[str, ExternalIdentity] = {}

    def register(
        self,
        token: str,
        subject_id: str,
        email: str,
        name: str = "Google User",
        avatar: str | None = None,
    ) -> None:
        self.identities[token] = ExternalIdentity(
            subject_id=subject_id, email=email, name=name, avatar=avatar
        )

    async def verify(self, token: str) -> ExternalIdentity:
        identity = self.identities.get(token)
        if identity is None:
            raise IdentityVerificationError("Unknown token")
        return identity


class FakeInsightGenerator:
    """Returns a canned reply, or raises the configured error."""

    def __init__(self, content: str = "Engagement is trending up.", model: str = "test/model"):
        self.content = content
        self.model = model
        self.error: ProviderError | None = None
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> GeneratedText:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return GeneratedText(content=self.content, model=self.model)
