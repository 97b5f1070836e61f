"""Insight generation through an OpenAI-compatible chat endpoint."""

import logging
from typing import Any

import httpx
import openai
from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.runnables import Runnable
from langchain_openai import ChatOpenAI
from pydantic import SecretStr

from app.core.settings import Settings
from app.features.insights.services.errors import (
    ProviderAuthenticationError,
    ProviderError,
)
from app.features.insights.services.protocols import GeneratedText

logger = logging.getLogger(__name__)


class LangChainInsightGenerator:
    """Sends the user's prompt as a single chat message and returns the reply.

    The endpoint defaults to OpenRouter, which routes `insight_model` to the
    upstream vendor. Each call reaches the provider exactly once; the openai
    client's automatic retries are turned off. Without an API key the chain
    is never built and every call fails as an authentication error.
    """

    chain: Runnable[dict[str, Any], BaseMessage] | None

    def __init__(
        self,
        settings: Settings,
        http_async_client: httpx.AsyncClient | None = None,
    ):
        self.model = settings.insight_model

        if not settings.insight_provider_api_key:
            logger.warning("Insight provider API key not set; generation disabled")
            self.chain = None
            return

        prompt = ChatPromptTemplate.from_messages([("human", "{prompt}")])

        llm = ChatOpenAI(
            model=settings.insight_model,
            api_key=SecretStr(settings.insight_provider_api_key),
            base_url=settings.insight_provider_base_url,
            max_tokens=settings.insight_max_tokens,
            max_retries=0,
            http_async_client=http_async_client,
            default_headers={
                "HTTP-Referer": settings.frontend_url,
                "X-Title": settings.insight_app_title,
            },
        )
        self.chain = prompt | llm

    async def generate(self, prompt: str) -> GeneratedText:
        """Generate text for a prompt.

        Returns:
            The reply text and the model name reported by the provider
        """
        if self.chain is None:
            raise ProviderAuthenticationError("Insight provider API key not set")

        try:
            message = await self.chain.ainvoke({"prompt": prompt})
        except openai.AuthenticationError as e:
            raise ProviderAuthenticationError(str(e)) from e
        except Exception as e:
            raise ProviderError(str(e)) from e

        content = message.content
        if not isinstance(content, str):
            content = "".join(
                part if isinstance(part, str) else part.get("text", "")
                for part in content
            )
        model = message.response_metadata.get("model_name") or self.model
        return GeneratedText(content=content, model=model)
