"""Unit tests for the LangChain insight generator."""

import json

import httpx
import openai
import pytest
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda

from app.core.settings import Settings
from app.features.insights.services.errors import (
    ProviderAuthenticationError,
    ProviderError,
)
from app.features.insights.services.langchain_insight_generator import (
    LangChainInsightGenerator,
)


def _generator_with_chain(settings: Settings, chain) -> LangChainInsightGenerator:
    generator = LangChainInsightGenerator(settings)
    generator.chain = RunnableLambda(chain)
    return generator


def _authentication_error() -> openai.AuthenticationError:
    request = httpx.Request("POST", "https://openrouter.ai/api/v1/chat/completions")
    response = httpx.Response(401, request=request)
    return openai.AuthenticationError("Invalid key", response=response, body=None)


@pytest.mark.asyncio
class TestLangChainInsightGenerator:
    """Test suite for LangChainInsightGenerator."""

    async def test_returns_reply_and_model(self, test_settings: Settings):
        """The reply text and the reported model name are returned."""
        received: list[dict] = []

        def chain(inputs: dict) -> AIMessage:
            received.append(inputs)
            return AIMessage(
                content="Views doubled this week.",
                response_metadata={"model_name": "openai/gpt-4o-mini-2024"},
            )

        generator = _generator_with_chain(test_settings, chain)

        result = await generator.generate("How are my entities doing?")

        assert received == [{"prompt": "How are my entities doing?"}]
        assert result.content == "Views doubled this week."
        assert result.model == "openai/gpt-4o-mini-2024"

    async def test_falls_back_to_configured_model(self, test_settings: Settings):
        """Without model metadata the configured model name is reported."""
        generator = _generator_with_chain(
            test_settings, lambda _inputs: AIMessage(content="ok")
        )

        result = await generator.generate("prompt")

        assert result.model == test_settings.insight_model

    async def test_authentication_failure(self, test_settings: Settings):
        """A 401 from the provider becomes ProviderAuthenticationError."""

        def chain(_inputs: dict) -> AIMessage:
            raise _authentication_error()

        generator = _generator_with_chain(test_settings, chain)

        with pytest.raises(ProviderAuthenticationError):
            await generator.generate("prompt")

    async def test_other_failure(self, test_settings: Settings):
        """Any other failure becomes a plain ProviderError."""

        def chain(_inputs: dict) -> AIMessage:
            raise TimeoutError("upstream timed out")

        generator = _generator_with_chain(test_settings, chain)

        with pytest.raises(ProviderError) as exc_info:
            await generator.generate("prompt")

        assert not isinstance(exc_info.value, ProviderAuthenticationError)

    async def test_missing_api_key(self, test_settings: Settings):
        """Without a key nothing is called and the failure is an auth error."""
        settings = test_settings.model_copy(update={"insight_provider_api_key": None})
        generator = LangChainInsightGenerator(settings)

        assert generator.chain is None
        with pytest.raises(ProviderAuthenticationError):
            await generator.generate("prompt")


def _completion(content: str, model: str) -> dict:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 1714000000,
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 3, "completion_tokens": 5, "total_tokens": 8},
    }


@pytest.mark.asyncio
class TestLangChainInsightGeneratorOverHttp:
    """Exercises the real ChatOpenAI client against a stubbed transport."""

    async def test_sends_prompt_and_attribution_headers(self, test_settings: Settings):
        """One chat completion request carries the prompt, model and headers."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=_completion("All good.", "test/model-v2"))

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            generator = LangChainInsightGenerator(test_settings, http_async_client=http)
            result = await generator.generate("How am I doing?")

        assert result.content == "All good."
        assert result.model == "test/model-v2"
        assert len(requests) == 1
        sent = requests[0]
        assert sent.url.path == "/api/v1/chat/completions"
        assert sent.headers["Authorization"] == "Bearer test-provider-key"
        assert sent.headers["X-Title"] == test_settings.insight_app_title
        assert sent.headers["HTTP-Referer"] == test_settings.frontend_url
        body = json.loads(sent.content)
        assert body["model"] == test_settings.insight_model
        assert len(body["messages"]) == 1
        assert body["messages"][0]["role"] == "user"
        assert body["messages"][0]["content"] == "How am I doing?"

    async def test_failed_call_reaches_provider_once(self, test_settings: Settings):
        """A provider error is not retried."""
        hits: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            hits.append(request.url.path)
            return httpx.Response(500, json={"error": {"message": "upstream down"}})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            generator = LangChainInsightGenerator(test_settings, http_async_client=http)
            with pytest.raises(ProviderError) as exc_info:
                await generator.generate("hello")

        assert not isinstance(exc_info.value, ProviderAuthenticationError)
        assert hits == ["/api/v1/chat/completions"]

    async def test_rejected_key_reaches_provider_once(self, test_settings: Settings):
        """A 401 is reported as an authentication failure after a single request."""
        hits: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            hits.append(request.url.path)
            return httpx.Response(401, json={"error": {"message": "No auth"}})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            generator = LangChainInsightGenerator(test_settings, http_async_client=http)
            with pytest.raises(ProviderAuthenticationError):
                await generator.generate("hello")

        assert len(hits) == 1
