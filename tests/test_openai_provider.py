import asyncio
from types import SimpleNamespace

import httpx
import openai

from wallgen.config import EngineConfig
from wallgen.providers.openai_sdk_provider import OpenAISDKProvider


class StubCompletions:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.kwargs = None

    async def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error:
            raise self.error
        return self.reply


def provider_with(completions):
    provider = OpenAISDKProvider(EngineConfig(api_key="test-key"))
    provider.async_client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return provider


def reply(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def test_client_points_at_configured_endpoint_without_retries():
    provider = OpenAISDKProvider(EngineConfig(api_key="test-key"))
    assert provider.client_params["max_retries"] == 0
    assert "generativelanguage.googleapis.com" in provider.client_params["base_url"]
    asyncio.run(provider.close())


def test_build_messages_attaches_image():
    provider = OpenAISDKProvider(EngineConfig(api_key="test-key"))
    messages = provider.build_messages("describe", "data:image/png;base64,AA==")
    assert messages[0]["content"] == [
        {"type": "text", "text": "describe"},
        {"type": "image_url", "image_url": {"url": "data:image/png;base64,AA=="}},
    ]
    assert len(provider.build_messages("describe")[0]["content"]) == 1


def test_complete_returns_text():
    completions = StubCompletions(reply=reply("A cat"))
    result = asyncio.run(provider_with(completions).complete("translate"))
    assert result.text == "A cat"
    assert result.error is None
    assert completions.kwargs["model"] == "gemini-2.5-flash"


def test_complete_converts_api_errors():
    request = httpx.Request("POST", "https://example.invalid/chat/completions")
    completions = StubCompletions(error=openai.APIConnectionError(request=request))
    result = asyncio.run(provider_with(completions).complete("translate"))
    assert result.text is None
    assert result.error


def test_complete_reports_empty_content():
    result = asyncio.run(provider_with(StubCompletions(reply=reply(None))).complete("x"))
    assert result.error == "No content returned from chat completion."


def test_complete_reports_malformed_response():
    result = asyncio.run(provider_with(StubCompletions(reply=SimpleNamespace(choices=[]))).complete("x"))
    assert "Malformed" in result.error
