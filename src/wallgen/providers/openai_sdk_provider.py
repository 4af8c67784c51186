import json
import logging
from openai import AsyncOpenAI, OpenAIError
from typing import Optional

from wallgen.config import EngineConfig
from wallgen.models import TextCompletion
from wallgen.providers.base_provider import BaseTextProvider

logger = logging.getLogger(__name__)


class OpenAISDKProvider(BaseTextProvider):
    """Chat-completions provider for any OpenAI-compatible endpoint (Gemini by default)."""

    def __init__(self, engine_config: EngineConfig, verbose: bool = False):
        self.config = engine_config
        self.verbose = verbose
        self.client_params = {
            "api_key": self.config.api_key,
            "timeout": self.config.timeout,
            # Each call is attempted exactly once; callers supply fallbacks.
            "max_retries": 0,
        }
        if self.config.base_url:
            self.client_params["base_url"] = str(self.config.base_url)
        self.async_client = AsyncOpenAI(**self.client_params)

    def build_messages(self, instruction: str, image: Optional[str] = None) -> list:
        content_items = [{"type": "text", "text": instruction}]
        if image:
            content_items.append({"type": "image_url", "image_url": {"url": image}})
        return [{"role": "user", "content": content_items}]

    async def complete(
        self, instruction: str, image: Optional[str] = None
    ) -> TextCompletion:
        messages = self.build_messages(instruction, image)
        if self.verbose:
            logger.debug(
                "Chat completion request: %s",
                json.dumps({"model": self.config.model, "messages": messages})[:2000],
            )
        try:
            completion = await self.async_client.chat.completions.create(
                model=self.config.model,
                messages=messages,
            )
        except OpenAIError as e:
            logger.warning(f"Text generation call failed ({self.config.model}): {e}")
            return TextCompletion(error=str(e))

        try:
            content = completion.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            return TextCompletion(error=f"Malformed completion response: {e}")
        if not content:
            return TextCompletion(error="No content returned from chat completion.")
        return TextCompletion(text=content)

    async def close(self):
        await self.async_client.close()
