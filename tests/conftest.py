import random

import pytest

from wallgen.config import EngineConfig, Settings
from wallgen.models import TextCompletion
from wallgen.providers.base_provider import BaseTextProvider


class FakeProvider(BaseTextProvider):
    """Answers each instruction through `respond`, recording every call."""

    def __init__(self, respond):
        self.respond = respond
        self.calls = []
        self.closed = False

    async def complete(self, instruction, image=None):
        self.calls.append((instruction, image))
        reply = self.respond(instruction)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, TextCompletion):
            return reply
        return TextCompletion(text=reply)

    async def close(self):
        self.closed = True


def style_of(instruction):
    # STYLE_TEMPLATE opens with "... prompt for a <style> style image."
    return instruction.split("prompt for a ", 1)[1].split(" style image", 1)[0]


@pytest.fixture
def test_settings():
    return Settings(
        engine=EngineConfig(api_key="test-key"),
        styles=["Realistic", "Watercolor", "Cyberpunk", "Sketch"],
        reserved_script="hebrew",
    )


@pytest.fixture
def rng():
    return random.Random(1234)

