import asyncio

from conftest import FakeProvider
from wallgen.enhancer import PromptEnhancer, escape_subject, sanitize_output
from wallgen.models import TextCompletion


def test_escape_subject_replaces_quotes_and_newlines():
    assert escape_subject('a "big"\ncat\r\n') == "a 'big' cat"
    assert escape_subject(None) == ""


def test_sanitize_output_strips_code_fences():
    assert sanitize_output('```json\n["a", "b"]\n```') == '["a", "b"]'
    assert sanitize_output("```\nplain\n```  ") == "plain"
    assert sanitize_output(None) == ""


def test_invoke_interpolates_escaped_subject():
    provider = FakeProvider(lambda instruction: "ok")
    enhancer = PromptEnhancer(provider)
    result = asyncio.run(
        enhancer.invoke('Input: "{subject}" as {style}', 'say "hi"\nnow', style="Sketch")
    )
    assert result.ok and result.text == "ok"
    instruction, image = provider.calls[0]
    assert instruction == "Input: \"say 'hi' now\" as Sketch"
    assert image is None


def test_invoke_passes_reference_image():
    provider = FakeProvider(lambda instruction: "ok")
    asyncio.run(
        PromptEnhancer(provider).invoke("{subject}", "cat", reference_image="data:image/png;base64,AA==")
    )
    assert provider.calls[0][1] == "data:image/png;base64,AA=="


def test_invoke_returns_provider_error():
    provider = FakeProvider(lambda instruction: TextCompletion(error="quota exceeded"))
    result = asyncio.run(PromptEnhancer(provider).invoke("{subject}", "cat"))
    assert not result.ok
    assert result.error == "quota exceeded"


def test_invoke_absorbs_exceptions():
    provider = FakeProvider(lambda instruction: ConnectionError("network down"))
    result = asyncio.run(PromptEnhancer(provider).invoke("{subject}", "cat"))
    assert not result.ok
    assert "network down" in result.error


def test_invoke_treats_fence_only_output_as_error():
    provider = FakeProvider(lambda instruction: "```json\n```")
    result = asyncio.run(PromptEnhancer(provider).invoke("{subject}", "cat"))
    assert not result.ok
