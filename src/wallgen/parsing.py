"""Parsing of model output into tagged results.

`parse_prompt_list` tries each entry of `PARSE_ATTEMPTS` in order; the first
attempt that recognises the text decides the result. Consumers only ever see
one of `Parsed`, `Raw` or `Failed`.
"""

import json
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

_DECODER = json.JSONDecoder()
_WHITESPACE = re.compile(r"\s+")
_QUOTES = "\"'`“”‘’"


@dataclass(frozen=True)
class Parsed:
    prompts: List[str]


@dataclass(frozen=True)
class Raw:
    text: str


@dataclass(frozen=True)
class Failed:
    reason: str


ParseResult = Union[Parsed, Raw, Failed]


def normalize_prompt(text: str) -> str:
    """Collapses whitespace and strips wrapping quotes."""
    text = _WHITESPACE.sub(" ", text).strip()
    while len(text) >= 2 and text[0] in _QUOTES and text[-1] in _QUOTES:
        text = text[1:-1].strip()
    return text


def _string_items(items: list) -> List[str]:
    prompts = []
    for item in items:
        if isinstance(item, str):
            prompt = normalize_prompt(item)
            if prompt:
                prompts.append(prompt)
    return prompts


def _as_json(text: str) -> Optional[ParseResult]:
    try:
        value = json.loads(text)
    except ValueError:
        return None
    if isinstance(value, list):
        return Parsed(_string_items(value))
    if isinstance(value, str):
        return Raw(normalize_prompt(value)) if value.strip() else Failed("empty string")
    if isinstance(value, dict):
        # e.g. {"prompts": [...]}
        for item in value.values():
            if isinstance(item, list):
                prompts = _string_items(item)
                if prompts:
                    return Parsed(prompts)
        return Failed("unexpected JSON object")
    return Failed(f"unexpected JSON {type(value).__name__}")


def _as_embedded_array(text: str) -> Optional[ParseResult]:
    start = text.find("[")
    while start != -1:
        try:
            value, _ = _DECODER.raw_decode(text, start)
        except ValueError:
            value = None
        if isinstance(value, list):
            return Parsed(_string_items(value))
        start = text.find("[", start + 1)
    return None


def _as_raw(text: str) -> Optional[ParseResult]:
    prompt = normalize_prompt(text)
    return Raw(prompt) if prompt else None


PARSE_ATTEMPTS: Tuple[Callable[[str], Optional[ParseResult]], ...] = (
    _as_json,
    _as_embedded_array,
    _as_raw,
)


def parse_prompt_list(text: Optional[str]) -> ParseResult:
    if not text or not text.strip():
        return Failed("empty response")
    for attempt in PARSE_ATTEMPTS:
        result = attempt(text)
        if result is not None:
            return result
    return Failed("unrecognised response")
