import logging
import re
from dataclasses import dataclass
from typing import Optional

from wallgen.providers.base_provider import BaseTextProvider

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```[A-Za-z0-9_-]*")
_LINE_BREAKS = re.compile(r"[\r\n\t]+")


@dataclass(frozen=True)
class Enhancement:
    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.text)


def escape_subject(subject: Optional[str]) -> str:
    """Makes user text safe to embed inside a double-quoted template slot."""
    if not subject:
        return ""
    escaped = subject.replace('"', "'")
    escaped = _LINE_BREAKS.sub(" ", escaped)
    return escaped.strip()


def sanitize_output(text: Optional[str]) -> str:
    if not text:
        return ""
    return _CODE_FENCE.sub("", text).strip()


class PromptEnhancer:
    """Translation/enhancement client: one model call per `invoke`."""

    def __init__(self, provider: BaseTextProvider):
        self.provider = provider

    def build_instruction(self, template: str, subject: str, **fields) -> str:
        return template.format(subject=escape_subject(subject), **fields)

    async def invoke(
        self,
        template: str,
        subject: str,
        *,
        reference_image: Optional[str] = None,
        **fields,
    ) -> Enhancement:
        instruction = self.build_instruction(template, subject, **fields)
        try:
            completion = await self.provider.complete(instruction, image=reference_image)
        except Exception as e:
            logger.warning(f"Enhancement call raised {type(e).__name__}: {e}")
            return Enhancement(error=str(e) or type(e).__name__)

        if completion.error:
            return Enhancement(error=completion.error)
        cleaned = sanitize_output(completion.text)
        if not cleaned:
            return Enhancement(error="Empty response from text-generation model.")
        return Enhancement(text=cleaned)
