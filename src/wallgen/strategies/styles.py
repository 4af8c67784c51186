import asyncio
import logging
from typing import List, Optional, Sequence

from wallgen.enhancer import PromptEnhancer
from wallgen.language import HEBREW, ReservedScript
from wallgen.parsing import normalize_prompt
from wallgen.prompts import STYLE_TEMPLATE

logger = logging.getLogger(__name__)


class StyleStrategy:
    """Fans one subject out into one prompt per catalog style, concurrently."""

    def __init__(
        self,
        enhancer: PromptEnhancer,
        catalog: Sequence[str],
        script: ReservedScript = HEBREW,
        filler: str = "an imaginative scene",
    ):
        if not catalog:
            raise ValueError("style catalog must not be empty")
        self.enhancer = enhancer
        self.catalog = tuple(catalog)
        self.script = script
        self.filler = filler

    def fallback(self, style: str, subject: str) -> str:
        subject = normalize_prompt(subject or "")
        if not subject or self.script.found_in(subject):
            subject = self.filler
        return f"{style} style artwork of {subject}"

    async def _branch(
        self, style: str, subject: str, reference_image: Optional[str]
    ) -> str:
        enhancement = await self.enhancer.invoke(
            STYLE_TEMPLATE, subject, reference_image=reference_image, style=style
        )
        if not enhancement.ok:
            logger.warning(f"{style} prompt generation failed: {enhancement.error}")
            return self.fallback(style, subject)
        prompt = normalize_prompt(enhancement.text)
        if not prompt or self.script.found_in(prompt):
            logger.warning(f"{style} prompt was empty or untranslated; using fallback.")
            return self.fallback(style, subject)
        return prompt

    async def run(
        self, subject: str, reference_image: Optional[str] = None
    ) -> List[str]:
        # gather keeps catalog order regardless of completion order
        prompts = await asyncio.gather(
            *(self._branch(style, subject, reference_image) for style in self.catalog)
        )
        return list(prompts)
