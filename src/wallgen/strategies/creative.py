import logging
from typing import List, Optional

from wallgen.enhancer import PromptEnhancer
from wallgen.language import HEBREW, ReservedScript
from wallgen.parsing import Parsed, ParseResult, Raw, parse_prompt_list
from wallgen.prompts import CREATIVE_TEMPLATE, EDITING_CONTEXT, NEW_IMAGE_CONTEXT

logger = logging.getLogger(__name__)


def fit_to_count(prompts: List[str], count: int) -> List[str]:
    """Takes the first `count` prompts, repeating the last one if there are fewer."""
    fitted = prompts[:count]
    while len(fitted) < count:
        fitted.append(fitted[-1])
    return fitted


class CreativeStrategy:
    def __init__(
        self,
        enhancer: PromptEnhancer,
        script: ReservedScript = HEBREW,
        fallback_prompt: str = "artistic masterpiece, high quality",
    ):
        self.enhancer = enhancer
        self.script = script
        self.fallback_prompt = fallback_prompt

    def fallback(self) -> str:
        # The subject may be untranslated in any language, so it is never reused.
        return self.fallback_prompt

    def resolve(self, result: ParseResult, count: int) -> List[str]:
        if isinstance(result, Parsed):
            clean = [p for p in result.prompts if not self.script.found_in(p)]
            if clean:
                if len(clean) < count:
                    logger.info(
                        f"Model returned {len(clean)} usable prompts for {count} requested; repeating the last one."
                    )
                return fit_to_count(clean, count)
            logger.warning("No usable prompts in the model's JSON array; using fallback.")
        elif isinstance(result, Raw):
            if not self.script.found_in(result.text):
                return [result.text] * count
            logger.warning("Freeform model output was not translated; using fallback.")
        else:
            logger.warning(f"Could not parse creative prompts ({result.reason}); using fallback.")
        return [self.fallback()] * count

    async def run(
        self,
        subject: str,
        count: int,
        is_editing: bool = False,
        reference_image: Optional[str] = None,
    ) -> List[str]:
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        enhancement = await self.enhancer.invoke(
            CREATIVE_TEMPLATE,
            subject,
            reference_image=reference_image,
            count=count,
            context=EDITING_CONTEXT if is_editing else NEW_IMAGE_CONTEXT,
        )
        if not enhancement.ok:
            logger.warning(f"Creative prompt generation failed: {enhancement.error}")
            return [self.fallback()] * count
        return self.resolve(parse_prompt_list(enhancement.text), count)
