import logging
import random
from typing import List, Optional, Sequence

from wallgen.config import Settings, settings as default_settings
from wallgen.enhancer import PromptEnhancer
from wallgen.errors import GenerationError
from wallgen.language import get_reserved_script
from wallgen.models import GenerationMode, GenerationRequest, GenerationResult
from wallgen.providers.base_provider import BaseTextProvider
from wallgen.providers.openai_sdk_provider import OpenAISDKProvider
from wallgen.strategies import CreativeStrategy, StyleStrategy
from wallgen.urls import ImageUrlSynthesizer, resolution_for

logger = logging.getLogger(__name__)


def build_summary(mode: GenerationMode, image_count: int, styles: Sequence[str] = ()) -> str:
    if mode == GenerationMode.STYLES:
        labels = list(styles)
        if len(labels) > 1:
            listed = f"{', '.join(labels[:-1])} and {labels[-1]}"
        else:
            listed = "".join(labels)
        noun = "style" if image_count == 1 else "distinct styles"
        return f"I've generated {image_count} {noun}: {listed}."
    if image_count == 1:
        return "Here is your wallpaper."
    return f"I've created {image_count} variations based on your request."


async def generate_wallpaper(
    request: GenerationRequest,
    *,
    settings: Optional[Settings] = None,
    provider: Optional[BaseTextProvider] = None,
    rng: Optional[random.Random] = None,
    verbose: bool = False,
) -> GenerationResult:
    settings = settings or default_settings
    # Fails before any provider exists, so nothing goes over the network.
    settings.require_api_key()

    script = get_reserved_script(settings.reserved_script)
    width, height = resolution_for(request.aspect_ratio, settings)
    owns_provider = provider is None
    if owns_provider:
        provider = OpenAISDKProvider(settings.engine, verbose=verbose)
    enhancer = PromptEnhancer(provider)

    try:
        if request.mode == GenerationMode.STYLES:
            strategy = StyleStrategy(
                enhancer, settings.styles, script=script, filler=settings.style_filler
            )
            prompts: List[str] = await strategy.run(
                request.subject, reference_image=request.reference_image
            )
        else:
            strategy = CreativeStrategy(
                enhancer, script=script, fallback_prompt=settings.creative_fallback
            )
            prompts = await strategy.run(
                request.subject,
                request.count,
                is_editing=request.is_editing,
                reference_image=request.reference_image,
            )

        leaked = [i for i, prompt in enumerate(prompts) if script.found_in(prompt)]
        if leaked:
            raise GenerationError(
                f"Untranslated prompts reached the renderer stage at positions {leaked}"
            )

        synthesizer = ImageUrlSynthesizer(settings.renderer, rng=rng)
        images = [synthesizer.synthesize(prompt, width, height) for prompt in prompts]
        text = build_summary(request.mode, len(images), settings.styles)
        logger.info(f"Generated {len(images)} image URL(s) in {request.mode.value} mode")
        return GenerationResult(
            images=images, text=text, prompts=prompts, mode=request.mode
        )
    except GenerationError:
        raise
    except Exception as e:
        logger.exception(f"Wallpaper generation failed: {e}")
        raise GenerationError(f"Wallpaper generation failed: {e}") from e
    finally:
        if owns_provider:
            try:
                await provider.close()
            except Exception as e:
                logger.warning(f"Failed to close text provider: {e}")
