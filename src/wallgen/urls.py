import random
from typing import Optional, Tuple
from urllib.parse import quote

import httpx

from wallgen.config import RendererConfig, Settings


def resolution_for(aspect_ratio: str, settings: Settings) -> Tuple[int, int]:
    """16:9 renders landscape; every other ratio renders portrait."""
    if aspect_ratio == "16:9":
        return tuple(settings.landscape)
    return tuple(settings.portrait)


class ImageUrlSynthesizer:
    def __init__(self, config: RendererConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.SystemRandom()

    def next_seed(self) -> int:
        return self.rng.randint(0, self.config.seed_max)

    def synthesize(self, prompt: str, width: int, height: int) -> str:
        # The renderer caches by URL, so every call gets a fresh seed.
        params = {
            "width": width,
            "height": height,
            "seed": self.next_seed(),
        }
        if self.config.nologo:
            params["nologo"] = "true"
        base = str(self.config.base_url)
        if not base.endswith("/"):
            base += "/"
        url = httpx.URL(base + quote(prompt, safe=""), params=params)
        return str(url)
