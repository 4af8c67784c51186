from pydantic import BaseModel, HttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional, Tuple

from wallgen.errors import ConfigurationError
from wallgen.language import SCRIPTS

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
API_KEY_ENV_VAR = "WALLGEN__ENGINE__API_KEY"


class EngineConfig(BaseModel):
    api_key: Optional[str] = Field(
        None, description="API key for the text-generation engine."
    )
    base_url: Optional[HttpUrl] = Field(
        HttpUrl(GEMINI_OPENAI_BASE_URL),
        description="Base URL for the OpenAI-compatible chat completions API.",
    )
    model: str = Field(
        "gemini-2.5-flash", description="Model used to translate and enhance prompts."
    )
    timeout: float = Field(60.0, gt=0, description="Per-call timeout in seconds.")


class RendererConfig(BaseModel):
    base_url: HttpUrl = Field(
        HttpUrl("https://image.pollinations.ai/prompt/"),
        description="Prompt-keyed image renderer; the prompt is appended to the path.",
    )
    seed_max: int = Field(
        999_999_999, ge=1_000_000, description="Upper bound of the random seed."
    )
    nologo: bool = True


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="WALLGEN__",
        env_nested_delimiter="__",
        extra="ignore",
    )

    engine: EngineConfig = EngineConfig()
    renderer: RendererConfig = RendererConfig()
    styles: List[str] = Field(
        ["Realistic", "Watercolor", "Cyberpunk", "Sketch"],
        description="Ordered style catalog used in styles mode.",
    )
    reserved_script: str = Field(
        "hebrew",
        description="Script that must never reach the image renderer.",
    )
    portrait: Tuple[int, int] = (1080, 1920)
    landscape: Tuple[int, int] = (1920, 1080)
    creative_fallback: str = "artistic masterpiece, high quality"
    style_filler: str = "an imaginative scene"

    @field_validator("styles")
    @classmethod
    def _check_styles(cls, value: List[str]) -> List[str]:
        labels = [label.strip() for label in value if label and label.strip()]
        if not labels:
            raise ValueError("style catalog must contain at least one label")
        if len(set(labels)) != len(labels):
            raise ValueError(f"style catalog contains duplicates: {labels}")
        return labels

    @field_validator("reserved_script")
    @classmethod
    def _check_script(cls, value: str) -> str:
        name = value.lower()
        if name not in SCRIPTS:
            raise ValueError(
                f"Unknown reserved script '{value}'. Available: {sorted(SCRIPTS)}"
            )
        return name

    def require_api_key(self) -> str:
        if not self.engine.api_key:
            raise ConfigurationError(
                f"Missing API key for the text-generation engine. Set {API_KEY_ENV_VAR}."
            )
        return self.engine.api_key


settings = Settings()
