from enum import Enum
from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional

from wallgen.utils import normalize_image_payload

AspectRatio = Literal["9:16", "16:9", "1:1", "4:3", "3:4", "9:19.5"]
ASPECT_RATIOS = ("9:16", "16:9", "1:1", "4:3", "3:4", "9:19.5")


class GenerationMode(str, Enum):
    CREATIVE = "creative"
    STYLES = "styles"


class GenerationRequest(BaseModel):
    subject: str = ""
    # Opaque to the pipeline; usually a base64 data URL.
    reference_image: Optional[str] = None
    aspect_ratio: AspectRatio = "9:16"
    mode: GenerationMode = GenerationMode.CREATIVE
    count: int = Field(
        1, ge=1, description="Number of images (creative mode only)."
    )

    @field_validator("reference_image")
    @classmethod
    def _as_data_url(cls, value: Optional[str]) -> Optional[str]:
        return normalize_image_payload(value)

    @property
    def is_editing(self) -> bool:
        return bool(self.reference_image)


class GenerationResult(BaseModel):
    images: List[str]
    text: str
    prompts: List[str] = []
    mode: GenerationMode = GenerationMode.CREATIVE

    def envelope(self) -> dict:
        return {"images": list(self.images), "text": self.text}


class TextCompletion(BaseModel):
    text: Optional[str] = None
    error: Optional[str] = None
