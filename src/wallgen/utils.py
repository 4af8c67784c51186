import base64
import logging
import mimetypes
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = ["jpg", "jpeg", "png", "gif", "webp"]


def get_image_mime_type(filename: str) -> str:
    ext = Path(filename).suffix[1:].lower()
    if ext not in IMAGE_EXTENSIONS:
        raise ValueError(
            f"Unsupported reference image type '{ext or filename}'. Use one of: {', '.join(IMAGE_EXTENSIONS)}"
        )
    return mimetypes.guess_type(f"image.{ext}")[0] or f"image/{ext}"


def encode_image_file(path: Path) -> str:
    """Reads an image file into a base64 data URL without decoding it."""
    mime_type = get_image_mime_type(path.name)
    encoded = base64.b64encode(path.read_bytes()).decode("utf-8")
    logger.debug(f"Encoded reference image {path} ({mime_type})")
    return f"data:{mime_type};base64,{encoded}"


def normalize_image_payload(payload: Optional[str]) -> Optional[str]:
    """Accepts a data URL or bare base64 and returns a data URL."""
    if not payload:
        return None
    if payload.startswith("data:image/"):
        return payload
    return f"data:image/png;base64,{payload}"


def mask_secret(value: Optional[str]) -> str:
    if not value:
        return "⚠️ Not Set"
    if len(value) <= 8:
        return "✅ Set"
    return f"✅ {value[:4]}…{value[-4:]}"
