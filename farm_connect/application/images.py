from __future__ import annotations

import base64
from typing import Any, Optional

from ..domain.errors import InvalidFieldError
from ..schemas.models import ImageInput


DEFAULT_IMAGE_MIME = "image/jpeg"


def encode_image(content: bytes, mime_type: Optional[str] = None) -> ImageInput:
    """Base64-encode raw upload bytes; no resizing or format checks."""
    if not content:
        raise InvalidFieldError("The uploaded image is empty.", field="image")
    mime = (mime_type or "").strip().lower()
    if not mime or mime == "application/octet-stream":
        mime = DEFAULT_IMAGE_MIME
    return ImageInput(
        mime_type=mime,
        data=base64.b64encode(content).decode("ascii"),
    )


def coerce_image(value: Any) -> ImageInput:
    if isinstance(value, ImageInput):
        return value
    if isinstance(value, (bytes, bytearray)):
        return encode_image(bytes(value))
    if isinstance(value, dict):
        try:
            return ImageInput.model_validate(value)
        except ValueError:
            raise InvalidFieldError("Image payload is malformed.", field="image") from None
    if isinstance(value, str):
        # Data URL as produced by a browser FileReader, or bare base64.
        if value.startswith("data:") and "," in value:
            header, data = value.split(",", 1)
            mime = header[len("data:") :].split(";", 1)[0] or DEFAULT_IMAGE_MIME
            return ImageInput(mime_type=mime, data=data)
        return ImageInput(data=value)
    raise InvalidFieldError("Image payload is malformed.", field="image")
