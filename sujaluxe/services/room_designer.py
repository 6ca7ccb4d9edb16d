"""
Client for an OpenAI compatible image generation endpoint.

Only the ``/images/generations`` call is used. The provider is treated
as opaque: whatever URL or base64 payload it returns becomes the stored
image reference.
"""
import logging
from typing import Iterable

import requests

from sujaluxe.config import settings

logger = logging.getLogger(__name__)


class ImageGenerationError(Exception):
    def __init__(self, message: str, configuration: bool = False):
        super().__init__(message)
        self.message = message
        self.configuration = configuration


def build_prompt(room_type: str, style: str, theme: str, product_names: Iterable[str]) -> str:
    return (
        f"A luxurious {room_type} interior design in {style} style with {theme} theme, "
        f"featuring {', '.join(product_names)}, high-end furniture and elegant decor, "
        f"photorealistic, professional interior photography"
    )


def generate_room_image(prompt: str) -> str:
    """Returns an image URL or a ``data:image/png;base64,...`` URI."""
    if not settings.openai_api_key:
        raise ImageGenerationError("AI image service is not configured", configuration=True)

    payload = {
        "model": settings.image_model,
        "prompt": prompt,
        "size": settings.image_size,
        "n": 1,
    }
    if settings.image_model == "dall-e-3":
        payload["quality"] = "hd"

    headers = {
        "Authorization": f"Bearer {settings.openai_api_key}",
        "Content-Type": "application/json",
    }

    try:
        response = requests.post(
            f"{settings.openai_base_url.rstrip('/')}/images/generations",
            json=payload,
            headers=headers,
            timeout=settings.image_timeout_seconds,
        )
    except requests.RequestException as exc:
        logger.exception("Image generation request failed")
        raise ImageGenerationError(f"AI image service unreachable: {exc}") from exc

    if response.status_code == 401:
        logger.error("Image generation rejected the API key")
        raise ImageGenerationError("Invalid API key", configuration=True)

    if response.status_code >= 400:
        logger.error(f"Image generation failed ({response.status_code}): {response.text}")
        raise ImageGenerationError(f"AI image service returned {response.status_code}")

    data = (response.json().get("data") or [{}])[0]

    if data.get("b64_json"):
        return f"data:image/png;base64,{data['b64_json']}"
    if data.get("url"):
        return data["url"]

    raise ImageGenerationError("AI image service returned no image")
