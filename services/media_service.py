"""Image URLs for exercises and foods.

URLs are built from a text prompt and handed to the renderer, which fetches
the image itself. Building a URL never blocks on the network unless an
enhanced prompt is requested from the image-prompt model.
"""

from typing import Optional
from urllib.parse import quote

from config.settings import settings
from services.llm_factory import ClientFactory, gemini_client_factory, get_llm
from utils.logger import setup_logger

logger = setup_logger(__name__)

POLLINATIONS_URL = "https://image.pollinations.ai/prompt/{prompt}?width=800&height=600&nologo=true&enhance=true"
UNSPLASH_URL = "https://source.unsplash.com/800x600/?{query}"

EXERCISE_PROMPT = (
    "Professional fitness photo: Athletic person performing {name} exercise in a modern gym. "
    "High quality, proper form, motivational lighting, 4K, photorealistic"
)
FOOD_PROMPT = (
    "Professional food photography: {name}, beautifully plated, fresh ingredients, "
    "natural lighting, appetizing, high quality, 4K, overhead angle"
)
ENHANCE_PROMPT = (
    "Rewrite this image generation prompt to be more vivid and specific. "
    "Keep it under 60 words and return only the prompt.\n\n{prompt}"
)

KIND_PROMPTS = {"exercise": EXERCISE_PROMPT, "food": FOOD_PROMPT}
KIND_QUERIES = {"exercise": "fitness exercise", "food": "healthy food meal"}


def image_prompt(name: str, kind: str) -> str:
    template = KIND_PROMPTS.get(kind)
    if template is None:
        raise ValueError(f"Unknown image kind '{kind}'")
    return template.format(name=name.strip())


def image_url(prompt: str) -> str:
    return POLLINATIONS_URL.format(prompt=quote(prompt, safe=""))


def fallback_image_url(name: str, kind: str) -> str:
    """Stock photo search URL used when no prompt URL can be produced."""
    query = f"{name.strip()} {KIND_QUERIES.get(kind, '')}".strip()
    return UNSPLASH_URL.format(query=quote(query, safe=""))


class MediaService:
    """Image URL builder with optional prompt enhancement by the image-prompt model."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        client_factory: ClientFactory = gemini_client_factory,
    ):
        self.api_key = settings.gemini_api_key if api_key is None else api_key
        self.client_factory = client_factory

    async def generate_image_url(self, name: str, kind: str, enhance: bool = False) -> str:
        """URL for ``name`` of ``kind`` (``exercise`` or ``food``).

        Raises:
            ValueError: for an unknown kind or a blank name.
        """
        if not name or not name.strip():
            raise ValueError("Image subject name is required")
        prompt = image_prompt(name, kind)
        logger.info(f"Generating {kind} image URL for: {name}")

        if not enhance or not self.api_key:
            return image_url(prompt)

        try:
            client = await get_llm("image", self.api_key, self.client_factory)
            enhanced = (await client.generate(ENHANCE_PROMPT.format(prompt=prompt))).strip()
        except Exception as e:
            logger.error(f"Error enhancing image prompt for {name}: {e}")
            return fallback_image_url(name, kind)

        return image_url(enhanced or prompt)
