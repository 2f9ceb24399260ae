"""Short motivational quotes from the provider, with a fixed fallback list."""

import random
from typing import Optional

from config.settings import settings
from prompts import MOTIVATION_PROMPT
from services.llm_factory import ClientFactory, gemini_client_factory, get_llm
from utils.logger import setup_logger

logger = setup_logger(__name__)

FALLBACK_QUOTES = [
    "The only bad workout is the one that didn't happen! 💪",
    "Success starts with self-discipline! 🚀",
    "Your body can stand almost anything. It's your mind you have to convince! 🧠",
    "Don't stop when you're tired. Stop when you're done! 🔥",
    "The pain you feel today will be the strength you feel tomorrow! 💯",
]


def random_quote(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(FALLBACK_QUOTES)


class MotivationService:
    """Generates one quote per call; never raises."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        client_factory: ClientFactory = gemini_client_factory,
    ):
        self.api_key = settings.gemini_api_key if api_key is None else api_key
        self.client_factory = client_factory

    async def generate_quote(self) -> str:
        if not self.api_key:
            return random_quote()

        try:
            client = await get_llm("text", self.api_key, self.client_factory)
            quote = (await client.generate(MOTIVATION_PROMPT.format())).strip().strip('"')
        except Exception as e:
            logger.error(f"Error generating motivation quote: {e}")
            return random_quote()

        return quote or random_quote()
