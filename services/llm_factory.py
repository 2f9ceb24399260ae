"""Provider clients and probing-based model failover."""

from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from langchain_google_genai import ChatGoogleGenerativeAI

from config.model_config import MODEL_CONFIG, PROBE_PROMPT
from config.settings import settings
from services.errors import MissingCredentialError, NoAvailableModelError
from utils.logger import setup_logger

logger = setup_logger(__name__)


class ProviderClient(Protocol):
    """Anything that can turn a prompt into text for one bound model."""

    model_name: str

    async def generate(self, prompt: str) -> str:
        ...


ClientFactory = Callable[[str, Dict[str, Any], str], ProviderClient]


class GeminiClient:
    """Provider client backed by LangChain's Gemini chat model."""

    def __init__(self, model_name: str, generation_config: Dict[str, Any], api_key: str):
        self.model_name = model_name
        options = {key: value for key, value in generation_config.items() if value is not None}
        self.llm = ChatGoogleGenerativeAI(
            model=model_name,
            google_api_key=api_key,
            timeout=settings.request_timeout,
            max_retries=1,
            **options,
        )

    async def generate(self, prompt: str) -> str:
        response = await self.llm.ainvoke(prompt)
        content = response.content
        # Newer SDKs may return a list of content parts instead of a string
        if isinstance(content, list):
            return "".join(
                part.get("text", "") if isinstance(part, dict) else str(part)
                for part in content
            )
        return content or ""


def gemini_client_factory(model_name: str, generation_config: Dict[str, Any], api_key: str) -> GeminiClient:
    return GeminiClient(model_name, generation_config, api_key)


def is_not_found_error(error: Exception) -> bool:
    """True when the provider says the model does not exist for this key/region."""
    for attr in ("code", "status_code"):
        code = getattr(error, attr, None)
        if code == 404 or getattr(code, "value", None) == 404:
            return True
    message = str(error).lower()
    return "404" in message or "not found" in message


class ModelFailoverController:
    """Pick the first candidate model that answers a probe request.

    Candidates are tried strictly in order and never concurrently; the first
    one whose probe succeeds is returned and no later candidate is touched.
    """

    def __init__(
        self,
        api_key: Optional[str],
        candidates: Sequence[str],
        generation_config: Dict[str, Any],
        client_factory: ClientFactory = gemini_client_factory,
    ):
        self.api_key = api_key
        self.candidates: List[str] = list(candidates)
        self.generation_config = dict(generation_config)
        self.client_factory = client_factory

    @classmethod
    def for_purpose(
        cls,
        purpose: str,
        api_key: Optional[str],
        client_factory: ClientFactory = gemini_client_factory,
    ) -> "ModelFailoverController":
        """Controller using the ``text`` or ``image`` candidate list."""
        config = MODEL_CONFIG.get(purpose)
        if not config:
            raise ValueError(f"No model configuration found for '{purpose}'")
        return cls(api_key, config["candidates"], config["generation"], client_factory)

    async def acquire(self) -> ProviderClient:
        """Return a client bound to the first working candidate.

        Raises:
            MissingCredentialError: no API key is configured.
            NoAvailableModelError: every candidate failed its probe.
        """
        if not self.api_key:
            raise MissingCredentialError("API key not configured")

        for model_name in self.candidates:
            try:
                client = self.client_factory(model_name, self.generation_config, self.api_key)
                await client.generate(PROBE_PROMPT)
            except Exception as e:
                if is_not_found_error(e):
                    logger.info(f"Model {model_name} not available: {e}")
                else:
                    logger.warning(f"Unexpected error probing model {model_name}: {e}", exc_info=True)
                continue

            logger.info(f"Using model: {model_name}")
            return client

        raise NoAvailableModelError(self.candidates)


async def get_llm(
    purpose: str = "text",
    api_key: Optional[str] = None,
    client_factory: ClientFactory = gemini_client_factory,
) -> ProviderClient:
    """Acquire a working client for ``purpose`` using the configured key by default."""
    key = settings.gemini_api_key if api_key is None else api_key
    controller = ModelFailoverController.for_purpose(purpose, key, client_factory)
    return await controller.acquire()
