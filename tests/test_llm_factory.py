import logging

import pytest

from config.model_config import IMAGE_MODEL_CANDIDATES, MODEL_CONFIG, TEXT_MODEL_CANDIDATES
from services.errors import MissingCredentialError, NoAvailableModelError
from services.llm_factory import ModelFailoverController, get_llm, is_not_found_error

CANDIDATES = ["model-a", "model-b", "model-c", "model-d"]
GENERATION = {"temperature": 0.7, "top_k": 40, "top_p": 0.95, "max_output_tokens": 8192}


class NotFound(Exception):
    code = 404


class TestModelFailover:
    async def test_third_candidate_wins_and_fourth_is_never_tried(self, stub_provider):
        provider = stub_provider(probe_errors={
            "model-a": NotFound("models/model-a is not found"),
            "model-b": RuntimeError("quota exceeded"),
        })
        controller = ModelFailoverController("key", CANDIDATES, GENERATION, provider)

        client = await controller.acquire()

        assert client.model_name == "model-c"
        assert provider.created == ["model-a", "model-b", "model-c"]
        assert provider.probed == ["model-a", "model-b", "model-c"]

    async def test_first_success_short_circuits(self, stub_provider):
        provider = stub_provider()
        client = await ModelFailoverController("key", CANDIDATES, GENERATION, provider).acquire()

        assert client.model_name == "model-a"
        assert provider.created == ["model-a"]

    async def test_exhaustion_raises(self, stub_provider):
        provider = stub_provider(probe_errors={name: NotFound("404") for name in CANDIDATES})
        controller = ModelFailoverController("key", CANDIDATES, GENERATION, provider)

        with pytest.raises(NoAvailableModelError) as excinfo:
            await controller.acquire()
        assert excinfo.value.candidates == CANDIDATES

    async def test_missing_credential_raises_before_probing(self, stub_provider):
        provider = stub_provider()
        controller = ModelFailoverController("", CANDIDATES, GENERATION, provider)

        with pytest.raises(MissingCredentialError):
            await controller.acquire()
        assert provider.created == []

    async def test_factory_errors_count_as_failed_candidates(self, stub_provider):
        provider = stub_provider()

        def factory(model_name, generation_config, api_key):
            if model_name == "model-a":
                raise ValueError("bad model name")
            return provider(model_name, generation_config, api_key)

        client = await ModelFailoverController("key", CANDIDATES, GENERATION, factory).acquire()
        assert client.model_name == "model-b"

    async def test_not_found_and_other_errors_log_differently(self, stub_provider, caplog):
        provider = stub_provider(probe_errors={
            "model-a": NotFound("not found"),
            "model-b": RuntimeError("connection reset"),
        })
        controller = ModelFailoverController("key", CANDIDATES, GENERATION, provider)

        with caplog.at_level(logging.INFO, logger="services.llm_factory"):
            await controller.acquire()

        levels = {record.levelno for record in caplog.records if "model-a" in record.getMessage()}
        assert levels == {logging.INFO}
        warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "model-b" in warnings[0].getMessage()


class TestCandidateLists:
    def test_purposes_use_their_own_lists(self, stub_provider):
        text = ModelFailoverController.for_purpose("text", "key", stub_provider())
        image = ModelFailoverController.for_purpose("image", "key", stub_provider())

        assert text.candidates == TEXT_MODEL_CANDIDATES
        assert image.candidates == IMAGE_MODEL_CANDIDATES
        assert text.generation_config == MODEL_CONFIG["text"]["generation"]
        assert image.generation_config["temperature"] == 0.4

    def test_unknown_purpose(self, stub_provider):
        with pytest.raises(ValueError):
            ModelFailoverController.for_purpose("audio", "key", stub_provider())

    async def test_get_llm_uses_image_list(self, stub_provider):
        provider = stub_provider()
        client = await get_llm("image", api_key="key", client_factory=provider)
        assert client.model_name == IMAGE_MODEL_CANDIDATES[0]


@pytest.mark.parametrize("error, expected", [
    (NotFound("boom"), True),
    (RuntimeError("404 models/gemini-x is not found for API version v1beta"), True),
    (RuntimeError("Model Not Found"), True),
    (RuntimeError("429 Resource has been exhausted"), False),
])
def test_is_not_found_error(error, expected):
    assert is_not_found_error(error) is expected
