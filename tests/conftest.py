"""Shared fixtures: a sample profile and a scripted provider."""

import pytest

from config.model_config import PROBE_PROMPT
from models.schemas import UserProfile


class StubProvider:
    """Client factory whose clients answer from a script.

    ``responses`` are returned in order for non-probe prompts. ``probe_errors``
    maps a model name to the exception its probe should raise. ``error`` is
    raised for every non-probe prompt when set.
    """

    def __init__(self, responses=(), probe_errors=None, error=None):
        self.responses = list(responses)
        self.probe_errors = probe_errors or {}
        self.error = error
        self.created = []
        self.probed = []
        self.prompts = []

    def __call__(self, model_name, generation_config, api_key):
        self.created.append(model_name)
        return StubClient(self, model_name)


class StubClient:
    def __init__(self, provider, model_name):
        self.provider = provider
        self.model_name = model_name

    async def generate(self, prompt):
        if prompt == PROBE_PROMPT:
            self.provider.probed.append(self.model_name)
            error = self.provider.probe_errors.get(self.model_name)
            if error is not None:
                raise error
            return "OK"

        self.provider.prompts.append(prompt)
        if self.provider.error is not None:
            raise self.provider.error
        return self.provider.responses.pop(0)


@pytest.fixture
def stub_provider():
    """Build a ``StubProvider``; call with the same arguments as its constructor."""
    return StubProvider


@pytest.fixture
def profile():
    return UserProfile(
        name="Alex",
        age=25,
        gender="male",
        height=175,
        weight=70,
        fitness_goal="weight-loss",
        fitness_level="intermediate",
        workout_location="gym",
        dietary_preference="veg",
        available_time=45,
    )


@pytest.fixture
def no_sleep():
    delays = []

    async def sleep(seconds):
        delays.append(seconds)

    sleep.delays = delays
    return sleep
