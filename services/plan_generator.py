"""Fitness plan generation: provider calls, parsing fallbacks and offline mode."""

import asyncio
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional

from models.schemas import DietPlan, GeneratedPlan, UserProfile, WorkoutPlan
from prompts import DIET_PROMPT, WORKOUT_PROMPT
from config.settings import settings
from services.errors import ExtractionError, PlanPipelineError
from services.json_extractor import extract_json, normalize_diet, normalize_workout
from services.llm_factory import (
    ClientFactory,
    ProviderClient,
    gemini_client_factory,
    get_llm,
)
from services.nutrition_service import estimate_bmr, nutrition_targets
from services.text_parser import parse_diet_text, parse_workout_text
from utils.logger import setup_logger

logger = setup_logger(__name__)

Sleep = Callable[[float], Awaitable[None]]


def render_workout_prompt(profile: UserProfile) -> str:
    return WORKOUT_PROMPT.format(
        name=profile.name,
        age=profile.age,
        gender=profile.gender.value,
        height=profile.height,
        weight=profile.weight,
        fitness_goal=profile.fitness_goal.value,
        fitness_level=profile.fitness_level.value,
        workout_location=profile.workout_location.value,
        available_time=profile.available_time,
        medical_history=profile.medical_history or "None",
    )


def render_diet_prompt(profile: UserProfile) -> str:
    bmr = estimate_bmr(profile.weight, profile.height, profile.age, profile.gender)
    targets = nutrition_targets(profile)
    return DIET_PROMPT.format(
        name=profile.name,
        age=profile.age,
        gender=profile.gender.value,
        weight=profile.weight,
        height=profile.height,
        bmr=int(round(bmr)),
        fitness_goal=profile.fitness_goal.value,
        dietary_preference=profile.dietary_preference.value,
        calories=targets.calories,
        protein=targets.protein,
        carbs=targets.carbs,
        fats=targets.fats,
    )


def build_offline_plan(profile: UserProfile) -> GeneratedPlan:
    """Content-empty plan carrying only the estimated nutrition targets."""
    return GeneratedPlan(
        workout=WorkoutPlan(),
        diet=DietPlan(nutrition=nutrition_targets(profile)),
        timestamp=datetime.now(timezone.utc),
        user_details=profile,
    )


class PlanGenerator:
    """Generates a workout and diet plan for a user profile.

    One ``generate`` call runs the whole sequence: acquire a model, ask for
    the workout, wait, ask for the diet. Each response goes through the JSON
    extractor first and the heuristic text parser if that fails. Anything
    that goes wrong before both plans exist yields the offline plan instead,
    so ``generate`` always returns a ``GeneratedPlan`` and never raises.

    Instances hold only configuration and are safe to share between
    concurrent requests.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        client_factory: ClientFactory = gemini_client_factory,
        inter_call_delay: Optional[float] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        """
        Args:
            api_key: Gemini API key (defaults to settings; empty means offline)
            client_factory: Builds a provider client for a model name
            inter_call_delay: Seconds to wait between the workout and diet calls
            sleep: Awaitable used for the delay (replaceable in tests)
        """
        self.api_key = settings.gemini_api_key if api_key is None else api_key
        self.client_factory = client_factory
        self.inter_call_delay = (
            settings.inter_call_delay if inter_call_delay is None else inter_call_delay
        )
        self.sleep = sleep

    async def generate(self, profile: UserProfile) -> GeneratedPlan:
        if not self.api_key:
            logger.warning("Gemini API key not found. Using offline plan.")
            return build_offline_plan(profile)

        try:
            client = await get_llm("text", self.api_key, self.client_factory)

            logger.info("Generating workout plan...")
            workout = await self._generate_workout(client, profile)

            await self.sleep(self.inter_call_delay)

            logger.info("Generating diet plan...")
            diet = await self._generate_diet(client, profile)
        except PlanPipelineError as e:
            logger.warning(f"Plan generation unavailable ({e}). Falling back to offline plan.")
            return build_offline_plan(profile)
        except Exception as e:
            logger.error(f"Error generating fitness plan: {e}", exc_info=True)
            return build_offline_plan(profile)

        logger.info("Plans generated successfully!")
        return GeneratedPlan(
            workout=workout,
            diet=diet,
            timestamp=datetime.now(timezone.utc),
            user_details=profile,
        )

    async def _generate_workout(self, client: ProviderClient, profile: UserProfile) -> WorkoutPlan:
        text = await client.generate(render_workout_prompt(profile)) or ""
        try:
            plan = normalize_workout(extract_json(text), text, profile)
            logger.info("Workout plan parsed as JSON")
            return plan
        except ExtractionError:
            logger.info("Falling back to text parsing for workout")
            return parse_workout_text(text, profile)

    async def _generate_diet(self, client: ProviderClient, profile: UserProfile) -> DietPlan:
        text = await client.generate(render_diet_prompt(profile)) or ""
        try:
            plan = normalize_diet(extract_json(text), text, profile)
            logger.info("Diet plan parsed as JSON")
            return plan
        except ExtractionError:
            logger.info("Falling back to text parsing for diet")
            return parse_diet_text(text, profile)
