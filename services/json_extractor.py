"""Recover structured plans from provider responses that contain JSON."""

import json
import re
from typing import Any, Dict, List, Optional

from config.plan_config import DIET_TIPS, HYDRATION_GUIDANCE, MEAL_TYPES, WORKOUT_TIPS
from models.schemas import (
    Day,
    DietPlan,
    FoodItem,
    Meal,
    Nutrition,
    Supplement,
    UserProfile,
    WorkoutPlan,
)
from services.errors import ExtractionError
from services.nutrition_service import nutrition_targets
from services.plan_builder import (
    build_exercise,
    build_item,
    build_meal,
    day_name,
    default_supplements,
    fit_week,
    placeholder_exercises,
)
from utils.helpers import maybe_int, to_int
from utils.logger import setup_logger

logger = setup_logger(__name__)

_FENCE_RE = re.compile(r'```(?:json)?\n?', re.IGNORECASE)
_OBJECT_RE = re.compile(r'\{[\s\S]*\}')


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name} is not valid JSON")


def extract_json(text: str) -> Dict[str, Any]:
    """Parse the first-``{``-to-last-``}`` span of ``text`` as a JSON object.

    Code fences are stripped first. The brace match is greedy and not
    nesting-aware, so prose containing braces after the object will make
    parsing fail, which is reported like any other failure.

    Raises:
        ExtractionError: if no JSON object can be parsed.
    """
    if not text or not text.strip():
        raise ExtractionError("Empty response")

    clean_text = _FENCE_RE.sub('', text).strip()
    match = _OBJECT_RE.search(clean_text)
    if match:
        clean_text = match.group()

    try:
        parsed = json.loads(clean_text, parse_constant=_reject_constant)
    except ValueError as e:
        logger.info(f"JSON parsing failed: {e}")
        logger.debug(f"Raw text: {text[:200]}...")
        raise ExtractionError("Failed to parse JSON from response") from e

    if not isinstance(parsed, dict):
        raise ExtractionError(f"Expected a JSON object, got {type(parsed).__name__}")

    logger.info("Successfully parsed JSON response")
    return parsed


def _text(value: Any) -> Optional[str]:
    """Non-empty string form of a scalar, else None."""
    if value is None or isinstance(value, (dict, list)):
        return None
    value = str(value).strip()
    return value or None


def _dicts(value: Any) -> List[Dict[str, Any]]:
    return [entry for entry in value if isinstance(entry, dict)] if isinstance(value, list) else []


def _strings(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [text for text in (_text(entry) for entry in value) if text]


def _day_from_json(data: Dict[str, Any], index: int, goal) -> Day:
    exercises = [
        build_exercise(
            name=_text(entry.get("name")),
            sets=_text(entry.get("sets")),
            reps=_text(entry.get("reps")),
            rest=_text(entry.get("rest")),
            duration=_text(entry.get("duration")),
            notes=_text(entry.get("notes")),
            emoji=_text(entry.get("emoji")),
        )
        for entry in _dicts(data.get("exercises"))
        if _text(entry.get("name"))
    ]
    return Day(
        name=_text(data.get("name")) or day_name(index + 1, index, goal),
        exercises=exercises or placeholder_exercises(),
        tips=_text(data.get("tips")),
    )


def normalize_workout(data: Dict[str, Any], raw_text: str, profile: UserProfile) -> WorkoutPlan:
    """Coerce an extracted workout object into a seven-day ``WorkoutPlan``."""
    goal = profile.fitness_goal
    days = [
        _day_from_json(entry, index, goal)
        for index, entry in enumerate(_dicts(data.get("days")))
    ]
    if len(days) != 7:
        logger.info(f"Workout JSON had {len(days)} days, fitting to 7")

    return WorkoutPlan(
        days=fit_week(days, goal),
        general_tips=_strings(data.get("generalTips")) or WORKOUT_TIPS,
        full_text=raw_text,
    )


def _item_from_json(data: Dict[str, Any]) -> FoodItem:
    macros = data.get("macros") if isinstance(data.get("macros"), dict) else {}
    return build_item(
        name=_text(data.get("name")),
        calories=maybe_int(data.get("calories")),
        portion=_text(data.get("portion")),
        protein=maybe_int(macros.get("protein")),
        carbs=maybe_int(macros.get("carbs")),
        fats=maybe_int(macros.get("fats")),
    )


def _meal_from_json(slot: int, data: Dict[str, Any]) -> Meal:
    items = [
        _item_from_json(entry)
        for entry in _dicts(data.get("items"))
        if _text(entry.get("name"))
    ]
    return build_meal(
        slot,
        items,
        calories=maybe_int(data.get("calories")) if items else None,
        icon=_text(data.get("icon")),
        time=_text(data.get("time")),
        tips=_text(data.get("tips")),
        alternatives=_strings(data.get("alternatives")),
    )


def _slot_meals(meals: List[Dict[str, Any]]) -> List[Optional[Dict[str, Any]]]:
    """Assign provider meals to the fixed slots.

    Meals are matched by type first; a slot with no match takes the unclaimed
    meal at the same position, if any.
    """
    by_type = {}
    for index, meal in enumerate(meals):
        meal_type = (_text(meal.get("type")) or "").lower()
        by_type.setdefault(meal_type, index)

    claimed = set()
    slotted: List[Optional[int]] = []
    for meal_type in MEAL_TYPES:
        index = by_type.get(meal_type.lower())
        if index is not None:
            claimed.add(index)
        slotted.append(index)

    for slot, index in enumerate(slotted):
        if index is None and slot < len(meals) and slot not in claimed:
            claimed.add(slot)
            slotted[slot] = slot

    return [meals[index] if index is not None else None for index in slotted]


def _nutrition_from_json(data: Any, profile: UserProfile) -> Nutrition:
    estimate = nutrition_targets(profile)
    data = data if isinstance(data, dict) else {}
    return Nutrition(
        calories=to_int(data.get("calories"), estimate.calories),
        protein=to_int(data.get("protein"), estimate.protein),
        carbs=to_int(data.get("carbs"), estimate.carbs),
        fats=to_int(data.get("fats"), estimate.fats),
    )


def normalize_diet(data: Dict[str, Any], raw_text: str, profile: UserProfile) -> DietPlan:
    """Coerce an extracted diet object into a five-slot ``DietPlan``."""
    meals = [
        _meal_from_json(slot, meal or {})
        for slot, meal in enumerate(_slot_meals(_dicts(data.get("meals"))))
    ]

    supplements = [
        Supplement(
            name=_text(entry.get("name")),
            dosage=_text(entry.get("dosage")) or "As directed",
            timing=_text(entry.get("timing")) or "With meals",
        )
        for entry in _dicts(data.get("supplements"))
        if _text(entry.get("name"))
    ]

    return DietPlan(
        nutrition=_nutrition_from_json(data.get("nutrition"), profile),
        meals=meals,
        general_tips=_strings(data.get("generalTips")) or DIET_TIPS,
        supplements=supplements or default_supplements(),
        hydration=_text(data.get("hydration")) or HYDRATION_GUIDANCE,
        full_text=raw_text,
    )
