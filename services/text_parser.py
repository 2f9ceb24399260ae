"""Heuristic parsing of prose plans when the provider ignores the JSON format.

Every pass below reads the raw text without modifying it and returns either
what it found or ``None``. The ``parse_*`` entry points combine the passes
with explicit defaults, so a required field is never left empty no matter
how little the text gives us.
"""

import re
from typing import List, NamedTuple, Optional

from config.plan_config import (
    DIET_TIPS,
    HYDRATION_GUIDANCE,
    MAX_TIPS,
    MEAL_TYPES,
    WORKOUT_TIPS,
)
from models.schemas import (
    Day,
    DietPlan,
    Exercise,
    FoodItem,
    Meal,
    Nutrition,
    Supplement,
    UserProfile,
    WorkoutPlan,
)
from services.nutrition_service import nutrition_targets
from services.plan_builder import (
    DAY_TIPS,
    build_exercise,
    build_item,
    build_meal,
    day_name,
    default_supplements,
    fit_week,
    placeholder_exercises,
    synthesized_day,
)
from utils.helpers import first_or_default, or_else
from utils.logger import setup_logger

logger = setup_logger(__name__)

DAY_MARKER_RE = re.compile(r'(?:\bDay\s+(\d+)|\b(\d+)\.\s*Day)[:\-\t ]*', re.IGNORECASE)
BULLET_RE = re.compile(r'^\s*[-•*]\s+(.+?)\s*$', re.MULTILINE)
SETS_RE = re.compile(r'\bSets?\b[:\s]*(\d+(?:-\d+)?)', re.IGNORECASE)
REPS_RE = re.compile(r'\bReps?\b[:\s]*(\d+(?:-\d+)?)', re.IGNORECASE)
REST_RE = re.compile(r'\bRest\b\s*:\s*([^,;\n]+)|\bRest\b\s+(\d+\s*[a-z]*)', re.IGNORECASE)
NAME_END_RE = re.compile(r':|\(|\s[-–]\s|\bSets?\b|\bReps?\b', re.IGNORECASE)
TIP_RE = re.compile(
    r'^[\s\-•*#]*(?:tips?|remember|important|notes?)\b[*:\s]*([^\n]+)$',
    re.IGNORECASE | re.MULTILINE,
)

ITEM_CALORIES_RE = re.compile(r'(\d+)\s*(?:kcal|calories|cal)\b', re.IGNORECASE)
MEAL_TERMINATORS = r'Supplements|Hydration|Tips|$'
CALORIE_TARGET_RE = re.compile(r'(\d{4,5})\s*(?:kcal|calories|cal)', re.IGNORECASE)
PROTEIN_TARGET_RE = re.compile(r'(\d{2,3})\s*g?\s*protein', re.IGNORECASE)
CARBS_TARGET_RE = re.compile(r'(\d{2,3})\s*g?\s*carb', re.IGNORECASE)
FATS_TARGET_RE = re.compile(r'(\d{2,3})\s*g?\s*fat', re.IGNORECASE)
SUPPLEMENT_RE = re.compile(
    r'^\s*[-•*]\s*((?:Vitamin|Protein|Omega|Creatine|Multi)[^:\n]*?)\s*(?::\s*([^\n]+?))?\s*$',
    re.IGNORECASE | re.MULTILINE,
)

MIN_ITEM_NAME_LENGTH = 4
MIN_TIP_LENGTH = 10


class DaySpan(NamedTuple):
    number: str
    content: str


# Shared passes

def _clean(value: str) -> str:
    return value.strip().strip("*_").strip(" -:,")


def find_tips(text: str) -> Optional[List[str]]:
    """Lines that start with tip/remember/important/note, up to eight."""
    tips = []
    for match in TIP_RE.finditer(text):
        tip = _clean(match.group(1))
        if len(tip) >= MIN_TIP_LENGTH:
            tips.append(tip)
    return tips[:MAX_TIPS] or None


def _bullets(text: str) -> List[str]:
    return [match.group(1) for match in BULLET_RE.finditer(text)]


# Workout passes

def find_day_spans(text: str) -> Optional[List[DaySpan]]:
    """Slice the text at each ``Day N`` / ``N. Day`` marker."""
    markers = list(DAY_MARKER_RE.finditer(text))
    if not markers:
        return None

    spans = []
    for index, marker in enumerate(markers):
        end = markers[index + 1].start() if index + 1 < len(markers) else len(text)
        spans.append(DaySpan(marker.group(1) or marker.group(2), text[marker.end():end]))
    return spans


def _search(pattern: re.Pattern, text: str) -> Optional[str]:
    match = pattern.search(text)
    if not match:
        return None
    return _clean(next(group for group in match.groups() if group is not None))


def parse_exercise_line(line: str) -> Optional[Exercise]:
    """Exercise from a bullet line, e.g. ``Squats: Sets: 4, Reps: 8-10, Rest: 90s``."""
    name = _clean(NAME_END_RE.split(line, maxsplit=1)[0])
    if not name:
        return None
    return build_exercise(
        name=name,
        sets=_search(SETS_RE, line),
        reps=_search(REPS_RE, line),
        rest=_search(REST_RE, line),
    )


def find_exercises(content: str) -> Optional[List[Exercise]]:
    exercises = [
        exercise
        for exercise in (parse_exercise_line(line) for line in _bullets(content))
        if exercise is not None
    ]
    return exercises or None


def parse_workout_text(text: str, profile: UserProfile) -> WorkoutPlan:
    """Build a seven-day ``WorkoutPlan`` from free-form text."""
    logger.warning("Using text parser for workout plan")
    goal = profile.fitness_goal
    spans = find_day_spans(text)

    if spans:
        days = [
            Day(
                name=day_name(span.number, index, goal),
                exercises=or_else(find_exercises(span.content), placeholder_exercises),
                tips=DAY_TIPS,
            )
            for index, span in enumerate(spans)
        ]
    else:
        logger.info("No day markers found, synthesizing a generic week")
        days = [synthesized_day(index, goal) for index in range(7)]

    return WorkoutPlan(
        days=fit_week(days, goal),
        general_tips=first_or_default(find_tips(text), default=WORKOUT_TIPS),
        full_text=text,
    )


# Diet passes

def find_meal_span(text: str, slot: int) -> Optional[str]:
    """Text between a slot's label and the next label (or a closing section)."""
    later_labels = MEAL_TYPES[slot + 1:]
    if later_labels:
        lookahead = "|".join(re.escape(label) for label in later_labels) + "|$"
    else:
        lookahead = MEAL_TERMINATORS
    pattern = re.compile(
        rf'{re.escape(MEAL_TYPES[slot])}[:\s]*(.*?)(?={lookahead})',
        re.IGNORECASE | re.DOTALL,
    )
    match = pattern.search(text)
    return match.group(1) if match else None


def parse_item_line(line: str) -> Optional[FoodItem]:
    """Food item from a bullet line, e.g. ``Greek yogurt with honey - 250 kcal``."""
    calories = ITEM_CALORIES_RE.search(line)
    name = line[:calories.start()] if calories else line
    name = _clean(re.split(r':|\(', name, maxsplit=1)[0])
    if len(name) < MIN_ITEM_NAME_LENGTH:
        return None
    return build_item(name=name, calories=int(calories.group(1)) if calories else None)


def find_items(content: str) -> Optional[List[FoodItem]]:
    items = [
        item
        for item in (parse_item_line(line) for line in _bullets(content))
        if item is not None
    ]
    return items or None


def parse_meal(text: str, slot: int) -> Meal:
    span = find_meal_span(text, slot)
    items = find_items(span) if span else None
    if items is None:
        logger.info(f"No items found for {MEAL_TYPES[slot]}, using placeholder")
    return build_meal(slot, items or [])


def _find_target(pattern: re.Pattern, text: str) -> Optional[int]:
    match = pattern.search(text)
    return int(match.group(1)) if match else None


def find_nutrition(text: str, profile: UserProfile) -> Nutrition:
    """Targets stated in the text, with estimates for anything missing."""
    estimate = nutrition_targets(profile)
    return Nutrition(
        calories=first_or_default(_find_target(CALORIE_TARGET_RE, text), default=estimate.calories),
        protein=first_or_default(_find_target(PROTEIN_TARGET_RE, text), default=estimate.protein),
        carbs=first_or_default(_find_target(CARBS_TARGET_RE, text), default=estimate.carbs),
        fats=first_or_default(_find_target(FATS_TARGET_RE, text), default=estimate.fats),
    )


def find_supplements(text: str) -> Optional[List[Supplement]]:
    supplements = [
        Supplement(
            name=_clean(match.group(1)),
            dosage=_clean(match.group(2) or "") or "As directed",
            timing="With meals",
        )
        for match in SUPPLEMENT_RE.finditer(text)
    ]
    return supplements or None


def parse_diet_text(text: str, profile: UserProfile) -> DietPlan:
    """Build a five-slot ``DietPlan`` from free-form text."""
    logger.warning("Using text parser for diet plan")
    return DietPlan(
        nutrition=find_nutrition(text, profile),
        meals=[parse_meal(text, slot) for slot in range(len(MEAL_TYPES))],
        general_tips=first_or_default(find_tips(text), default=DIET_TIPS),
        supplements=or_else(find_supplements(text), default_supplements),
        hydration=HYDRATION_GUIDANCE,
        full_text=text,
    )
