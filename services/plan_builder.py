"""Shared constructors for plan pieces.

Both the JSON normaliser and the heuristic text parser build days, meals and
items through these helpers so that defaults and placeholders are identical
whichever path produced the plan.
"""

from typing import Iterable, List, Optional, Sequence

from config.plan_config import (
    DAY_LABELS,
    DAYS_PER_WEEK,
    DEFAULT_EXERCISE_EMOJI,
    DEFAULT_SUPPLEMENTS,
    EXERCISE_DEFAULTS,
    EXERCISE_EMOJIS,
    ITEM_DEFAULTS,
    MEAL_SLOTS,
    PLACEHOLDER_ITEM,
)
from models.schemas import Day, Exercise, FoodItem, Macros, Meal, Supplement

DAY_TIPS = "Focus on proper form, stay hydrated, and listen to your body"
SYNTHESIZED_DAY_TIPS = "Refer to the complete plan for specific exercises"


def exercise_emoji(name: str) -> str:
    """Pick an emoji for an exercise by keyword."""
    lowered = name.lower()
    for keywords, emoji in EXERCISE_EMOJIS:
        if any(keyword in lowered for keyword in keywords):
            return emoji
    return DEFAULT_EXERCISE_EMOJI


def day_label(index: int, goal) -> str:
    """Label for the zero-based day ``index`` under a fitness goal."""
    goal_value = getattr(goal, "value", goal)
    labels = DAY_LABELS.get(goal_value)
    if labels and index < len(labels):
        return labels[index]
    return f"Workout {index + 1}"


def day_name(number, index: int, goal) -> str:
    return f"Day {number} - {day_label(index, goal)}"


def build_exercise(
    name: str,
    sets: Optional[str] = None,
    reps: Optional[str] = None,
    rest: Optional[str] = None,
    duration: Optional[str] = None,
    notes: Optional[str] = None,
    emoji: Optional[str] = None,
) -> Exercise:
    name = name.strip()
    return Exercise(
        name=name,
        sets=sets or EXERCISE_DEFAULTS["sets"],
        reps=reps or EXERCISE_DEFAULTS["reps"],
        rest=rest or EXERCISE_DEFAULTS["rest"],
        duration=duration,
        notes=notes or EXERCISE_DEFAULTS["notes"],
        emoji=emoji or exercise_emoji(name),
    )


def placeholder_exercises() -> List[Exercise]:
    """Warm-up plus a generic main block for a day with no exercises."""
    return [
        Exercise(
            name="Warm-up",
            sets="1",
            reps="5-10 minutes",
            rest="N/A",
            emoji="🔥",
            notes="Light cardio and dynamic stretching",
        ),
        Exercise(
            name="Main Exercise",
            sets="3-4",
            reps="10-12",
            rest="60-90s",
            emoji="💪",
            notes="Follow the detailed plan above",
        ),
    ]


def synthesized_day(index: int, goal) -> Day:
    """Generic day used when no day could be recovered. The last day rests."""
    label = day_label(index, goal)
    if index == DAYS_PER_WEEK - 1:
        if "rest" not in label.lower():
            label = "Rest"
        exercise = Exercise(
            name="Rest Day", sets="0", reps="Recovery", rest="N/A",
            emoji="😴", notes="See detailed plan in the text above",
        )
    else:
        exercise = Exercise(
            name="Full Body Workout", sets="3-4", reps="10-12", rest="60s",
            emoji="💪", notes="See detailed plan in the text above",
        )
    return Day(
        name=f"Day {index + 1} - {label}",
        exercises=(exercise,),
        tips=SYNTHESIZED_DAY_TIPS,
    )


def fit_week(days: Sequence[Day], goal) -> List[Day]:
    """Truncate or pad ``days`` to exactly one week."""
    week = list(days[:DAYS_PER_WEEK])
    for index in range(len(week), DAYS_PER_WEEK):
        week.append(synthesized_day(index, goal))
    return week


def build_item(
    name: str,
    calories: Optional[int] = None,
    portion: Optional[str] = None,
    protein: Optional[int] = None,
    carbs: Optional[int] = None,
    fats: Optional[int] = None,
) -> FoodItem:
    macros = ITEM_DEFAULTS["macros"]
    return FoodItem(
        name=name.strip(),
        portion=portion or ITEM_DEFAULTS["portion"],
        calories=ITEM_DEFAULTS["calories"] if calories is None else calories,
        macros=Macros(
            protein=macros["protein"] if protein is None else protein,
            carbs=macros["carbs"] if carbs is None else carbs,
            fats=macros["fats"] if fats is None else fats,
        ),
    )


def placeholder_item(meal_type: str) -> FoodItem:
    """Single stand-in item pointing the reader to the narrative text."""
    return FoodItem(
        name=f"{meal_type} - See detailed plan",
        portion=PLACEHOLDER_ITEM["portion"],
        calories=PLACEHOLDER_ITEM["calories"],
        macros=Macros(**PLACEHOLDER_ITEM["macros"]),
    )


def build_meal(
    slot: int,
    items: Iterable[FoodItem],
    calories: Optional[int] = None,
    icon: Optional[str] = None,
    time: Optional[str] = None,
    tips: Optional[str] = None,
    alternatives: Optional[Sequence[str]] = None,
) -> Meal:
    """Meal for fixed slot ``slot``; an empty item list gets a placeholder."""
    meal_type, default_icon, default_time = MEAL_SLOTS[slot]
    items = list(items) or [placeholder_item(meal_type)]
    if calories is None:
        calories = sum(item.calories for item in items)
    return Meal(
        type=meal_type,
        icon=icon or default_icon,
        time=time or default_time,
        calories=calories,
        items=items,
        tips=tips or f"Healthy {meal_type.lower()} options for your goals",
        alternatives=tuple(alternatives) if alternatives else ("Option 1", "Option 2"),
    )


def default_supplements() -> List[Supplement]:
    return [Supplement(**supplement) for supplement in DEFAULT_SUPPLEMENTS]
