"""Pydantic schemas for the user profile and generated fitness plans.

Plan models are frozen and serialise with the camelCase field names the
renderer and exporters index by (``fullText``, ``generalTips``,
``userDetails`` ...). Use ``model_dump(by_alias=True, mode="json")`` for the
wire form.
"""

from datetime import datetime
from typing import Annotated, Any, Optional, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.enums import (
    DietaryPreference,
    FitnessGoal,
    FitnessLevel,
    Gender,
    StressLevel,
    WorkoutLocation,
)
from utils.helpers import parse_number


def _coerce_int(value: Any) -> Any:
    """Accept ``350``, ``"350"`` and ``"350 kcal"`` for integer fields."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = parse_number(value)
    if number is None:
        raise ValueError(f"expected a number, got {value!r}")
    return int(round(number))


Quantity = Annotated[int, BeforeValidator(_coerce_int)]


class PlanModel(BaseModel):
    """Base for immutable plan records."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class UserProfile(PlanModel):
    """Intake form record. Never mutated by the pipeline."""
    name: str = Field(..., min_length=1, description="User name")
    age: int = Field(..., gt=0, description="Age in years")
    gender: Gender = Field(..., description="male, female or other")
    height: float = Field(..., gt=0, description="Height in cm")
    weight: float = Field(..., gt=0, description="Weight in kg")
    fitness_goal: FitnessGoal = Field(..., description="Primary fitness goal")
    fitness_level: FitnessLevel = Field(FitnessLevel.BEGINNER, description="Current fitness level")
    workout_location: WorkoutLocation = Field(WorkoutLocation.HOME, description="Where the user trains")
    dietary_preference: DietaryPreference = Field(
        DietaryPreference.NON_VEGETARIAN, description="Dietary preference"
    )
    available_time: int = Field(30, gt=0, description="Available minutes per day")
    medical_history: Optional[str] = Field(None, description="Injuries, allergies or conditions")
    stress_level: Optional[StressLevel] = Field(None, description="Self-reported stress level")
    sleep_hours: Optional[float] = Field(None, gt=0, description="Average nightly sleep")


class Exercise(PlanModel):
    name: str
    sets: str
    reps: str
    rest: str
    duration: Optional[str] = None
    notes: Optional[str] = None
    emoji: Optional[str] = None


class Day(PlanModel):
    name: str
    exercises: Tuple[Exercise, ...]
    tips: Optional[str] = None


class WorkoutPlan(PlanModel):
    """Weekly workout schedule."""
    days: Tuple[Day, ...] = ()
    general_tips: Tuple[str, ...] = ()
    full_text: str = ""


class Macros(PlanModel):
    protein: Quantity
    carbs: Quantity
    fats: Quantity


class FoodItem(PlanModel):
    name: str
    portion: str
    calories: Quantity
    macros: Macros


class Meal(PlanModel):
    type: str
    icon: str
    time: str
    calories: Quantity
    items: Tuple[FoodItem, ...]
    tips: Optional[str] = None
    alternatives: Tuple[str, ...] = ()


class Nutrition(PlanModel):
    """Daily calorie and macro targets (grams for macros)."""
    calories: Quantity
    protein: Quantity
    carbs: Quantity
    fats: Quantity


class Supplement(PlanModel):
    name: str
    dosage: str
    timing: str


class DietPlan(PlanModel):
    """Daily meal schedule with targets."""
    nutrition: Nutrition
    meals: Tuple[Meal, ...] = ()
    general_tips: Tuple[str, ...] = ()
    supplements: Tuple[Supplement, ...] = ()
    hydration: str = ""
    full_text: str = ""


class GeneratedPlan(PlanModel):
    """Finished plan handed to callers."""
    workout: WorkoutPlan
    diet: DietPlan
    timestamp: datetime
    user_details: UserProfile
