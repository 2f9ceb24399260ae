"""Calorie and macro estimation from user biometrics."""

import math

from models.enums import FitnessGoal, Gender
from models.schemas import Nutrition, UserProfile

ACTIVITY_MULTIPLIER = 1.5
WEIGHT_LOSS_DEFICIT = 500
MUSCLE_GAIN_SURPLUS = 300


def _round(value: float) -> int:
    """Round half up."""
    return int(math.floor(value + 0.5))


def estimate_bmr(weight_kg: float, height_cm: float, age: float, gender) -> float:
    """Basal metabolic rate using the Mifflin-St Jeor equation. Not rounded."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if Gender(gender) == Gender.MALE:
        return base + 5
    return base - 161


def estimate_tdee(bmr: float) -> int:
    """Total daily energy expenditure at a fixed moderate activity level."""
    return _round(bmr * ACTIVITY_MULTIPLIER)


def target_calories(tdee: int, goal) -> int:
    """Adjust TDEE for the user's goal."""
    goal = FitnessGoal(goal)
    if goal == FitnessGoal.WEIGHT_LOSS:
        return tdee - WEIGHT_LOSS_DEFICIT
    if goal == FitnessGoal.MUSCLE_GAIN:
        return tdee + MUSCLE_GAIN_SURPLUS
    return tdee


def macro_targets(weight_kg: float, calories: int) -> dict:
    """Protein from body weight, carbs at 40% and fats at 25% of calories."""
    return {
        "protein": _round(weight_kg * 2),
        "carbs": _round(0.4 * calories / 4),
        "fats": _round(0.25 * calories / 9),
    }


def nutrition_targets(profile: UserProfile) -> Nutrition:
    """Full daily target record for a profile."""
    bmr = estimate_bmr(profile.weight, profile.height, profile.age, profile.gender)
    calories = target_calories(estimate_tdee(bmr), profile.fitness_goal)
    return Nutrition(calories=calories, **macro_targets(profile.weight, calories))
