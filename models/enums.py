"""Enums for user profile fields."""

from enum import Enum


class Gender(str, Enum):
    """User gender enum."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class FitnessGoal(str, Enum):
    """User fitness goal enum."""
    WEIGHT_LOSS = "weight-loss"
    MUSCLE_GAIN = "muscle-gain"
    ENDURANCE = "endurance"
    GENERAL_FITNESS = "general-fitness"
    FLEXIBILITY = "flexibility"


class FitnessLevel(str, Enum):
    """Current fitness level enum."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class WorkoutLocation(str, Enum):
    """Where the user trains."""
    HOME = "home"
    GYM = "gym"
    OUTDOOR = "outdoor"


class DietaryPreference(str, Enum):
    """Dietary preference enum."""
    VEGETARIAN = "veg"
    NON_VEGETARIAN = "non-veg"
    VEGAN = "vegan"
    KETO = "keto"
    PALEO = "paleo"


class StressLevel(str, Enum):
    """Self-reported stress level."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
