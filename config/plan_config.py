"""Fixed labels, icons and defaults used when shaping plans."""

from typing import Dict, List, Tuple

DAYS_PER_WEEK = 7

# Meal slots in fixed order: (type, icon, time)
MEAL_SLOTS: List[Tuple[str, str, str]] = [
    ("Breakfast", "🌅", "7:00 AM"),
    ("Mid-Morning Snack", "🥜", "10:30 AM"),
    ("Lunch", "🥗", "1:00 PM"),
    ("Evening Snack", "🍎", "4:30 PM"),
    ("Dinner", "🍽️", "7:30 PM"),
]
MEAL_TYPES: List[str] = [slot[0] for slot in MEAL_SLOTS]

DAY_LABELS: Dict[str, List[str]] = {
    "weight-loss": ["Cardio & Core", "Upper Body", "HIIT", "Lower Body", "Full Body", "Active Recovery", "Rest"],
    "muscle-gain": ["Upper Body", "Lower Body", "Push", "Pull", "Legs", "Arms & Shoulders", "Rest"],
    "general-fitness": ["Full Body", "Cardio", "Strength", "Flexibility", "HIIT", "Active Recovery", "Rest"],
}

# Keyword -> emoji, checked in order
EXERCISE_EMOJIS: List[Tuple[Tuple[str, ...], str]] = [
    (("push",), "💪"),
    (("pull", "row"), "🏋️"),
    (("squat", "leg"), "🦵"),
    (("run", "cardio"), "🏃"),
    (("plank", "core"), "🧘"),
    (("rest",), "😴"),
]
DEFAULT_EXERCISE_EMOJI = "💪"

EXERCISE_DEFAULTS = {
    "sets": "3",
    "reps": "10-12",
    "rest": "60s",
    "notes": "Focus on proper form and controlled movements",
}

ITEM_DEFAULTS = {
    "calories": 200,
    "portion": "See plan details",
    "macros": {"protein": 15, "carbs": 25, "fats": 8},
}

PLACEHOLDER_ITEM = {
    "calories": 300,
    "portion": "Refer to complete plan above",
    "macros": {"protein": 20, "carbs": 30, "fats": 10},
}

WORKOUT_TIPS: List[str] = [
    "🔥 Always warm up before starting",
    "💧 Stay hydrated throughout",
    "🎯 Focus on form over weight",
    "📈 Progressive overload is key",
    "😴 Get adequate rest and recovery",
]

DIET_TIPS: List[str] = [
    "🍽️ Eat 5-6 smaller meals throughout the day",
    "💧 Drink at least 8-10 glasses of water daily",
    "🥬 Include colorful vegetables with every meal",
    "🍗 Prioritize lean protein sources",
    "🥑 Include healthy fats",
]

DEFAULT_SUPPLEMENTS: List[Dict[str, str]] = [
    {"name": "Multivitamin", "dosage": "1 tablet daily", "timing": "With breakfast"},
    {"name": "Omega-3", "dosage": "1000-2000mg", "timing": "With dinner"},
    {"name": "Vitamin D3", "dosage": "2000-4000 IU", "timing": "Morning"},
]

HYDRATION_GUIDANCE = "8-10 glasses (2-3 liters)"

MAX_TIPS = 8
