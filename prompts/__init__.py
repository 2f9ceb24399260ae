"""Prompts for plan generation."""

from prompts.workout_prompt import WORKOUT_PROMPT
from prompts.diet_prompt import DIET_PROMPT
from prompts.motivation_prompt import MOTIVATION_PROMPT

__all__ = [
    "WORKOUT_PROMPT",
    "DIET_PROMPT",
    "MOTIVATION_PROMPT",
]
