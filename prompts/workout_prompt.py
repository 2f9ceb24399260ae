"""Workout Plan Prompt."""

from langchain_core.prompts import PromptTemplate

WORKOUT_PROMPT = PromptTemplate.from_template(
    """You are an expert fitness coach. Create a personalized 7-day workout plan for {name}.

USER PROFILE:
- Age: {age} years
- Gender: {gender}
- Height: {height} cm
- Weight: {weight} kg
- Fitness Goal: {fitness_goal}
- Current Fitness Level: {fitness_level}
- Workout Location: {workout_location}
- Available Time: {available_time} minutes per day
- Medical Considerations: {medical_history}

CRITICAL: You MUST respond with ONLY valid JSON. No markdown, no code blocks, no extra text.

Return this exact JSON structure:

{{
  "days": [
    {{
      "name": "Day 1 - Upper Body Strength",
      "exercises": [
        {{
          "name": "Push-ups",
          "sets": "3",
          "reps": "12-15",
          "rest": "60s",
          "emoji": "💪",
          "notes": "Keep core tight, lower chest to floor"
        }}
      ],
      "tips": "Warm up for 5-10 minutes before starting"
    }}
  ],
  "generalTips": [
    "Stay hydrated throughout workout",
    "Focus on form over weight"
  ]
}}

Requirements:
- Create exactly 7 days of workouts
- Each day should have 4-6 exercises
- Adjust intensity based on fitness level: {fitness_level}
- Consider workout location: {workout_location}
- Include warm-up and cool-down recommendations
- Add form tips and modifications for each exercise
- Make it achievable within {available_time} minutes
- Use appropriate emojis for visual appeal
- Provide progressive overload suggestions in tips

Return ONLY the JSON object, nothing else."""
)
