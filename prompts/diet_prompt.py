"""Diet Plan Prompt."""

from langchain_core.prompts import PromptTemplate

DIET_PROMPT = PromptTemplate.from_template(
    """You are an expert nutritionist. Create a personalized daily meal plan for {name}.

USER PROFILE:
- Age: {age} years
- Gender: {gender}
- Weight: {weight} kg
- Height: {height} cm
- Estimated BMR: {bmr} calories
- Target Calories: {calories} calories
- Fitness Goal: {fitness_goal}
- Dietary Preference: {dietary_preference}

CRITICAL: You MUST respond with ONLY valid JSON. No markdown, no code blocks, no extra text.

Return this exact JSON structure:

{{
  "nutrition": {{
    "calories": "{calories}",
    "protein": "{protein}",
    "carbs": "{carbs}",
    "fats": "{fats}"
  }},
  "meals": [
    {{
      "type": "Breakfast",
      "icon": "🌅",
      "time": "7:00 AM",
      "calories": "500",
      "items": [
        {{
          "name": "Oatmeal with Berries",
          "portion": "1 cup oats, 1/2 cup berries",
          "calories": "350",
          "macros": {{
            "protein": "12",
            "carbs": "60",
            "fats": "8"
          }}
        }}
      ],
      "tips": "Start your day with complex carbs and protein",
      "alternatives": ["Eggs and toast", "Protein smoothie"]
    }}
  ],
  "generalTips": [
    "Drink 8-10 glasses of water daily",
    "Meal prep on Sundays"
  ],
  "supplements": [
    {{
      "name": "Multivitamin",
      "dosage": "1 tablet daily",
      "timing": "With breakfast"
    }}
  ],
  "hydration": "8-10 glasses (2-3 liters)"
}}

Requirements:
- Create 5 meals: Breakfast, Mid-Morning Snack, Lunch, Evening Snack, Dinner
- Each meal should align with {dietary_preference} preference
- Total daily calories should be approximately {calories}
- Protein target: {protein}g, Carbs: {carbs}g, Fats: {fats}g
- Include portion sizes and preparation tips
- Add 2-3 alternative options for each main meal
- Include supplement recommendations
- Make it practical and tasty
- Add appropriate emojis for each meal

Return ONLY the JSON object, nothing else."""
)
