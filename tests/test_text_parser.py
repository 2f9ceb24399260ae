from config.plan_config import DIET_TIPS, MEAL_TYPES, WORKOUT_TIPS
from models.schemas import UserProfile
from services.text_parser import (
    find_day_spans,
    find_tips,
    parse_diet_text,
    parse_exercise_line,
    parse_item_line,
    parse_workout_text,
)

WORKOUT_TEXT = """Here is your weekly plan.

Day 1: Upper Body
- Push-ups: Sets: 4, Reps: 12-15, Rest: 45s
- Bent-over Rows: Sets: 3, Reps: 10, Rest: 60s
- Plank

Day 2 - Lower Body
- Squats: Sets: 4, Reps: 8-10, Rest: 90s
- Walking lunges

Day 3: Active Recovery
Go for an easy walk.

Tip: Increase the load gradually every week to keep progressing.
Remember: sleep at least seven hours each night.
Note: short
"""

DIET_TEXT = """Your daily target is 2100 calories with 140g protein, 210g carbs and 60g fat.

Breakfast:
- Oatmeal with berries - 350 kcal
- Green tea
- Egg

Mid-Morning Snack:
- Greek yogurt with honey (150 cal)

Lunch:
Have a balanced plate of your choice.

Evening Snack:
- Apple slices with peanut butter: 200 calories

Dinner:
- Grilled paneer with quinoa - 500 kcal
- Steamed vegetables

Supplements:
- Vitamin D3: 2000 IU daily
- Omega-3 fish oil: 1000mg with dinner
"""


class TestWorkoutParser:
    def test_splits_days_and_reads_exercise_details(self, profile):
        plan = parse_workout_text(WORKOUT_TEXT, profile)

        assert len(plan.days) == 7
        assert plan.days[0].name == "Day 1 - Cardio & Core"
        push_ups, rows, plank = plan.days[0].exercises
        assert (push_ups.name, push_ups.sets, push_ups.reps, push_ups.rest) == ("Push-ups", "4", "12-15", "45s")
        assert rows.emoji == "🏋️"
        assert (plank.sets, plank.reps, plank.rest, plank.emoji) == ("3", "10-12", "60s", "🧘")
        assert [e.name for e in plan.days[1].exercises] == ["Squats", "Walking lunges"]
        assert plan.full_text == WORKOUT_TEXT

    def test_day_without_bullets_gets_placeholders(self, profile):
        plan = parse_workout_text(WORKOUT_TEXT, profile)
        assert [e.name for e in plan.days[2].exercises] == ["Warm-up", "Main Exercise"]

    def test_pads_missing_days_with_rest_last(self, profile):
        plan = parse_workout_text(WORKOUT_TEXT, profile)
        assert all(day.exercises for day in plan.days)
        assert "Rest" in plan.days[6].name

    def test_no_day_markers_synthesizes_week(self, profile):
        plan = parse_workout_text("Just do some exercise and stay active.", profile)

        assert len(plan.days) == 7
        assert all(len(day.exercises) >= 1 for day in plan.days)
        assert plan.days[6].name == "Day 7 - Rest"
        assert plan.days[6].exercises[0].name == "Rest Day"
        assert plan.general_tips == tuple(WORKOUT_TIPS)

    def test_unknown_goal_uses_numbered_names_and_still_rests(self):
        endurance = UserProfile(
            name="Sam", age=40, gender="female", height=160, weight=55, fitness_goal="endurance",
        )
        plan = parse_workout_text("", endurance)

        assert plan.days[0].name == "Day 1 - Workout 1"
        assert plan.days[6].name == "Day 7 - Rest"

    def test_truncates_to_seven_days(self, profile):
        text = "\n".join(f"Day {n}\n- Burpees" for n in range(1, 11))
        plan = parse_workout_text(text, profile)
        assert len(plan.days) == 7

    def test_numbered_day_form(self):
        spans = find_day_spans("1. Day: legs\n- Squats\n2. Day: arms\n- Curls")
        assert [span.number for span in spans] == ["1", "2"]
        assert "Squats" in spans[0].content
        assert "Curls" not in spans[0].content

    def test_exercise_line_defaults(self):
        exercise = parse_exercise_line("Jumping jacks")
        assert (exercise.sets, exercise.reps, exercise.rest) == ("3", "10-12", "60s")

    def test_tips_need_ten_characters(self):
        tips = find_tips(WORKOUT_TEXT)
        assert tips == [
            "Increase the load gradually every week to keep progressing.",
            "sleep at least seven hours each night.",
        ]

    def test_plural_notes_heading(self):
        assert find_tips("Notes: keep your back straight during every lift") == [
            "keep your back straight during every lift",
        ]

    def test_tips_capped_at_eight(self):
        text = "\n".join(f"Tip: drink water regularly number {n}" for n in range(12))
        assert len(find_tips(text)) == 8


class TestDietParser:
    def test_meals_are_in_slot_order(self, profile):
        plan = parse_diet_text(DIET_TEXT, profile)
        assert [meal.type for meal in plan.meals] == MEAL_TYPES

    def test_items_with_and_without_calories(self, profile):
        plan = parse_diet_text(DIET_TEXT, profile)
        breakfast = plan.meals[0]

        assert [item.name for item in breakfast.items] == ["Oatmeal with berries", "Green tea"]
        assert [item.calories for item in breakfast.items] == [350, 200]
        assert breakfast.calories == 550
        tea = breakfast.items[1]
        assert (tea.macros.protein, tea.macros.carbs, tea.macros.fats) == (15, 25, 8)

    def test_calorie_formats(self, profile):
        plan = parse_diet_text(DIET_TEXT, profile)
        assert plan.meals[1].items[0].calories == 150
        assert plan.meals[3].items[0].name == "Apple slices with peanut butter"
        assert plan.meals[3].items[0].calories == 200

    def test_empty_lunch_gets_one_placeholder(self, profile):
        plan = parse_diet_text(DIET_TEXT, profile)
        lunch = plan.meals[2]

        assert len(lunch.items) == 1
        assert lunch.items[0].name == "Lunch - See detailed plan"
        assert lunch.items[0].calories == 300
        assert lunch.calories == 300

    def test_dinner_stops_at_supplements(self, profile):
        plan = parse_diet_text(DIET_TEXT, profile)
        assert [item.name for item in plan.meals[4].items] == ["Grilled paneer with quinoa", "Steamed vegetables"]

    def test_nutrition_from_text(self, profile):
        plan = parse_diet_text(DIET_TEXT, profile)
        nutrition = plan.nutrition
        assert (nutrition.calories, nutrition.protein, nutrition.carbs, nutrition.fats) == (2100, 140, 210, 60)

    def test_nutrition_falls_back_to_estimates(self, profile):
        plan = parse_diet_text("Eat well.", profile)
        nutrition = plan.nutrition
        assert (nutrition.calories, nutrition.protein, nutrition.carbs, nutrition.fats) == (2011, 140, 201, 56)

    def test_supplements_from_text(self, profile):
        plan = parse_diet_text(DIET_TEXT, profile)
        assert [(s.name, s.dosage) for s in plan.supplements] == [
            ("Vitamin D3", "2000 IU daily"),
            ("Omega-3 fish oil", "1000mg with dinner"),
        ]

    def test_defaults_for_plain_text(self, profile):
        plan = parse_diet_text("Eat well.", profile)

        assert len(plan.meals) == 5
        assert all(len(meal.items) == 1 for meal in plan.meals)
        assert [s.name for s in plan.supplements] == ["Multivitamin", "Omega-3", "Vitamin D3"]
        assert plan.general_tips == tuple(DIET_TIPS)
        assert plan.hydration == "8-10 glasses (2-3 liters)"

    def test_short_item_names_are_dropped(self):
        assert parse_item_line("Egg") is None
        assert parse_item_line("Eggs").name == "Eggs"
