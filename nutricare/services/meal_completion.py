from datetime import date, datetime
from fractions import Fraction

from nutricare.services.health_score import round_half_up

MAIN_MEALS = ("breakfast", "lunch", "dinner")


def count_planned_meals(weekly_meal_plan) -> int:
    """Main meals count once each per day; snacks count individually."""
    total = 0
    for day_meals in (weekly_meal_plan or {}).values():
        if not day_meals:
            continue
        total += sum(1 for meal in MAIN_MEALS if day_meals.get(meal))
        snacks = day_meals.get("snacks")
        if isinstance(snacks, list):
            total += len(snacks)
    return total


def _as_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(str(value)).date()


def summarize_completion(plan, tracking, today=None) -> dict:
    """
    Meal completion figures for the dashboard.

    `tracking` is the list of meal tracking documents recorded against `plan`.
    """
    summary = {
        "totalMeals": 0,
        "completedMeals": 0,
        "completionRate": 0,
        "todayMeals": 0,
        "todayCompleted": 0,
    }
    if not plan:
        return summary

    today = today or date.today()
    summary["totalMeals"] = count_planned_meals(plan.get("weeklyMealPlan"))
    summary["completedMeals"] = sum(1 for t in tracking if t.get("isCompleted"))

    todays = [t for t in tracking if _as_date(t["date"]) == today]
    summary["todayMeals"] = len(todays)
    summary["todayCompleted"] = sum(1 for t in todays if t.get("isCompleted"))

    if summary["totalMeals"] > 0:
        summary["completionRate"] = round_half_up(
            Fraction(summary["completedMeals"] * 100, summary["totalMeals"])
        )
    return summary
