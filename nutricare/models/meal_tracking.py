from datetime import datetime

from nutricare.models import ValidationError
from nutricare.models.health_entry import parse_date

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")
REQUIRED_FIELDS = ("planId", "mealType", "mealName", "date")


class MealTracking:
    """A planned meal marked as eaten on a given day."""

    def __init__(self, user_id, data):
        if data.get("mealType") not in MEAL_TYPES:
            raise ValidationError("Invalid mealType")
        self.user_id = user_id
        self.plan_id = data["planId"]
        self.meal_type = data["mealType"]
        self.meal_name = data["mealName"]
        # day granularity: one record per (plan, meal type, day)
        self.date = parse_date(data["date"]).replace(hour=0, minute=0, second=0, microsecond=0)
        self.notes = data.get("notes")
        self.calories_consumed = data.get("caloriesConsumed")
        self.nutrients_consumed = data.get("nutrientsConsumed")

    def key(self):
        return {
            "userId": self.user_id,
            "planId": self.plan_id,
            "mealType": self.meal_type,
            "date": self.date,
        }

    def completion(self):
        return {
            "mealName": self.meal_name,
            "isCompleted": True,
            "completedAt": datetime.utcnow(),
            "notes": self.notes,
            "caloriesConsumed": self.calories_consumed,
            "nutrientsConsumed": self.nutrients_consumed,
            "updatedAt": datetime.utcnow(),
        }
