import logging
from datetime import datetime

from flask import Blueprint, request, current_app
from pymongo import ASCENDING, DESCENDING

from nutricare.middleware.auth_middleware import verify_token, current_user_id
from nutricare.models import ValidationError
from nutricare.models.health_entry import parse_date
from nutricare.models.meal_tracking import MealTracking, REQUIRED_FIELDS
from nutricare.services.health_score import compute_health_score, extract_measurements
from nutricare.services.meal_completion import summarize_completion
from nutricare.utils.responses import failure, success
from nutricare.utils.serialization import serialize_doc

logger = logging.getLogger(__name__)

analytics_bp = Blueprint("analytics", __name__)

TREND_FIELDS = ("entryDate", "weight", "bmi", "hemoglobinLevel", "bloodSugar")


@analytics_bp.route("/dashboard", methods=["GET"])
@verify_token()
def dashboard():
    """Nutrition score of the latest health entry plus meal completion for the active plan."""
    db = current_app.config["DB"]
    user_id = current_user_id()

    latest_entry = db.health_entries.find_one({"userId": user_id}, sort=[("entryDate", DESCENDING)])
    latest_plan = db.plans.find_one({"userId": user_id, "isActive": True}, sort=[("createdAt", DESCENDING)])

    nutrition_score = compute_health_score(extract_measurements(latest_entry))

    tracking = []
    if latest_plan:
        tracking = list(db.meal_tracking.find({"userId": user_id, "planId": str(latest_plan["_id"])}))
    meal_completion = summarize_completion(latest_plan, tracking, today=datetime.utcnow().date())

    projection = {field: 1 for field in TREND_FIELDS}
    recent = list(
        db.health_entries.find({"userId": user_id}, projection).sort("entryDate", DESCENDING).limit(5)
    )

    data = {
        "nutritionScore": nutrition_score,
        "mealCompletion": meal_completion,
        "latestHealthEntry": (
            {field: latest_entry.get(field) for field in TREND_FIELDS} if latest_entry else None
        ),
        "latestPlan": (
            {
                "id": latest_plan["_id"],
                "overallScore": latest_plan.get("overallScore"),
                "createdAt": latest_plan.get("createdAt"),
                "status": latest_plan.get("status"),
            } if latest_plan else None
        ),
        "recentHealthEntries": recent,
        "hasHealthData": latest_entry is not None,
        "hasActivePlan": latest_plan is not None,
    }
    return success(serialize_doc(data))


@analytics_bp.route("/meals/complete", methods=["POST"])
@verify_token()
def complete_meal():
    """
    Mark a planned meal as eaten.
    Expected JSON: { "planId", "mealType", "mealName", "date", "notes"?,
                     "caloriesConsumed"?, "nutrientsConsumed"? }
    """
    db = current_app.config["DB"]
    data = request.get_json(silent=True) or {}
    if not all(data.get(field) for field in REQUIRED_FIELDS):
        return failure("Missing required fields", "MISSING_FIELDS", 400)

    try:
        meal = MealTracking(current_user_id(), data)
    except ValidationError as e:
        return failure(str(e), "INVALID_FIELDS", 400)

    db.meal_tracking.update_one(meal.key(), {"$set": meal.completion()}, upsert=True)
    return success(None, "Meal marked as completed successfully")


@analytics_bp.route("/meals/tracking", methods=["GET"])
@verify_token()
def meal_tracking():
    db = current_app.config["DB"]
    query = {"userId": current_user_id()}

    plan_id = request.args.get("planId")
    if plan_id:
        query["planId"] = plan_id

    start, end = request.args.get("startDate"), request.args.get("endDate")
    if start and end:
        try:
            query["date"] = {"$gte": parse_date(start), "$lte": parse_date(end)}
        except ValidationError:
            return failure("startDate and endDate must be ISO dates", "INVALID_FIELDS", 400)

    items = list(db.meal_tracking.find(query).sort([("date", DESCENDING), ("mealType", ASCENDING)]))
    return success(serialize_doc(items))
