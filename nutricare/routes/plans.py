import logging
from datetime import datetime

from flask import Blueprint, request, current_app, jsonify
from pymongo import DESCENDING

from nutricare.middleware.auth_middleware import verify_token, current_user_id
from nutricare.models.plan import Plan
from nutricare.services.gemini_service import GenerationError
from nutricare.utils.responses import failure, success
from nutricare.utils.serialization import serialize_doc, to_object_id

logger = logging.getLogger(__name__)

plans_bp = Blueprint("plans", __name__)


@plans_bp.route("/generate", methods=["POST"])
@verify_token()
def generate_plan():
    """
    Generate an AI diet plan.
    Expected JSON: { "healthData": {...}, "userPreferences": {...} (optional) }
    """
    data = request.get_json(silent=True) or {}
    health_data = data.get("healthData")
    if not health_data:
        return failure("Health data is required", "MISSING_HEALTH_DATA", 400)

    gemini = current_app.config["GEMINI"]
    logger.info("Generating diet plan with Gemini for user %s", current_user_id())
    try:
        plan = gemini.generate_diet_plan(health_data, data.get("userPreferences"), user_id=current_user_id())
    except GenerationError as e:
        return failure("Failed to generate diet plan", "GENERATION_FAILED", 500, details=str(e))

    return success(plan, "Diet plan generated successfully")


@plans_bp.route("", methods=["GET"])
@verify_token()
def list_plans():
    db = current_app.config["DB"]
    plans = list(db.plans.find({"userId": current_user_id()}).sort("createdAt", DESCENDING))
    message = "Diet plans found" if plans else "No diet plans found"
    return success(serialize_doc(plans), message)


@plans_bp.route("/save", methods=["POST"])
@verify_token()
def save_plan():
    """Persist a generated plan; it becomes the user's only active plan."""
    db = current_app.config["DB"]
    data = request.get_json(silent=True) or {}
    if not data.get("weeklyMealPlan"):
        return failure("weeklyMealPlan is required", "MISSING_FIELDS", 400)

    user_id = current_user_id()
    doc = Plan(user_id, data).to_dict()
    db.plans.update_many(
        {"userId": user_id, "isActive": True},
        {"$set": {"isActive": False, "status": "archived", "updatedAt": datetime.utcnow()}}
    )
    result = db.plans.insert_one(doc)
    doc["_id"] = result.inserted_id
    return success(serialize_doc(doc), "Diet plan saved successfully", status=201)


@plans_bp.route("/<plan_id>", methods=["GET"])
@verify_token()
def get_plan(plan_id):
    db = current_app.config["DB"]
    oid = to_object_id(plan_id)
    plan = db.plans.find_one({"_id": oid, "userId": current_user_id()}) if oid else None
    if not plan:
        return failure("Diet plan not found", "NOT_FOUND", 404)
    return success(serialize_doc(plan))


@plans_bp.route("/<plan_id>", methods=["DELETE"])
@verify_token()
def delete_plan(plan_id):
    db = current_app.config["DB"]
    oid = to_object_id(plan_id)
    result = db.plans.delete_one({"_id": oid, "userId": current_user_id()}) if oid else None
    if not result or result.deleted_count == 0:
        return failure("Diet plan not found", "NOT_FOUND", 404)
    db.meal_tracking.delete_many({"userId": current_user_id(), "planId": plan_id})
    return success(None, "Diet plan deleted successfully")
