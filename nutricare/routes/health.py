import logging

from flask import Blueprint, request, current_app, jsonify
from pymongo import ReturnDocument, DESCENDING

from nutricare.middleware.auth_middleware import verify_token, current_user_id
from nutricare.models import ValidationError
from nutricare.models.health_entry import HealthEntry, validate_update
from nutricare.services.health_score import compute_health_score, extract_measurements, score_breakdown
from nutricare.utils.serialization import serialize_doc, to_object_id

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__)


def _owned(entry_id):
    """Filter matching one of the caller's entries, or None for a malformed id."""
    oid = to_object_id(entry_id)
    if oid is None:
        return None
    return {"_id": oid, "userId": current_user_id()}


@health_bp.route("/entries", methods=["POST"])
@verify_token()
def create_entry():
    db = current_app.config["DB"]
    data = request.get_json(silent=True) or {}
    try:
        entry = HealthEntry(current_user_id(), data)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    doc = entry.to_dict()
    result = db.health_entries.insert_one(doc)
    doc["_id"] = result.inserted_id
    return jsonify(serialize_doc(doc)), 201


@health_bp.route("/entries", methods=["GET"])
@verify_token()
def list_entries():
    db = current_app.config["DB"]
    items = list(db.health_entries.find({"userId": current_user_id()}).sort("createdAt", DESCENDING))
    return jsonify(serialize_doc(items))


@health_bp.route("/entries/<entry_id>", methods=["GET"])
@verify_token()
def get_entry(entry_id):
    db = current_app.config["DB"]
    query = _owned(entry_id)
    item = db.health_entries.find_one(query) if query else None
    if not item:
        return jsonify({"error": "Not found"}), 404
    return jsonify(serialize_doc(item))


@health_bp.route("/entries/<entry_id>", methods=["PUT"])
@verify_token()
def update_entry(entry_id):
    db = current_app.config["DB"]
    data = request.get_json(silent=True) or {}
    try:
        update = validate_update(data)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    query = _owned(entry_id)
    updated = None
    if query:
        updated = db.health_entries.find_one_and_update(
            query, {"$set": update}, return_document=ReturnDocument.AFTER
        )
    if not updated:
        return jsonify({"error": "Not found"}), 404
    return jsonify(serialize_doc(updated))


@health_bp.route("/entries/<entry_id>", methods=["DELETE"])
@verify_token()
def delete_entry(entry_id):
    db = current_app.config["DB"]
    query = _owned(entry_id)
    deleted = db.health_entries.find_one_and_delete(query) if query else None
    if not deleted:
        return jsonify({"error": "Not found"}), 404
    return jsonify({"success": True})


@health_bp.route("/summary/<user_id>", methods=["GET"])
@verify_token()
def summary(user_id):
    if user_id != current_user_id():
        return jsonify({"error": "Forbidden"}), 403
    db = current_app.config["DB"]
    items = list(db.health_entries.find({"userId": user_id}).sort("createdAt", DESCENDING).limit(10))
    return jsonify({"count": len(items), "latest": serialize_doc(items[0]) if items else None})


@health_bp.route("/score", methods=["GET"])
@verify_token()
def latest_score():
    """Wellness score of the caller's most recent entry (0 when there is none)."""
    db = current_app.config["DB"]
    latest = db.health_entries.find_one(
        {"userId": current_user_id()}, sort=[("entryDate", DESCENDING)]
    )
    measurements = extract_measurements(latest)
    return jsonify({
        "score": compute_health_score(measurements),
        "breakdown": score_breakdown(measurements),
        "entryId": str(latest["_id"]) if latest else None,
    })
