import logging
import re

from flask import Blueprint, request, current_app, jsonify
from pymongo import ReturnDocument

from nutricare.middleware.auth_middleware import verify_token, current_user_id
from nutricare.models import ValidationError
from nutricare.models.user import public_profile, validate_profile_update
from nutricare.utils.serialization import serialize_doc, to_object_id

logger = logging.getLogger(__name__)

users_bp = Blueprint("users", __name__)

PHOTO_FORMATS = ("jpeg", "jpg", "png", "gif", "webp")
MAX_PHOTO_BYTES = 5 * 1024 * 1024
DATA_URL_FORMAT = re.compile(r"data:image/([^;]+)")


def _own_id():
    return to_object_id(current_user_id())


@users_bp.route("/me", methods=["GET"])
@verify_token()
def get_me():
    db = current_app.config["DB"]
    user = db.users.find_one({"_id": _own_id()})
    if not user:
        return jsonify({"error": "User not found"}), 404
    return jsonify(serialize_doc(public_profile(user)))


@users_bp.route("/me", methods=["PUT"])
@verify_token()
def update_me():
    db = current_app.config["DB"]
    data = request.get_json(silent=True) or {}
    try:
        update = validate_profile_update(data)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    updated = db.users.find_one_and_update(
        {"_id": _own_id()},
        {"$set": update},
        return_document=ReturnDocument.AFTER
    )
    if not updated:
        return jsonify({"error": "User not found"}), 404
    return jsonify(serialize_doc(public_profile(updated)))


@users_bp.route("/me", methods=["DELETE"])
@verify_token()
def delete_me():
    db = current_app.config["DB"]
    user_id = _own_id()
    deleted = db.users.find_one_and_delete({"_id": user_id})
    if not deleted:
        return jsonify({"error": "User not found"}), 404
    logger.info("Deleted account %s", user_id)
    return jsonify({"message": "Account deleted successfully"})


def check_photo_data(photo_data):
    """Return an error message for a bad data-URL image, or None when it is acceptable."""
    if not photo_data.startswith("data:image/"):
        return "Invalid image format. Please provide a valid image file."
    parts = photo_data.split(",", 1)
    if len(parts) != 2 or not parts[1]:
        return "Invalid image data format"
    # base64 is ~33% larger than the binary it encodes
    if (len(parts[1]) * 3 + 3) // 4 > MAX_PHOTO_BYTES:
        return "Image size should be less than 5MB"
    match = DATA_URL_FORMAT.match(photo_data)
    if not match or match.group(1).lower() not in PHOTO_FORMATS:
        return "Unsupported image format. Please use JPEG, PNG, GIF, or WebP."
    return None


@users_bp.route("/photo", methods=["POST"])
@verify_token()
def upload_photo():
    db = current_app.config["DB"]
    data = request.get_json(silent=True) or {}
    photo_data = data.get("photoData")
    if not photo_data:
        return jsonify({"error": "No photo data provided"}), 400

    error = check_photo_data(photo_data)
    if error:
        return jsonify({"error": error}), 400

    updated = db.users.find_one_and_update(
        {"_id": _own_id()},
        {"$set": {"profilePhoto": photo_data}},
        return_document=ReturnDocument.AFTER
    )
    if not updated:
        return jsonify({"error": "User not found"}), 404
    return jsonify({"profilePhoto": updated["profilePhoto"], "message": "Profile photo updated successfully"})


@users_bp.route("/photo", methods=["DELETE"])
@verify_token()
def delete_photo():
    db = current_app.config["DB"]
    result = db.users.update_one({"_id": _own_id()}, {"$set": {"profilePhoto": None}})
    if result.matched_count == 0:
        return jsonify({"error": "User not found"}), 404
    return jsonify({"profilePhoto": None, "message": "Profile photo deleted successfully"})
