import logging

from flask import Blueprint, request, current_app, jsonify

from nutricare.middleware.auth_middleware import generate_token, verify_token, current_user_id
from nutricare.models import ValidationError
from nutricare.models.user import User, public_profile, verify_password
from nutricare.utils.serialization import serialize_doc, to_object_id

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    """
    Registers a user: body = { "name", "email", "password", "role" }
    role: pregnant | lactating
    """
    db = current_app.config["DB"]
    data = request.get_json(silent=True) or {}
    name = data.get("name")
    email = data.get("email")
    password = data.get("password")
    role = data.get("role")

    if not (name and email and password and role):
        return jsonify({"error": "Missing required fields"}), 400

    try:
        user = User(name, email, password, role)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    if db.users.find_one({"email": user.email}):
        return jsonify({"error": "User already exists"}), 400

    doc = user.to_dict()
    result = db.users.insert_one(doc)
    doc["_id"] = result.inserted_id
    logger.info("Registered user %s", result.inserted_id)

    token = generate_token(str(result.inserted_id), role=user.role, name=user.name)
    return jsonify({"user": serialize_doc(public_profile(doc)), "token": token}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    """
    Login: { "email", "password" }
    """
    db = current_app.config["DB"]
    data = request.get_json(silent=True) or {}
    email = data.get("email")
    password = data.get("password")
    if not (isinstance(email, str) and isinstance(password, str) and email and password):
        return jsonify({"error": "Email and password required"}), 400

    user = db.users.find_one({"email": email.strip().lower()})
    if not user or not verify_password(user, password):
        return jsonify({"error": "Invalid credentials"}), 401

    token = generate_token(str(user["_id"]), role=user.get("role"), name=user.get("name"))
    return jsonify({"user": serialize_doc(public_profile(user)), "token": token})


@auth_bp.route("/logout", methods=["POST"])
def logout():
    # tokens are stateless; the client discards its copy
    return jsonify({"message": "Logged out successfully"})


@auth_bp.route("/profile", methods=["GET"])
@verify_token()
def profile():
    db = current_app.config["DB"]
    user = db.users.find_one({"_id": to_object_id(current_user_id())})
    if not user:
        return jsonify({"error": "User not found"}), 404
    return jsonify(serialize_doc(public_profile(user, full=False)))
