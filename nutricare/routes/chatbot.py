import logging
from datetime import datetime

from flask import Blueprint, request, current_app, jsonify
from pymongo import ASCENDING

from nutricare.middleware.auth_middleware import verify_token, current_user_id
from nutricare.models.chat_message import ChatMessage
from nutricare.services.chat_topics import REFUSAL_MESSAGE, categorize_message, is_supported_topic
from nutricare.utils.serialization import serialize_doc

logger = logging.getLogger(__name__)

chatbot_bp = Blueprint("chatbot", __name__)


@chatbot_bp.route("/message", methods=["POST"])
@verify_token()
def send_message():
    """
    Ask the nutrition assistant a question.
    Expected JSON: { "message": "..." }
    Off-topic questions get a fixed refusal and are not stored.
    """
    db = current_app.config["DB"]
    data = request.get_json(silent=True) or {}
    message = data.get("message")
    if not message or not isinstance(message, str) or not message.strip():
        return jsonify({"error": "Message is required"}), 400

    user_id = current_user_id()
    category = categorize_message(message)
    if not is_supported_topic(category):
        return jsonify({
            "id": None,
            "userId": user_id,
            "message": message,
            "response": REFUSAL_MESSAGE,
            "timestamp": datetime.utcnow().isoformat(),
            "category": "general",
        })

    answer = current_app.config["GEMINI"].answer_question(message)
    doc = ChatMessage(user_id, message, answer, category).to_dict()
    result = db.chat_messages.insert_one(doc)
    doc["_id"] = result.inserted_id
    return jsonify(serialize_doc(doc))


@chatbot_bp.route("/history/<user_id>", methods=["GET"])
@verify_token()
def history(user_id):
    if user_id != current_user_id():
        return jsonify({"error": "Forbidden"}), 403
    db = current_app.config["DB"]
    messages = list(db.chat_messages.find({"userId": user_id}).sort("timestamp", ASCENDING))
    return jsonify(serialize_doc(messages))
