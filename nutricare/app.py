import logging
import os

from flask import Flask, jsonify, send_from_directory
from pymongo import MongoClient
from pymongo.server_api import ServerApi

from nutricare import config
from nutricare.data.hospitals import GUJARAT_HOSPITALS
from nutricare.routes.analytics import analytics_bp
from nutricare.routes.auth import auth_bp
from nutricare.routes.chatbot import chatbot_bp
from nutricare.routes.health import health_bp
from nutricare.routes.hospitals import hospitals_bp
from nutricare.routes.plans import plans_bp
from nutricare.routes.uploads import uploads_bp
from nutricare.routes.users import users_bp
from nutricare.services.gemini_service import GeminiService
from nutricare.services.hospital_locator import HospitalLocator

logger = logging.getLogger(__name__)


def _connect(app):
    client = MongoClient(app.config["MONGO_URI"], server_api=ServerApi("1"))
    logger.info("Using MongoDB database %s", app.config["DB_NAME"])
    return client[app.config["DB_NAME"]]


def create_app(config_overrides=None, db=None, gemini=None, locator=None):
    """
    Build the Flask app.

    db, gemini and locator replace the MongoDB database, the Gemini client and
    the hospital locator; tests pass in-memory stand-ins.
    """
    app = Flask(__name__)
    app.config.update(config.as_flask_config())
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # make db and clients accessible to blueprints via app config
    app.config["DB"] = db if db is not None else _connect(app)
    app.config["GEMINI"] = gemini or GeminiService(
        api_key=app.config["GEMINI_API_KEY"], model_name=app.config["GEMINI_MODEL"]
    )
    app.config["HOSPITALS"] = locator or HospitalLocator(GUJARAT_HOSPITALS)

    # Register blueprints
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(users_bp, url_prefix="/api/users")
    app.register_blueprint(health_bp, url_prefix="/api/health")
    app.register_blueprint(plans_bp, url_prefix="/api/plans")
    app.register_blueprint(analytics_bp, url_prefix="/api/analytics")
    app.register_blueprint(hospitals_bp, url_prefix="/api/hospitals")
    app.register_blueprint(chatbot_bp, url_prefix="/api/chatbot")
    app.register_blueprint(uploads_bp, url_prefix="/api/uploads")

    @app.route("/api/ping")
    def ping():
        return jsonify({"message": "OK"})

    @app.route("/uploads/<path:filename>")
    def uploaded_file(filename):
        return send_from_directory(os.path.abspath(app.config["UPLOAD_FOLDER"]), filename)

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(413)
    def too_large(e):
        return jsonify({"error": "Request body too large"}), 413

    @app.errorhandler(500)
    def server_error(e):
        logger.exception("Unhandled error: %s", e)
        return jsonify({"error": "Internal server error"}), 500

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=config.PORT, debug=int(os.getenv("FLASK_DEBUG", "0")))
