import os
from dotenv import load_dotenv
load_dotenv()

MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/nutricare")
DB_NAME = os.environ.get("DB_NAME", "nutricare")
SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret")

JWT_SECRET = os.environ.get("JWT_SECRET", "dev_secret_change_me")
JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")
JWT_EXP_SECONDS = int(os.environ.get("JWT_EXP_SECONDS", 7 * 24 * 60 * 60))

GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY", "")
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-1.5-flash")

UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", "uploads")
MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", 10 * 1024 * 1024))

DEFAULT_SEARCH_RADIUS_KM = float(os.environ.get("DEFAULT_SEARCH_RADIUS_KM", 10))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
PORT = int(os.environ.get("PORT", 5000))


def as_flask_config():
    """Settings the app factory copies into app.config."""
    return {
        "MONGO_URI": MONGO_URI,
        "DB_NAME": DB_NAME,
        "SECRET_KEY": SECRET_KEY,
        "JWT_SECRET": JWT_SECRET,
        "JWT_ALGORITHM": JWT_ALGORITHM,
        "JWT_EXP_SECONDS": JWT_EXP_SECONDS,
        "GEMINI_API_KEY": GEMINI_API_KEY,
        "GEMINI_MODEL": GEMINI_MODEL,
        "UPLOAD_FOLDER": UPLOAD_FOLDER,
        "MAX_CONTENT_LENGTH": MAX_CONTENT_LENGTH,
        "DEFAULT_SEARCH_RADIUS_KM": DEFAULT_SEARCH_RADIUS_KM,
        "LOG_LEVEL": LOG_LEVEL,
    }
