import jwt
from functools import wraps
from datetime import datetime, timedelta, timezone
from flask import request, jsonify, current_app


def _settings():
    cfg = current_app.config
    return cfg["JWT_SECRET"], cfg["JWT_ALGORITHM"], cfg["JWT_EXP_SECONDS"]


def generate_token(user_id: str, role: str = None, name: str = None):
    secret, algorithm, exp_seconds = _settings()
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "role": role,
        "name": name,
        "iat": now,
        "exp": now + timedelta(seconds=exp_seconds)
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_token(token: str):
    secret, algorithm, _ = _settings()
    return jwt.decode(token, secret, algorithms=[algorithm])


def verify_token():
    """
    Decorator to protect endpoints with a bearer token.
    Sets request.user to {"id", "role", "name"}.
    """
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            auth = request.headers.get("Authorization", "")
            parts = auth.split()
            if len(parts) != 2 or parts[0].lower() != "bearer":
                return jsonify({"error": "Missing or invalid Authorization header"}), 401
            try:
                payload = decode_token(parts[1])
            except jwt.ExpiredSignatureError:
                return jsonify({"error": "Token expired"}), 401
            except jwt.InvalidTokenError:
                return jsonify({"error": "Invalid token"}), 401
            if not payload.get("sub"):
                return jsonify({"error": "Invalid token"}), 401
            request.user = {
                "id": payload["sub"],
                "role": payload.get("role"),
                "name": payload.get("name")
            }
            return f(*args, **kwargs)
        return wrapper
    return decorator


def current_user_id():
    return request.user["id"]
