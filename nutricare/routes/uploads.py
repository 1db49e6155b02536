import base64
import binascii
import logging
import os
import re
import uuid

from flask import Blueprint, request, current_app, jsonify
from werkzeug.utils import secure_filename

from nutricare.middleware.auth_middleware import verify_token

logger = logging.getLogger(__name__)

uploads_bp = Blueprint("uploads", __name__)

IMAGE_EXTENSIONS = ("jpeg", "jpg", "png", "gif", "webp")
DATA_URL = re.compile(r"^data:image/([a-zA-Z0-9.+-]+);base64,(.+)$", re.DOTALL)


def _extension(filename):
    _, ext = os.path.splitext(filename or "")
    return ext.lstrip(".").lower()


def _target_dir(folder):
    folder = secure_filename(folder or "") or "nutricare"
    path = os.path.join(current_app.config["UPLOAD_FOLDER"], folder)
    os.makedirs(path, exist_ok=True)
    return folder, path


def _stored(folder, name):
    public_id = f"{folder}/{os.path.splitext(name)[0]}"
    url = f"{request.host_url.rstrip('/')}/uploads/{folder}/{name}"
    return {"url": url, "publicId": public_id}


@uploads_bp.route("/image", methods=["POST"])
@verify_token()
def upload_image():
    """
    Store an image under UPLOAD_FOLDER/<folder>/.
    Accepts multipart form data with a `file` part, or JSON
    { "file": "data:image/png;base64,...", "folder"? }.
    """
    upload = request.files.get("file")
    if upload is not None:
        ext = _extension(upload.filename)
        if ext not in IMAGE_EXTENSIONS:
            return jsonify({"error": "Unsupported image format"}), 400
        folder, path = _target_dir(request.form.get("folder"))
        name = f"{uuid.uuid4().hex}_{secure_filename(upload.filename)}"
        upload.save(os.path.join(path, name))
        logger.info("Stored upload %s/%s", folder, name)
        return jsonify(_stored(folder, name))

    data = request.get_json(silent=True) or {}
    raw = data.get("file")
    if not raw or not isinstance(raw, str):
        return jsonify({"error": "No file provided"}), 400

    match = DATA_URL.match(raw)
    if not match:
        return jsonify({"error": "File must be a base64 image data URL"}), 400
    ext = match.group(1).lower()
    if ext not in IMAGE_EXTENSIONS:
        return jsonify({"error": "Unsupported image format"}), 400
    try:
        content = base64.b64decode(match.group(2), validate=True)
    except (binascii.Error, ValueError):
        return jsonify({"error": "Invalid base64 image data"}), 400

    folder, path = _target_dir(data.get("folder"))
    name = f"{uuid.uuid4().hex}.{ext}"
    with open(os.path.join(path, name), "wb") as fh:
        fh.write(content)
    logger.info("Stored upload %s/%s", folder, name)
    return jsonify(_stored(folder, name))
