import math

from flask import Blueprint, request, current_app, jsonify

from nutricare.services.hospital_locator import geocode_address

hospitals_bp = Blueprint("hospitals", __name__)


def _coordinate(name, lower, upper):
    raw = request.args.get(name)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or not lower <= value <= upper:
        return None
    return value


@hospitals_bp.route("/nearby", methods=["GET"])
def find_nearby():
    """
    Hospitals within `radius` km of (lat, lng), nearest first.
    Query params: lat, lng (required), radius (km, default from config)
    """
    if not request.args.get("lat") or not request.args.get("lng"):
        return jsonify({"error": "Latitude and longitude are required"}), 400

    lat = _coordinate("lat", -90, 90)
    lng = _coordinate("lng", -180, 180)
    if lat is None or lng is None:
        return jsonify({"error": "Latitude and longitude must be valid coordinates"}), 400

    try:
        radius = float(request.args.get("radius", current_app.config["DEFAULT_SEARCH_RADIUS_KM"]))
    except ValueError:
        radius = None
    if radius is None or not math.isfinite(radius) or radius < 0:
        return jsonify({"error": "Radius must be a non-negative number"}), 400

    locator = current_app.config["HOSPITALS"]
    return jsonify(locator.find_nearby(lat, lng, radius))


@hospitals_bp.route("/<hospital_id>", methods=["GET"])
def get_hospital(hospital_id):
    hospital = current_app.config["HOSPITALS"].get(hospital_id)
    if hospital is None:
        return jsonify({"error": "Hospital not found"}), 404
    return jsonify(hospital)


@hospitals_bp.route("/geocode", methods=["POST"])
def geocode():
    data = request.get_json(silent=True) or {}
    address = data.get("address")
    if not address or not isinstance(address, str):
        return jsonify({"error": "Address is required"}), 400
    return jsonify(geocode_address(address))
