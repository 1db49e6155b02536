from flask import jsonify


def success(data=None, message=None, status=200):
    body = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    return jsonify(body), status


def failure(message, code, status, details=None):
    error = {"message": message, "code": code}
    if details:
        error["details"] = details
    return jsonify({"success": False, "error": error}), status
