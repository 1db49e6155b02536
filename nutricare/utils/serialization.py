from datetime import datetime

from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value):
    """ObjectId for a path/body id, or None when the string is not a valid id."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def serialize_doc(doc):
    """Convert a MongoDB document to JSON-safe types (ObjectId -> str, datetime -> ISO)."""
    if doc is None:
        return None
    if isinstance(doc, list):
        return [serialize_doc(d) for d in doc]
    if isinstance(doc, dict):
        out = {}
        for k, v in doc.items():
            out[k] = serialize_doc(v)
        if "_id" in out:
            out["id"] = out["_id"]
        return out
    if isinstance(doc, ObjectId):
        return str(doc)
    if isinstance(doc, datetime):
        return doc.isoformat()
    return doc
