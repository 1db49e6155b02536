from datetime import datetime

from werkzeug.security import generate_password_hash, check_password_hash

from nutricare.models import ValidationError, require_choice, require_number

ROLES = ("pregnant", "lactating")
ACTIVITY_LEVELS = ("sedentary", "light", "moderate", "active", "very_active")
BLOOD_TYPES = ("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-")
PROFILE_SECTIONS = (
    "personalInfo", "pregnancyInfo", "medicalHistory", "foodPreferences", "lifestyleInfo",
)


class User:
    def __init__(self, name, email, password, role):
        if not all(isinstance(v, str) for v in (name, email, password)):
            raise ValidationError("name, email and password must be strings")
        if role not in ROLES:
            raise ValidationError("role must be pregnant or lactating")
        self.name = name.strip()
        self.email = email.strip().lower()
        self.password_hash = generate_password_hash(password)
        self.role = role
        self.is_profile_complete = False
        self.created_at = datetime.utcnow()

    def to_dict(self):
        return {
            "name": self.name,
            "email": self.email,
            "password": self.password_hash,
            "role": self.role,
            "profilePhoto": None,
            "isProfileComplete": self.is_profile_complete,
            "createdAt": self.created_at,
            "updatedAt": self.created_at,
        }


def verify_password(user_doc, password):
    return check_password_hash(user_doc["password"], password)


def public_profile(user_doc, full=True):
    """User document as returned by the API (never includes the password hash)."""
    profile = {
        "id": str(user_doc["_id"]),
        "email": user_doc.get("email"),
        "name": user_doc.get("name"),
        "role": user_doc.get("role"),
        "profilePhoto": user_doc.get("profilePhoto"),
    }
    if full:
        for section in PROFILE_SECTIONS:
            profile[section] = user_doc.get(section)
        profile["isProfileComplete"] = user_doc.get("isProfileComplete", False)
    profile["createdAt"] = user_doc.get("createdAt")
    profile["updatedAt"] = user_doc.get("updatedAt")
    return profile


def validate_profile_update(data):
    """Build the $set document for a profile update, rejecting bad values."""
    update = {}
    name = data.get("name")
    if name is not None:
        if not isinstance(name, str):
            raise ValidationError("Name must be a string")
        if not name.strip():
            raise ValidationError("Name cannot be empty")
        update["name"] = name.strip()

    if data.get("profilePhoto"):
        update["profilePhoto"] = data["profilePhoto"]

    personal = data.get("personalInfo")
    if personal:
        require_number(personal, "height", positive=True)
        require_number(personal, "weight", positive=True)
        require_choice(personal, "activityLevel", ACTIVITY_LEVELS)

    medical = data.get("medicalHistory")
    if medical:
        require_choice(medical, "bloodType", BLOOD_TYPES)

    for section in PROFILE_SECTIONS:
        if data.get(section):
            if not isinstance(data[section], dict):
                raise ValidationError(f"{section} must be an object")
            update[section] = data[section]

    if data.get("isProfileComplete") is not None:
        update["isProfileComplete"] = bool(data["isProfileComplete"])

    update["updatedAt"] = datetime.utcnow()
    return update
