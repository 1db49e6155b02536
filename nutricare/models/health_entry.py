from datetime import datetime, timezone

from nutricare.models import ValidationError, require_number

NUMERIC_FIELDS = (
    "age", "height", "weight", "bmi",
    "hemoglobinLevel", "bloodSugar",
    "vitaminD", "vitaminB12", "vitaminA", "vitaminC", "calcium",
    "sleepHours", "waterIntake",
)
LIST_FIELDS = (
    "medicalHistory", "foodAllergies", "religiousCulturalRestrictions", "currentSupplements",
)
TEXT_FIELDS = ("dietPreference", "activityLevel", "multipleType", "notes")
FLAG_FIELDS = ("isMultiple", "isHighRisk")


def parse_date(value):
    if value is None:
        return datetime.utcnow()
    if isinstance(value, datetime):
        return value
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError("entryDate must be an ISO date")
    # stored as naive UTC
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


class HealthEntry:
    """One manual health entry: optional clinical, nutritional and lifestyle values."""

    def __init__(self, user_id, data):
        self.user_id = user_id
        self.entry_date = parse_date(data.get("entryDate"))
        self.values = {}

        for key in NUMERIC_FIELDS:
            value = require_number(data, key)
            if value is not None:
                self.values[key] = value

        trimester = data.get("trimester")
        if trimester is not None:
            if trimester not in (1, 2, 3):
                raise ValidationError("trimester must be 1, 2 or 3")
            self.values["trimester"] = trimester

        bp = data.get("bloodPressure")
        if bp is not None:
            self.values["bloodPressure"] = {
                "systolic": require_number(bp, "systolic", positive=True),
                "diastolic": require_number(bp, "diastolic", positive=True),
            }

        iron = data.get("ironLevels")
        if iron is not None:
            self.values["ironLevels"] = {
                k: require_number(iron, k) for k in ("serumFerritin", "hemoglobin")
                if iron.get(k) is not None
            }
        # flat serumFerritin is folded into ironLevels
        if data.get("serumFerritin") is not None:
            self.values.setdefault("ironLevels", {})["serumFerritin"] = require_number(data, "serumFerritin")

        for key in LIST_FIELDS:
            if data.get(key) is not None:
                if not isinstance(data[key], list):
                    raise ValidationError(f"{key} must be a list")
                self.values[key] = [str(v) for v in data[key]]

        for key in TEXT_FIELDS:
            if data.get(key) is not None:
                self.values[key] = str(data[key])

        for key in FLAG_FIELDS:
            if data.get(key) is not None:
                self.values[key] = bool(data[key])

        self.created_at = datetime.utcnow()

    def to_dict(self):
        return {
            "userId": self.user_id,
            "entryDate": self.entry_date,
            **self.values,
            "createdAt": self.created_at,
            "updatedAt": self.created_at,
        }


def validate_update(data):
    """Validate a partial update; returns the $set document."""
    entry = HealthEntry(None, data)
    update = dict(entry.values)
    if "entryDate" in data:
        update["entryDate"] = entry.entry_date
    update["updatedAt"] = datetime.utcnow()
    return update
