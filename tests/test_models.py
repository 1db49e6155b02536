from datetime import datetime

import pytest

from nutricare.models import ValidationError
from nutricare.models.health_entry import HealthEntry, parse_date, validate_update
from nutricare.models.meal_tracking import MealTracking
from nutricare.models.plan import Plan
from nutricare.models.user import User, public_profile, validate_profile_update, verify_password


def test_health_entry_keeps_known_fields():
    entry = HealthEntry("u1", {
        "entryDate": "2024-02-01T09:30:00Z",
        "hemoglobinLevel": 11.2,
        "trimester": 2,
        "bloodPressure": {"systolic": 120, "diastolic": 80},
        "serumFerritin": 30,
        "foodAllergies": ["peanuts"],
        "isHighRisk": 1,
        "unknownField": "dropped",
    })
    doc = entry.to_dict()

    assert doc["userId"] == "u1"
    assert doc["entryDate"] == datetime(2024, 2, 1, 9, 30)
    assert doc["ironLevels"] == {"serumFerritin": 30}
    assert doc["isHighRisk"] is True
    assert "unknownField" not in doc
    assert "serumFerritin" not in doc


@pytest.mark.parametrize("data", [
    {"hemoglobinLevel": "high"},
    {"bmi": True},
    {"trimester": 4},
    {"bloodPressure": {"systolic": -120, "diastolic": 80}},
    {"foodAllergies": "peanuts"},
    {"entryDate": "yesterday"},
])
def test_health_entry_rejects_bad_values(data):
    with pytest.raises(ValidationError):
        HealthEntry("u1", data)


def test_health_entry_accepts_zero():
    assert HealthEntry("u1", {"sleepHours": 0}).to_dict()["sleepHours"] == 0


def test_validate_update_only_sets_given_fields():
    update = validate_update({"weight": 63.5})
    assert update["weight"] == 63.5
    assert "entryDate" not in update
    assert "updatedAt" in update


def test_parse_date_defaults_to_now():
    assert isinstance(parse_date(None), datetime)


def test_user_hashes_password_and_normalizes_email():
    doc = User(" Asha ", "Asha@Example.COM ", "secret123", "pregnant").to_dict()
    assert doc["email"] == "asha@example.com"
    assert doc["name"] == "Asha"
    assert doc["password"] != "secret123"
    assert verify_password(doc, "secret123")
    assert not verify_password(doc, "wrong")


def test_user_role_must_be_known():
    with pytest.raises(ValidationError):
        User("Asha", "asha@example.com", "secret123", "doctor")


def test_public_profile_hides_password():
    doc = User("Asha", "asha@example.com", "secret123", "lactating").to_dict()
    doc["_id"] = "65f000000000000000000001"
    profile = public_profile(doc)
    assert "password" not in profile
    assert profile["id"] == "65f000000000000000000001"
    assert "personalInfo" in profile
    assert "personalInfo" not in public_profile(doc, full=False)


@pytest.mark.parametrize("data", [
    {"name": "   "},
    {"personalInfo": {"height": 0}},
    {"personalInfo": {"activityLevel": "extreme"}},
    {"medicalHistory": {"bloodType": "C+"}},
    {"lifestyleInfo": ["not", "an", "object"]},
])
def test_profile_update_rejects_bad_values(data):
    with pytest.raises(ValidationError):
        validate_profile_update(data)


def test_profile_update():
    update = validate_profile_update({
        "name": " Asha P ",
        "personalInfo": {"height": 158, "weight": 60, "activityLevel": "moderate"},
        "isProfileComplete": True,
    })
    assert update["name"] == "Asha P"
    assert update["personalInfo"]["height"] == 158
    assert update["isProfileComplete"] is True


def test_meal_tracking_truncates_to_day():
    meal = MealTracking("u1", {
        "planId": "p1", "mealType": "lunch", "mealName": "Dal Dhokli", "date": "2024-03-12T13:45:00",
    })
    assert meal.key() == {"userId": "u1", "planId": "p1", "mealType": "lunch", "date": datetime(2024, 3, 12)}
    assert meal.completion()["isCompleted"] is True


def test_meal_tracking_rejects_unknown_meal_type():
    with pytest.raises(ValidationError):
        MealTracking("u1", {"planId": "p1", "mealType": "brunch", "mealName": "x", "date": "2024-03-12"})


def test_plan_defaults():
    doc = Plan("u1", {"id": "plan_1", "weeklyMealPlan": {"monday": {}}, "planType": "bogus"}).to_dict()
    assert doc["planType"] == "ai_generated"
    assert doc["status"] == "active"
    assert doc["isActive"] is True
    assert doc["overallScore"] == 0
    assert doc["generatedId"] == "plan_1"


def test_offset_dates_are_stored_as_utc():
    assert parse_date("2024-03-12T23:30:00-05:00") == datetime(2024, 3, 13, 4, 30)
    assert parse_date("2024-03-12T23:30:00Z") == datetime(2024, 3, 12, 23, 30)
    assert parse_date("2024-03-12T23:30:00") == datetime(2024, 3, 12, 23, 30)


def test_meal_tracking_day_follows_utc():
    meal = MealTracking("u1", {
        "planId": "p1", "mealType": "dinner", "mealName": "Khichdi", "date": "2024-03-12T23:30:00-05:00",
    })
    assert meal.key()["date"] == datetime(2024, 3, 13)
