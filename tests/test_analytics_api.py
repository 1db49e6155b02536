from datetime import datetime

import pytest

from nutricare.data.fallback_plan import FALLBACK_DIET_PLAN


@pytest.fixture
def plan_id(client, user):
    resp = client.post("/api/plans/save", headers=user["headers"], json={
        "overallScore": 82, "weeklyMealPlan": FALLBACK_DIET_PLAN["weeklyMealPlan"],
    })
    return resp.get_json()["data"]["id"]


def _complete(client, user, plan_id, meal_type="breakfast", day=None):
    return client.post("/api/analytics/meals/complete", headers=user["headers"], json={
        "planId": plan_id,
        "mealType": meal_type,
        "mealName": "Methi Thepla",
        "date": day or datetime.utcnow().date().isoformat(),
    })


def test_dashboard_without_data(client, user):
    body = client.get("/api/analytics/dashboard", headers=user["headers"]).get_json()
    data = body["data"]
    assert body["success"] is True
    assert data["nutritionScore"] == 0
    assert data["hasHealthData"] is False
    assert data["hasActivePlan"] is False
    assert data["latestHealthEntry"] is None
    assert data["latestPlan"] is None
    assert data["mealCompletion"]["totalMeals"] == 0


def test_dashboard(client, user, plan_id):
    client.post("/api/health/entries", headers=user["headers"], json={
        "hemoglobinLevel": 9.0, "bloodSugar": 65, "bmi": 30.5, "weight": 64,
    })
    _complete(client, user, plan_id, "breakfast")
    _complete(client, user, plan_id, "lunch")
    _complete(client, user, plan_id, "dinner", day="2024-01-01")

    data = client.get("/api/analytics/dashboard", headers=user["headers"]).get_json()["data"]

    assert data["nutritionScore"] == 47
    assert data["hasHealthData"] is True
    assert data["hasActivePlan"] is True
    assert data["latestHealthEntry"]["weight"] == 64
    assert data["latestPlan"]["id"] == plan_id
    assert data["latestPlan"]["overallScore"] == 82
    assert len(data["recentHealthEntries"]) == 1
    assert data["mealCompletion"] == {
        "totalMeals": 28,
        "completedMeals": 3,
        "completionRate": 11,
        "todayMeals": 2,
        "todayCompleted": 2,
    }


def test_complete_meal_is_idempotent_per_day(client, user, plan_id, db):
    assert _complete(client, user, plan_id).status_code == 200
    assert _complete(client, user, plan_id).status_code == 200
    assert db.meal_tracking.count_documents({}) == 1


def test_complete_meal_validation(client, user, plan_id):
    resp = client.post("/api/analytics/meals/complete", headers=user["headers"], json={"planId": plan_id})
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "MISSING_FIELDS"

    resp = _complete(client, user, plan_id, meal_type="brunch")
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "INVALID_FIELDS"


def test_meal_tracking_filters(client, user, plan_id):
    _complete(client, user, plan_id, "breakfast", day="2024-03-10")
    _complete(client, user, plan_id, "lunch", day="2024-03-12")
    _complete(client, user, "another-plan", "dinner", day="2024-03-12")

    items = client.get("/api/analytics/meals/tracking", headers=user["headers"]).get_json()["data"]
    assert len(items) == 3

    items = client.get(
        f"/api/analytics/meals/tracking?planId={plan_id}", headers=user["headers"]
    ).get_json()["data"]
    assert {i["mealType"] for i in items} == {"breakfast", "lunch"}

    items = client.get(
        "/api/analytics/meals/tracking?startDate=2024-03-11&endDate=2024-03-13", headers=user["headers"]
    ).get_json()["data"]
    assert [i["mealType"] for i in items] == ["dinner", "lunch"]


def test_meal_tracking_bad_dates(client, user):
    resp = client.get("/api/analytics/meals/tracking?startDate=soon&endDate=later", headers=user["headers"])
    assert resp.status_code == 400
