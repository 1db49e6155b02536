import pytest


def _generate(client, user):
    resp = client.post("/api/plans/generate", headers=user["headers"], json={
        "healthData": {"id": "entry-1", "hemoglobinLevel": 10.2, "dietPreference": "vegetarian"},
        "userPreferences": {"mealCount": 5},
    })
    assert resp.status_code == 200
    return resp.get_json()["data"]


@pytest.fixture
def saved_plan(client, user):
    resp = client.post("/api/plans/save", headers=user["headers"], json=_generate(client, user))
    assert resp.status_code == 201
    return resp.get_json()["data"]


def test_generate_plan(client, user, gemini):
    plan = _generate(client, user)
    assert plan["userId"] == user["id"]
    assert plan["healthEntryId"] == "entry-1"
    assert "monday" in plan["weeklyMealPlan"]
    assert gemini.plan_requests[0][1] == {"mealCount": 5}


def test_generate_requires_health_data(client, user):
    resp = client.post("/api/plans/generate", headers=user["headers"], json={})
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "MISSING_HEALTH_DATA"


def test_generate_failure(client, user, gemini):
    gemini.fail = True
    resp = client.post("/api/plans/generate", headers=user["headers"], json={"healthData": {"age": 25}})
    assert resp.status_code == 500
    body = resp.get_json()
    assert body["success"] is False
    assert body["error"]["code"] == "GENERATION_FAILED"


def test_save_plan(saved_plan, user):
    assert saved_plan["userId"] == user["id"]
    assert saved_plan["isActive"] is True
    assert saved_plan["status"] == "active"
    assert saved_plan["generatedId"] == "plan_1700000000000"


def test_save_requires_meal_plan(client, user):
    resp = client.post("/api/plans/save", headers=user["headers"], json={"overallScore": 80})
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "MISSING_FIELDS"


def test_saving_archives_previous_plan(client, user, saved_plan, db):
    client.post("/api/plans/save", headers=user["headers"], json=_generate(client, user))
    assert db.plans.count_documents({"userId": user["id"]}) == 2
    assert db.plans.count_documents({"userId": user["id"], "isActive": True}) == 1
    first = client.get(f"/api/plans/{saved_plan['id']}", headers=user["headers"]).get_json()["data"]
    assert first["status"] == "archived"


def test_list_plans(client, user, other_user, saved_plan):
    body = client.get("/api/plans", headers=user["headers"]).get_json()
    assert [p["id"] for p in body["data"]] == [saved_plan["id"]]
    body = client.get("/api/plans", headers=other_user["headers"]).get_json()
    assert body["data"] == []
    assert body["message"] == "No diet plans found"


def test_get_plan_is_owner_scoped(client, other_user, saved_plan):
    resp = client.get(f"/api/plans/{saved_plan['id']}", headers=other_user["headers"])
    assert resp.status_code == 404
    assert resp.get_json()["error"]["code"] == "NOT_FOUND"


def test_get_plan_bad_id(client, user):
    assert client.get("/api/plans/xyz", headers=user["headers"]).status_code == 404


def test_delete_plan_removes_tracking(client, user, saved_plan, db):
    client.post("/api/analytics/meals/complete", headers=user["headers"], json={
        "planId": saved_plan["id"], "mealType": "lunch", "mealName": "Dal Dhokli", "date": "2024-03-12",
    })
    assert db.meal_tracking.count_documents({}) == 1

    resp = client.delete(f"/api/plans/{saved_plan['id']}", headers=user["headers"])
    assert resp.status_code == 200
    assert db.meal_tracking.count_documents({}) == 0
    assert client.delete(f"/api/plans/{saved_plan['id']}", headers=user["headers"]).status_code == 404
