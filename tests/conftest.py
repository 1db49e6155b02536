import copy

import mongomock
import pytest

from nutricare.app import create_app
from nutricare.data.fallback_plan import FALLBACK_DIET_PLAN
from nutricare.services.gemini_service import GenerationError


class StubGemini:
    """Stands in for GeminiService; records what it was asked."""

    def __init__(self):
        self.questions = []
        self.plan_requests = []
        self.fail = False

    def generate_diet_plan(self, health_data, preferences=None, user_id=None):
        self.plan_requests.append((health_data, preferences, user_id))
        if self.fail:
            raise GenerationError("model unavailable")
        return {
            "id": "plan_1700000000000",
            "userId": user_id,
            "healthEntryId": health_data.get("id") or "",
            "generatedAt": "2024-01-01T00:00:00Z",
            **copy.deepcopy(FALLBACK_DIET_PLAN),
        }

    def answer_question(self, question):
        self.questions.append(question)
        return "**Iron-rich foods** such as spinach and bajra help maintain hemoglobin."


@pytest.fixture
def db():
    return mongomock.MongoClient().db


@pytest.fixture
def gemini():
    return StubGemini()


@pytest.fixture
def app(db, gemini, tmp_path):
    return create_app(
        config_overrides={
            "TESTING": True,
            "JWT_SECRET": "test-secret",
            "UPLOAD_FOLDER": str(tmp_path / "uploads"),
        },
        db=db,
        gemini=gemini,
    )


@pytest.fixture
def client(app):
    return app.test_client()


def register(client, email="asha@example.com", name="Asha Patel", role="pregnant", password="secret123"):
    resp = client.post("/api/auth/register", json={
        "name": name, "email": email, "password": password, "role": role,
    })
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


@pytest.fixture
def user(client):
    """Registered user: {"id", "headers"}."""
    body = register(client)
    return {"id": body["user"]["id"], "headers": {"Authorization": f"Bearer {body['token']}"}}


@pytest.fixture
def other_user(client):
    body = register(client, email="meera@example.com", name="Meera Shah", role="lactating")
    return {"id": body["user"]["id"], "headers": {"Authorization": f"Bearer {body['token']}"}}
