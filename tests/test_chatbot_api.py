from nutricare.services.chat_topics import REFUSAL_MESSAGE


def test_on_topic_message_is_answered_and_stored(client, user, gemini, db):
    resp = client.post("/api/chatbot/message", headers=user["headers"], json={
        "message": "Which foods are rich in iron?",
    })
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["category"] == "nutrition"
    assert body["userId"] == user["id"]
    assert body["response"].startswith("**Iron-rich foods**")
    assert body["id"]
    assert gemini.questions == ["Which foods are rich in iron?"]
    assert db.chat_messages.count_documents({"userId": user["id"]}) == 1


def test_off_topic_message_is_refused(client, user, gemini, db):
    resp = client.post("/api/chatbot/message", headers=user["headers"], json={
        "message": "Who won the cricket match?",
    })
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["response"] == REFUSAL_MESSAGE
    assert body["category"] == "general"
    assert body["id"] is None
    assert gemini.questions == []
    assert db.chat_messages.count_documents({}) == 0


def test_message_required(client, user):
    assert client.post("/api/chatbot/message", headers=user["headers"], json={}).status_code == 400
    assert client.post("/api/chatbot/message", headers=user["headers"], json={"message": "  "}).status_code == 400


def test_message_requires_token(client):
    assert client.post("/api/chatbot/message", json={"message": "Is tea safe?"}).status_code == 401


def test_history_oldest_first(client, user):
    for question in ("Is coffee safe while pregnant?", "How do I boost milk supply?"):
        client.post("/api/chatbot/message", headers=user["headers"], json={"message": question})

    resp = client.get(f"/api/chatbot/history/{user['id']}", headers=user["headers"])
    assert resp.status_code == 200
    history = resp.get_json()
    assert [m["message"] for m in history] == ["Is coffee safe while pregnant?", "How do I boost milk supply?"]
    assert [m["category"] for m in history] == ["pregnancy", "lactation"]


def test_history_of_another_user_is_forbidden(client, user, other_user):
    resp = client.get(f"/api/chatbot/history/{other_user['id']}", headers=user["headers"])
    assert resp.status_code == 403
