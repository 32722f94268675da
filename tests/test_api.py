from app.core.models import ExperienceLevel, Role

ASHA = {"name": "Asha", "role": "Backend Developer", "experience_level": "Junior (1-3 years)"}
ANSWER = "At the time I had to speed up our API, so I added a Redis cache and the result was 40% lower latency"


def start(client, **overrides):
    response = client.post("/api/v1/interview/sessions", json={**ASHA, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


def test_options_list_roles_and_levels(client):
    body = client.get("/api/v1/interview/options").json()

    assert body["roles"] == [role.value for role in Role]
    assert body["experience_levels"] == [level.value for level in ExperienceLevel]


def test_health(client):
    body = client.get("/api/v1/health").json()

    assert body == {"status": "ok", "provider": "heuristic", "active_sessions": 0}


def test_create_session(client):
    state = start(client, session_id="api-1")

    assert state["session_id"] == "api-1"
    assert state["status"] == "in_progress"
    assert state["current_index"] == 0
    assert len(state["questions"]) == 7
    assert state["current_question"] == state["questions"][0]
    assert state["profile"]["name"] == "Asha"
    assert state["is_complete"] is False


def test_incomplete_profile_is_rejected(client):
    response = client.post("/api/v1/interview/sessions", json={"name": " ", "role": "QA Engineer"})

    assert response.status_code == 422
    body = response.json()
    assert "name" in body["detail"]
    assert "experience_level" in body["detail"]
    assert body["path"].endswith("/api/v1/interview/sessions")


def test_answer_flow_until_completion(client):
    state = start(client)
    session_id = state["session_id"]

    for index in range(len(state["questions"])):
        response = client.post(f"/api/v1/interview/sessions/{session_id}/answers", json={"answer": ANSWER})
        assert response.status_code == 200
        body = response.json()
        assert body["accepted"] is True
        assert 1 <= body["answer"]["score"] <= 10
        assert body["answer"]["feedback"]
        assert body["state"]["current_index"] == index + 1

    assert body["state"]["is_complete"] is True
    assert body["state"]["status"] == "completed"
    assert body["state"]["current_question"] is None

    response = client.post(f"/api/v1/interview/sessions/{session_id}/answers", json={"answer": ANSWER})
    assert response.status_code == 409


def test_blank_answer_is_not_accepted(client):
    session_id = start(client)["session_id"]

    response = client.post(f"/api/v1/interview/sessions/{session_id}/answers", json={"answer": "   "})

    assert response.status_code == 200
    body = response.json()
    assert body["accepted"] is False
    assert body["answer"] is None
    assert body["state"]["current_index"] == 0
    assert body["state"]["answers"] == []


def test_summary(client):
    session_id = start(client)["session_id"]
    client.post(f"/api/v1/interview/sessions/{session_id}/answers", json={"answer": ANSWER})

    body = client.get(f"/api/v1/interview/sessions/{session_id}/summary").json()

    assert body["answered"] == 1
    assert body["total_questions"] == 7
    assert body["average_score"] == body["answers"][0]["score"]
    assert body["overall_rating"]


def test_unknown_session_returns_404(client):
    for response in (
        client.get("/api/v1/interview/sessions/nope"),
        client.get("/api/v1/interview/sessions/nope/summary"),
        client.post("/api/v1/interview/sessions/nope/answers", json={"answer": ANSWER}),
        client.delete("/api/v1/interview/sessions/nope"),
    ):
        assert response.status_code == 404
        assert "nope" in response.json()["detail"]


def test_delete_session(client):
    session_id = start(client)["session_id"]

    assert client.delete(f"/api/v1/interview/sessions/{session_id}").status_code == 204
    assert client.get(f"/api/v1/interview/sessions/{session_id}").status_code == 404


def test_download_log(client):
    session_id = start(client)["session_id"]
    client.post(f"/api/v1/interview/sessions/{session_id}/answers", json={"answer": ANSWER})

    response = client.get("/api/v1/interview/download-log", params={"session_id": session_id})

    assert response.status_code == 200
    assert f"interview_log_{session_id}.json" in response.headers["content-disposition"]
    log = response.json()
    assert log["participant_name"] == "Asha"
    assert len(log["turns"]) == 1
    assert log["turns"][0]["answer"] == ANSWER
    assert log["final_feedback"]["answered"] == 1


def test_websocket_interview(client):
    with client.websocket_connect("/api/v1/interview/ws") as websocket:
        websocket.send_json({"action": "start", "profile": ASHA})
        assert websocket.receive_json()["type"] == "session_id"
        first = websocket.receive_json()
        assert first["type"] == "question"
        assert first["question"]["id"] == 1

        websocket.send_json({"action": "answer", "answer": "  "})
        assert websocket.receive_json() == {"type": "error", "message": "Answer is empty."}

        websocket.send_json({"action": "answer", "answer": ANSWER})
        evaluation = websocket.receive_json()
        assert evaluation["type"] == "evaluation"
        assert evaluation["answer"]["question_id"] == 1
        assert websocket.receive_json()["question"]["id"] == 2

        websocket.send_json({"action": "start", "profile": {"name": "Asha"}})
        assert websocket.receive_json()["type"] == "error"

        websocket.send_json({"action": "dance"})
        assert websocket.receive_json()["message"] == "Unknown action: dance"


def test_reused_session_id_returns_409(client):
    first = client.post("/api/v1/interview/sessions", json={**ASHA, "session_id": "mine"})
    client.post("/api/v1/interview/sessions/mine/answers", json={"answer": ANSWER})

    second = client.post("/api/v1/interview/sessions", json={**ASHA, "session_id": "mine"})

    assert first.status_code == 201
    assert second.status_code == 409
    assert "mine" in second.json()["detail"]
    state = client.get("/api/v1/interview/sessions/mine").json()
    assert state["current_index"] == 1
    assert len(state["answers"]) == 1


def test_websocket_rejects_non_text_answers(client):
    with client.websocket_connect("/api/v1/interview/ws") as websocket:
        websocket.send_json({"action": "start", "profile": ASHA})
        session_id = websocket.receive_json()["session_id"]
        websocket.receive_json()

        for bad in ({"action": "answer", "answer": 42}, {"action": "answer"}):
            websocket.send_json(bad)
            reply = websocket.receive_json()
            assert reply["type"] == "error"
            assert reply["message"].startswith("Invalid request")

        websocket.send_json({"action": "get_state"})
        state = websocket.receive_json()["state"]
        assert state["session_id"] == session_id
        assert state["current_index"] == 0
