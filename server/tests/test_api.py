"""Tests for the HTTP surface: envelopes, chat routes, health and models."""

from unittest.mock import patch

from aibot.constants import AVAILABLE_MODELS
from aibot.providers.mock import get_mock_response
from helpers import parse_frames


def test_root_and_api_index(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "Server is running!"
    r = client.get("/api")
    assert "POST /api/chat/stream" in r.json()["endpoints"]["chat"]


def test_unknown_route_uses_error_envelope(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]["statusCode"] == 404
    assert body["error"]["message"] == "Route /api/nope not found"
    assert body["timestamp"].endswith("Z")


def test_stream_chat_sse(client):
    r = client.post("/api/chat/stream", json={"message": "explain how recursion works", "model": "llama3-8b"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/event-stream")
    assert r.headers["cache-control"] == "no-cache"
    assert r.headers["x-accel-buffering"] == "no"

    msgs = parse_frames(r.text)
    assert msgs[-1] == {"type": "done"}
    assert [m["type"] for m in msgs].count("done") == 1
    assert all(m["type"] == "token" for m in msgs[:-1])
    assert msgs[-2]["finished"] is True
    text = "".join(m["content"] for m in msgs[:-1])
    assert text.endswith(get_mock_response("explain how recursion works"))


def test_stream_matches_non_stream(client):
    payload = {"message": "show me some code"}
    streamed = "".join(m.get("content", "") for m in parse_frames(client.post("/api/chat/stream", json=payload).text))
    full = client.post("/api/chat", json=payload).json()["data"]["response"]
    assert streamed == full


def test_stream_requires_message(client):
    r = client.post("/api/chat/stream", json={"message": "   "})
    assert r.status_code == 400
    body = r.json()
    assert body["error"]["message"] == "Message is required"
    assert body["error"]["details"] == {"missingFields": ["message"]}


def test_stream_setup_failure_returns_json_envelope(client):
    with patch("aibot.api.chat.ai_service.generate_response", side_effect=RuntimeError("no transport")):
        r = client.post("/api/chat/stream", json={"message": "hi"})
    assert r.status_code == 500
    assert r.headers["content-type"].startswith("application/json")
    assert r.json()["error"]["message"] == "Failed to start stream"


def test_chat_non_streaming(client):
    r = client.post("/api/chat", json={"message": "hello <b>there</b>", "model": "unknown-model"})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Chat response generated successfully"
    data = body["data"]
    assert data["model"] == {"requestedModel": "llama3-8b", "groqModel": "llama3-8b-8192", "provider": "groq"}
    assert data["messageLength"] == len("hello bthere/b")
    assert data["responseLength"] == len(data["response"])
    assert "API Key Required" in data["response"]


def test_chat_requires_message(client):
    r = client.post("/api/chat", json={})
    assert r.status_code == 400
    assert r.json()["error"]["details"]["missingFields"] == ["message"]


def test_chat_generation_failure(client):
    with patch(
        "aibot.api.chat.ai_service.generate_complete_response",
        side_effect=RuntimeError("boom"),
    ):
        r = client.post("/api/chat", json={"message": "hi"})
    assert r.status_code == 500
    assert r.json()["error"]["message"] == "Failed to generate response"


def test_invalid_body_is_validation_error(client):
    r = client.post("/api/chat", json={"message": {"nested": True}})
    assert r.status_code == 400
    assert r.json()["error"]["message"] == "Validation Error"


def test_models_endpoints(client):
    for path in ("/api/chat/models", "/api/models"):
        r = client.get(path)
        assert r.status_code == 200
        assert r.json()["data"]["models"] == AVAILABLE_MODELS


def test_chat_test_endpoint(client):
    r = client.get("/api/chat/test", params={"message": "list things"})
    data = r.json()["data"]
    assert data["testMessage"] == "list things"
    assert data["response"].endswith(get_mock_response("list things"))


def test_chat_stats(client):
    data = client.get("/api/chat/stats").json()["data"]
    assert data["availableModels"] == len(AVAILABLE_MODELS)
    assert data["apiStatus"]["apiConfigured"] is False
    assert "Tip" in data["tip"]


def test_health_endpoints(client):
    data = client.get("/health").json()["data"]
    assert data["status"] == "Server is running!"
    assert data["apiConfigured"] is False

    detailed = client.get("/health/detailed").json()["data"]
    assert detailed["config"]["streaming"]["tokenDelay"] == 0
    assert detailed["api"]["configured"] is False

    assert client.get("/health/ready").json()["data"] == {"ready": True}
    assert client.get("/health/live").json()["data"] == {"alive": True}
