import pytest
from fastapi.testclient import TestClient

from conftest import FakeLLM, make_settings
from promptdesk.main import create_app
from promptdesk.providers import ProviderFactory
from promptdesk.repositories import MemoryStorage

NEW_PROMPT = {
    "name": "Travel Agent",
    "provider": "openai",
    "apiKey": "sk-from-form",
    "model": "gpt-4o-mini",
    "temperature": 0.9,
    "content": "You plan trips.",
    "createdBy": 1,
}


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


# Auth


def test_login_admin(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

    assert response.status_code == 200
    assert response.json() == {"id": 1, "username": "admin", "isAdmin": True}


def test_login_wrong_password(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}


@pytest.mark.parametrize("body", [{}, {"username": "admin"}, {"password": "admin123"}])
def test_login_missing_fields(client, body):
    response = client.post("/api/auth/login", json=body)

    assert response.status_code == 400
    assert response.json()["message"] == "Username and password are required"


# Prompts


def test_list_and_get_prompts(client):
    prompts = client.get("/api/prompts").json()

    assert [p["name"] for p in prompts] == ["Customer Support Assistant"]
    assert set(prompts[0]) == {
        "id",
        "name",
        "provider",
        "model",
        "temperature",
        "content",
        "createdBy",
    }
    assert client.get("/api/prompts/1").json() == prompts[0]


def test_get_prompt_errors(client):
    assert client.get("/api/prompts/999").status_code == 404
    response = client.get("/api/prompts/abc")
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid prompt ID"}


def test_create_prompt_discards_api_key(client):
    response = client.post("/api/prompts", json=NEW_PROMPT)

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 2
    assert body["createdBy"] == 1
    assert "apiKey" not in body


def test_create_prompt_validation(client):
    response = client.post("/api/prompts", json={**NEW_PROMPT, "temperature": 5})

    assert response.status_code == 400
    assert [e["field"] for e in response.json()["errors"]] == ["temperature"]


def test_create_prompt_rejects_non_object_body(client):
    assert client.post("/api/prompts", json=["not", "an", "object"]).status_code == 400


def test_update_prompt(client):
    response = client.put("/api/prompts/1", json={"name": "Renamed"})

    assert response.status_code == 200
    assert response.json()["name"] == "Renamed"
    assert response.json()["model"] == "gpt-4o"


def test_update_prompt_errors(client):
    assert client.put("/api/prompts/999", json={"name": "x"}).status_code == 404
    assert client.put("/api/prompts/1", json={"provider": "cohere"}).status_code == 400
    assert client.put("/api/prompts/x", json={"name": "x"}).status_code == 400


def test_delete_prompt(client):
    assert client.delete("/api/prompts/1").status_code == 204
    assert client.delete("/api/prompts/1").status_code == 404
    assert client.delete("/api/prompts/nope").status_code == 400
    assert client.get("/api/prompts").json() == []


# Messages


def test_send_message(client):
    response = client.post("/api/prompts/1/messages", json={"content": "Hello"})

    assert response.status_code == 201
    body = response.json()
    assert body["userMessage"]["content"] == "Hello"
    assert body["userMessage"]["isUser"] is True
    assert body["aiMessage"]["content"] == "Hello from the model"
    assert body["aiMessage"]["isUser"] is False
    assert body["aiMessage"]["promptId"] == 1
    assert body["aiMessage"]["timestamp"].endswith("Z")

    history = client.get("/api/prompts/1/messages").json()
    assert [m["id"] for m in history] == [body["userMessage"]["id"], body["aiMessage"]["id"]]


def test_send_message_unknown_prompt(client):
    response = client.post("/api/prompts/999/messages", json={"content": "Hello"})

    assert response.status_code == 404
    assert response.json() == {"message": "Prompt not found"}


@pytest.mark.parametrize("body", [{}, {"content": 5}])
def test_send_message_invalid_body(client, body):
    response = client.post("/api/prompts/1/messages", json=body)

    assert response.status_code == 400
    assert client.get("/api/prompts/1/messages").json() == []


def test_send_empty_message(client):
    response = client.post("/api/prompts/1/messages", json={"content": ""})

    assert response.status_code == 201
    assert response.json()["userMessage"]["content"] == ""


def test_delete_prompt_removes_its_messages(client):
    client.post("/api/prompts/1/messages", json={"content": "hi"})

    assert client.delete("/api/prompts/1").status_code == 204
    assert client.get("/api/prompts/1/messages").json() == []


def test_send_message_without_credential_still_201():
    app = create_app(settings=make_settings(), storage=MemoryStorage())
    with TestClient(app) as client:
        response = client.post("/api/prompts/1/messages", json={"content": "x"})

        assert response.status_code == 201
        assert response.json()["userMessage"]["content"] == "x"
        assert "API key not found" in response.json()["aiMessage"]["content"]
        assert len(client.get("/api/prompts/1/messages").json()) == 2


def test_initialize_and_clear(client):
    response = client.post("/api/prompts/1/initialize", json={})

    assert response.status_code == 201
    assert response.json()["message"]["isUser"] is False
    assert len(client.get("/api/prompts/1/messages").json()) == 1

    assert client.delete("/api/prompts/1/messages").status_code == 204
    assert client.get("/api/prompts/1/messages").json() == []
    assert client.delete("/api/prompts/1/messages").status_code == 204


def test_initialize_unknown_prompt(client):
    assert client.post("/api/prompts/999/initialize", json={}).status_code == 404


def test_messages_of_unknown_prompt_is_empty(client):
    assert client.get("/api/prompts/999/messages").json() == []


# Role enforcement


@pytest.fixture
def guarded_client():
    settings = make_settings(openai_api_key="sk-test", enforce_roles=True)
    app = create_app(
        settings=settings,
        storage=MemoryStorage(),
        provider_factory=ProviderFactory(settings, llm_factory=FakeLLM()),
    )
    with TestClient(app) as test_client:
        yield test_client


def test_roles_require_identity(guarded_client):
    assert guarded_client.get("/api/prompts").status_code == 401
    assert guarded_client.get("/api/prompts", headers={"X-User-Id": "77"}).status_code == 401
    assert guarded_client.get("/api/prompts", headers={"X-User-Id": "2"}).status_code == 200


def test_roles_gate_prompt_writes(guarded_client):
    user = {"X-User-Id": "2"}
    admin = {"X-User-Id": "1"}

    assert guarded_client.post("/api/prompts", json=NEW_PROMPT, headers=user).status_code == 403
    assert guarded_client.delete("/api/prompts/1", headers=user).status_code == 403
    assert guarded_client.post("/api/prompts", json=NEW_PROMPT, headers=admin).status_code == 201


def test_standard_user_may_converse(guarded_client):
    response = guarded_client.post(
        "/api/prompts/1/messages", json={"content": "hi"}, headers={"X-User-Id": "2"}
    )

    assert response.status_code == 201


def test_login_needs_no_identity(guarded_client):
    response = guarded_client.post(
        "/api/auth/login", json={"username": "user", "password": "user123"}
    )

    assert response.json()["isAdmin"] is False
