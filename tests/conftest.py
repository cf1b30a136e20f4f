"""Shared fixtures for PromptDesk tests."""

import httpx
import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from promptdesk.config import Settings
from promptdesk.database import create_engine_for
from promptdesk.database.init import seed_defaults
from promptdesk.main import create_app
from promptdesk.providers import ProviderFactory
from promptdesk.repositories import MemoryStorage
from promptdesk.repositories.sql import SqlStorage


class FakeLLM:
    """Stands in for ChatOpenAI: records construction params and inputs."""

    def __init__(self, reply="Hello from the model", error=None):
        self.reply = reply
        self.error = error
        self.params = []
        self.received = []

    def __call__(self, **params):
        self.params.append(params)
        return self

    async def ainvoke(self, messages):
        self.received.append(messages)
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.reply)


def openai_error(cls, status_code, code, message="boom"):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status_code, request=request)
    return cls(message, response=response, body={"code": code, "message": message})


def make_settings(**overrides):
    values = {
        "openai_api_key": None,
        "google_api_key": None,
        "anthropic_api_key": None,
        "storage_backend": "memory",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings(openai_api_key="sk-test")


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def provider_factory(settings, fake_llm):
    return ProviderFactory(settings, llm_factory=fake_llm)


@pytest.fixture
async def memory_storage(settings):
    storage = MemoryStorage()
    await seed_defaults(storage, settings)
    return storage


@pytest.fixture(params=["memory", "sql"])
async def storage(request, tmp_path, settings):
    """Each storage backend, seeded with the default users and prompt."""
    if request.param == "memory":
        backend = MemoryStorage()
    else:
        db_settings = make_settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
        backend = SqlStorage(create_engine_for(db_settings))
    await backend.init()
    await seed_defaults(backend, settings)
    yield backend
    await backend.close()


@pytest.fixture
def client(settings, provider_factory):
    app = create_app(settings=settings, storage=MemoryStorage(), provider_factory=provider_factory)
    with TestClient(app) as test_client:
        yield test_client

