import json

import pytest
from loguru import logger

from gemini_rest.config import DOTENV_KEYS, PROCESS_ENV_KEYS, Settings
from gemini_rest.services.client import GeminiClient


class FakeResponse:
    def __init__(self, status_code: int = 200, body=None, reason: str = "OK") -> None:
        self.status_code = status_code
        self.reason = reason
        self.text = body if isinstance(body, str) else json.dumps(body)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    def __init__(self, response: FakeResponse | None = None) -> None:
        self.response = response or FakeResponse(body={"candidates": []})
        self.calls = []
        self.closed = False

    async def post(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        return self.response

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def clean_env(monkeypatch):
    for name in set(PROCESS_ENV_KEYS) | set(DOTENV_KEYS):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def make_client(settings):
    def _make(response: FakeResponse | None = None, api_key: str = "test-key"):
        session = FakeSession(response)
        return GeminiClient(api_key=api_key, settings=settings, session=session), session
    return _make


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
