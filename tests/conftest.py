"""Shared fixtures."""

import httpx
import pytest
from fastapi.testclient import TestClient
from loguru import logger

from pulltabs.config import NotifierConfig
from pulltabs.main import create_app

SECRET = "s3cr3t"
SLACK_URL = "https://hooks.slack.test/services/T000/B000/XXXX"


class SlackRecorder:
    """Fake Slack endpoint recording every request it receives."""

    def __init__(self, status_code: int = 200) -> None:
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text="ok")

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def config() -> NotifierConfig:
    return NotifierConfig(
        label="awaiting review",
        message="A Pull Request requires review",
        secret=SECRET,
        slack_url=SLACK_URL,
        instance_id="test-instance",
        delivery_timeout=2.0,
    )


@pytest.fixture
def slack() -> SlackRecorder:
    return SlackRecorder()


@pytest.fixture
def app(config, slack):
    return create_app(config, http_client=slack.client())


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
