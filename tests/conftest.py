from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from bitbucket_webhooks.core.config import Settings
from bitbucket_webhooks.main import create_app
from bitbucket_webhooks.services.webhook import Webhook

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture():
    """Read a JSON payload from tests/fixtures as bytes"""
    def _load(name: str) -> bytes:
        return (FIXTURES_DIR / name).read_bytes()

    return _load


@pytest.fixture
def webhook():
    return Webhook()


@pytest.fixture
def settings():
    return Settings(WEBHOOK_PATH="/webhooks", LOG_WEBHOOK_ERRORS=False)


@pytest.fixture
def client(webhook, settings):
    app = create_app(webhook, settings)
    return TestClient(app)


@pytest.fixture
def post_event(client):
    """Post a raw body to the webhook route with the given event key"""
    def _post(event_key, body: bytes = b"{}"):
        headers = {}
        if event_key is not None:
            headers["X-Event-Key"] = event_key
        return client.post("/webhooks", content=body, headers=headers)

    return _post
