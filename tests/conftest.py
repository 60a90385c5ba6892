"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from channel_relay.app import app
from channel_relay.aws.clients import reset_clients
from channel_relay.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Fake AWS credentials and fresh settings/client caches for every test."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_REGION", "ap-northeast-1")
    monkeypatch.setenv("AWS_SNS_TOPIC_ARN", "arn:aws:sns:ap-northeast-1:123456789012:new-channel")
    get_settings.cache_clear()
    reset_clients()
    yield
    get_settings.cache_clear()
    reset_clients()


@pytest.fixture
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)
