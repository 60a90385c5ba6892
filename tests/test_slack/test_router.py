"""Integration tests for the /slack/events endpoint."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from channel_relay.app import app
from channel_relay.errors import DependencyError
from channel_relay.pipeline import DispatchPipeline
from channel_relay.slack.router import get_dispatch_pipeline
from helpers import (
    CHALLENGE_PAYLOAD,
    CHANNEL,
    CHANNEL_CREATED_PAYLOAD,
    NOW,
    TEST_SIGNING_SECRET,
    signed_headers,
)


@pytest.fixture
def publisher() -> MagicMock:
    return MagicMock()


@pytest.fixture
def client(publisher: MagicMock):
    """TestClient whose pipeline uses a fixed secret, clock and mock publisher."""
    secrets = MagicMock()
    secrets.get_parameter.return_value = TEST_SIGNING_SECRET
    pipeline = DispatchPipeline(secrets, publisher, "/test/signing-secret", clock=lambda: NOW)
    app.dependency_overrides[get_dispatch_pipeline] = lambda: pipeline
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _post(client: TestClient, payload: dict, headers: dict | None = None):
    body = json.dumps(payload)
    if headers is None:
        headers = signed_headers(body)
    return client.post(
        "/slack/events",
        content=body.encode(),
        headers={**headers, "Content-Type": "application/json"},
    )


def test_url_verification_challenge(client: TestClient, publisher: MagicMock):
    """URL verification returns the challenge token and publishes nothing."""
    response = _post(client, CHALLENGE_PAYLOAD)
    assert response.status_code == 200
    assert response.json() == {"challenge": CHALLENGE_PAYLOAD["challenge"]}
    publisher.publish.assert_not_called()


def test_channel_created_publishes(client: TestClient, publisher: MagicMock):
    """channel_created is published and acknowledged with a null challenge."""
    response = _post(client, CHANNEL_CREATED_PAYLOAD)
    assert response.status_code == 200
    assert response.json() == {"challenge": None}
    publisher.publish.assert_called_once()
    assert json.loads(publisher.publish.call_args.args[0]) == CHANNEL


def test_invalid_signature_returns_403(client: TestClient, publisher: MagicMock):
    """A bad signature is rejected and nothing is published."""
    headers = {"X-Slack-Request-Timestamp": str(NOW), "X-Slack-Signature": "v0=" + "0" * 64}
    response = _post(client, CHANNEL_CREATED_PAYLOAD, headers)
    assert response.status_code == 403
    assert response.json()["detail"] == "Invalid Slack signature"
    publisher.publish.assert_not_called()


def test_missing_headers_returns_403(client: TestClient):
    """Unsigned requests are rejected."""
    response = _post(client, CHALLENGE_PAYLOAD, headers={})
    assert response.status_code == 403


def test_unknown_event_returns_400(client: TestClient, publisher: MagicMock):
    """A verified but unsupported event is a client error."""
    response = _post(client, {"token": "t", "event": {"type": "unknown_type"}})
    assert response.status_code == 400
    assert response.json()["detail"] == "unrecognized_shape"
    publisher.publish.assert_not_called()


def test_publish_failure_returns_502(client: TestClient, publisher: MagicMock):
    """A failed hand-off is surfaced, not acknowledged."""
    publisher.publish.side_effect = DependencyError("SNS Publish failed")
    response = _post(client, CHANNEL_CREATED_PAYLOAD)
    assert response.status_code == 502


def test_overlong_timestamp_returns_403(client: TestClient, publisher: MagicMock):
    """A timestamp too long to parse is an authentication failure, not a crash."""
    headers = {"X-Slack-Request-Timestamp": "9" * 5000, "X-Slack-Signature": "v0=00"}
    response = _post(client, CHANNEL_CREATED_PAYLOAD, headers)
    assert response.status_code == 403
    publisher.publish.assert_not_called()


def test_non_utf8_body_returns_400(client: TestClient, publisher: MagicMock):
    """A body that is not UTF-8 is refused as malformed."""
    response = client.post(
        "/slack/events",
        content=b"\xff\xfe{}",
        headers={**signed_headers("{}"), "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "malformed_json"
    publisher.publish.assert_not_called()
