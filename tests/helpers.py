"""Request-signing helpers and sample payloads shared by the tests."""

import hashlib
import hmac
import json

TEST_SIGNING_SECRET = "8f742231b10e8888abcd99yyyzzz85a5"
NOW = 1_700_000_100

CHANNEL = {
    "id": "C1",
    "name": "general",
    "created": 1700000000,
    "creator": "U1",
}

CHALLENGE_PAYLOAD = {
    "token": "t",
    "challenge": "3eZbrw1aBm2rZgRNFdxV2595E9CY3gmdALWMmHkvFXO7tYXAYM8P",
    "type": "url_verification",
}

CHANNEL_CREATED_PAYLOAD = {
    "token": "t",
    "team_id": "T061EG9R6",
    "type": "event_callback",
    "event": {"type": "channel_created", "channel": CHANNEL},
}


def sign(body: str, timestamp: int, secret: str = TEST_SIGNING_SECRET) -> str:
    """Compute the X-Slack-Signature value Slack would send."""
    base = f"v0:{timestamp}:{body}"
    return "v0=" + hmac.new(secret.encode(), base.encode(), hashlib.sha256).hexdigest()


def signed_headers(body: str, timestamp: int = NOW, secret: str = TEST_SIGNING_SECRET) -> dict:
    """Build the Slack signature headers for ``body``."""
    return {
        "X-Slack-Request-Timestamp": str(timestamp),
        "X-Slack-Signature": sign(body, timestamp, secret),
    }


def sqs_record(channel: dict | None = None, *, body: str | None = None, message_id: str = "m-1") -> dict:
    """Build an SQS record wrapping ``channel`` in an SNS notification, twice JSON-encoded."""
    if body is None and channel is not None:
        body = json.dumps({"Type": "Notification", "Message": json.dumps(channel)})
    return {"messageId": message_id, "body": body}
