"""Slack request signature verification.

Implements the v0 signing scheme: an HMAC-SHA256 over
``v0:{timestamp}:{raw body}`` keyed by the app's signing secret, sent as
``X-Slack-Signature: v0=<hex digest>``. Requests older than five minutes, or
stamped in the future, are rejected to bound replay exposure.

See https://api.slack.com/authentication/verifying-requests-from-slack
"""

import binascii
import hmac
import re

from slack_sdk.signature import SignatureVerifier

from channel_relay.models.verification import (
    InboundRequest,
    VerificationFailure,
    VerificationOutcome,
)

TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"
SIGNATURE_HEADER = "X-Slack-Signature"
SIGNATURE_VERSION_PREFIX = "v0="

# Maximum accepted request age in seconds
MAX_REQUEST_AGE = 5 * 60

# Signed decimal that fits a 64-bit integer's digit count; longer values are
# malformed rather than handed to int()
_TIMESTAMP_PATTERN = re.compile(r"[+-]?[0-9]{1,19}")


def verify(request: InboundRequest, secret: str, now: int) -> VerificationOutcome:
    """Check that ``request`` was signed with ``secret`` within the replay window.

    Checks run in a fixed order and the first failure is returned:
    timestamp header, replay window, signature header, version prefix,
    hex encoding, then a constant-time digest comparison.

    Args:
        request: The inbound request with its raw body.
        secret: Slack signing secret. Never logged.
        now: Current time in Unix seconds.
    """
    raw_timestamp = request.headers.get(TIMESTAMP_HEADER)
    if raw_timestamp is None:
        return VerificationOutcome.invalid(VerificationFailure.MISSING_TIMESTAMP)
    if not _TIMESTAMP_PATTERN.fullmatch(raw_timestamp):
        return VerificationOutcome.invalid(VerificationFailure.MALFORMED_TIMESTAMP)
    timestamp = int(raw_timestamp)

    age = now - timestamp
    if age < 0 or age > MAX_REQUEST_AGE:
        return VerificationOutcome.invalid(VerificationFailure.TIMESTAMP_OUT_OF_WINDOW)

    expected = _compute_digest(secret, timestamp, request.body)

    signature = request.headers.get(SIGNATURE_HEADER)
    if signature is None:
        return VerificationOutcome.invalid(VerificationFailure.MISSING_SIGNATURE)
    if not signature.startswith(SIGNATURE_VERSION_PREFIX):
        return VerificationOutcome.invalid(VerificationFailure.UNSUPPORTED_SIGNATURE_VERSION)

    try:
        supplied = binascii.unhexlify(signature[len(SIGNATURE_VERSION_PREFIX):])
    except (binascii.Error, ValueError):
        return VerificationOutcome.invalid(VerificationFailure.MALFORMED_SIGNATURE_ENCODING)

    if not hmac.compare_digest(supplied, expected):
        return VerificationOutcome.invalid(VerificationFailure.SIGNATURE_MISMATCH)
    return VerificationOutcome.valid()


def _compute_digest(secret: str, timestamp: int, body: str) -> bytes:
    """Return the raw HMAC-SHA256 digest Slack would send for this request."""
    verifier = SignatureVerifier(signing_secret=secret)
    hex_signature = verifier.generate_signature(timestamp=str(timestamp), body=body)
    return bytes.fromhex(hex_signature[len(SIGNATURE_VERSION_PREFIX):])
