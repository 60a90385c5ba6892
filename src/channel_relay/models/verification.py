"""Inbound request and signature verification result models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class VerificationFailure(str, Enum):
    """Reasons a Slack request signature is rejected, in check order."""

    MISSING_TIMESTAMP = "missing_timestamp"
    MALFORMED_TIMESTAMP = "malformed_timestamp"
    TIMESTAMP_OUT_OF_WINDOW = "timestamp_out_of_window"
    MISSING_SIGNATURE = "missing_signature"
    UNSUPPORTED_SIGNATURE_VERSION = "unsupported_signature_version"
    MALFORMED_SIGNATURE_ENCODING = "malformed_signature_encoding"
    SIGNATURE_MISMATCH = "signature_mismatch"


class InboundRequest(BaseModel):
    """An HTTP request as handed over by the transport. Header names are case-sensitive."""

    model_config = ConfigDict(frozen=True)

    headers: dict[str, str]
    body: str  # Raw payload exactly as received


class VerificationOutcome(BaseModel):
    """Result of verifying one request: valid, or invalid with a reason."""

    model_config = ConfigDict(frozen=True)

    reason: VerificationFailure | None = None

    @property
    def is_valid(self) -> bool:
        return self.reason is None

    @classmethod
    def valid(cls) -> "VerificationOutcome":
        return cls()

    @classmethod
    def invalid(cls, reason: VerificationFailure) -> "VerificationOutcome":
        return cls(reason=reason)
