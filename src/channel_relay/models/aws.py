"""AWS Lambda event and response envelopes.

See the API Gateway proxy integration input/output formats and the SQS
event source record format in the AWS Lambda developer guide.
"""

import base64

from pydantic import BaseModel, ConfigDict, Field, field_validator

from channel_relay.models.verification import InboundRequest


class ApiGatewayEvent(BaseModel):
    """API Gateway proxy request. Only the fields the relay reads are modelled."""

    model_config = ConfigDict(populate_by_name=True)

    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""
    is_base64_encoded: bool = Field(default=False, alias="isBase64Encoded")

    @field_validator("headers", mode="before")
    @classmethod
    def _null_headers(cls, value):
        # API Gateway sends null when the request had no headers
        return {} if value is None else value

    @field_validator("body", mode="before")
    @classmethod
    def _null_body(cls, value):
        return "" if value is None else value

    def to_inbound_request(self) -> InboundRequest:
        """Return the raw request Slack signed, undoing API Gateway's base64 wrapping.

        Raises:
            ValueError: The body is not valid base64 or not UTF-8.
        """
        body = self.body
        if self.is_base64_encoded:
            body = base64.b64decode(body, validate=True).decode("utf-8")
        return InboundRequest(headers=self.headers, body=body)


class ApiGatewayResponse(BaseModel):
    """API Gateway proxy response."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    headers: dict[str, str] = Field(default_factory=dict)
    body: str

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class SqsRecord(BaseModel):
    """One SQS message. ``body`` is an SNS notification serialized as JSON."""

    body: str | None = None
    message_id: str | None = Field(default=None, alias="messageId")


class SqsEvent(BaseModel):
    """Batch of SQS records delivered to one invocation."""

    records: list[SqsRecord] = Field(default_factory=list, alias="Records")


class SnsNotification(BaseModel):
    """SNS envelope found in an SQS record body. ``Message`` is itself JSON."""

    message: str = Field(alias="Message")
