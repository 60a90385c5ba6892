"""Tests for the SSM-backed secret provider."""

import boto3
import pytest
from botocore.exceptions import EndpointConnectionError
from botocore.stub import Stubber

from channel_relay.aws.parameters import SsmParameterStore
from channel_relay.errors import DependencyError, SecretNotFoundError

PARAMETER = "/slack-new-channel-notification/signing-secret"


@pytest.fixture
def ssm():
    client = boto3.client("ssm", region_name="ap-northeast-1")
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


def test_get_parameter_decrypts(ssm):
    """The parameter is requested with decryption and its value returned."""
    client, stubber = ssm
    stubber.add_response(
        "get_parameter",
        {"Parameter": {"Name": PARAMETER, "Type": "SecureString", "Value": "s3cret"}},
        expected_params={"Name": PARAMETER, "WithDecryption": True},
    )
    assert SsmParameterStore(client).get_parameter(PARAMETER) == "s3cret"


def test_parameter_not_found(ssm):
    """ParameterNotFound maps to SecretNotFoundError."""
    client, stubber = ssm
    stubber.add_client_error("get_parameter", service_error_code="ParameterNotFound", http_status_code=400)
    with pytest.raises(SecretNotFoundError, match=PARAMETER):
        SsmParameterStore(client).get_parameter(PARAMETER)


def test_other_client_error(ssm):
    """Any other SSM error is a generic dependency failure."""
    client, stubber = ssm
    stubber.add_client_error("get_parameter", service_error_code="AccessDeniedException", http_status_code=400)
    with pytest.raises(DependencyError) as exc_info:
        SsmParameterStore(client).get_parameter(PARAMETER)
    assert not isinstance(exc_info.value, SecretNotFoundError)
    assert "AccessDeniedException" in str(exc_info.value)


def test_missing_value(ssm):
    """A response without a value is a dependency failure."""
    client, stubber = ssm
    stubber.add_response("get_parameter", {"Parameter": {"Name": PARAMETER}})
    with pytest.raises(DependencyError):
        SsmParameterStore(client).get_parameter(PARAMETER)


def test_transport_error():
    """botocore transport errors are wrapped."""
    client = boto3.client("ssm", region_name="ap-northeast-1")

    def _fail(**kwargs):
        raise EndpointConnectionError(endpoint_url="https://ssm.ap-northeast-1.amazonaws.com")

    client.get_parameter = _fail
    with pytest.raises(DependencyError):
        SsmParameterStore(client).get_parameter(PARAMETER)


def test_secret_never_in_error_message(ssm):
    """Errors name the parameter, never a value."""
    client, stubber = ssm
    stubber.add_client_error(
        "get_parameter", service_error_code="ThrottlingException", service_message="slow down"
    )
    with pytest.raises(DependencyError) as exc_info:
        SsmParameterStore(client).get_parameter(PARAMETER)
    assert "s3cret" not in str(exc_info.value)
