"""Tests for SecretStore against a stubbed Secrets Manager client."""
import json

import boto3
import pytest
from botocore.exceptions import ClientError
from botocore.stub import Stubber

from taste.secret_store import SecretStore


@pytest.fixture
def client():
    return boto3.client(
        "secretsmanager",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


def test_read_decodes_secret_string(client):
    with Stubber(client) as stubber:
        stubber.add_response(
            "get_secret_value",
            {"SecretString": json.dumps({"key": "goodreads-key"})},
            {"SecretId": "goodreads-api-key"},
        )

        assert SecretStore(client=client).read("goodreads-api-key") == {"key": "goodreads-key"}
        stubber.assert_no_pending_responses()


def test_write_overwrites_with_json(client):
    value = {"access_token": "fresh", "expires_at": "2024-05-01T13:00:00+00:00"}

    with Stubber(client) as stubber:
        stubber.add_response(
            "update_secret",
            {},
            {"SecretId": "spotify-credentials", "SecretString": json.dumps(value)},
        )

        SecretStore(client=client).write("spotify-credentials", value)
        stubber.assert_no_pending_responses()


def test_read_propagates_client_errors(client):
    with Stubber(client) as stubber:
        stubber.add_client_error(
            "get_secret_value",
            service_error_code="ResourceNotFoundException",
            service_message="Secrets Manager can't find the specified secret.",
        )

        with pytest.raises(ClientError):
            SecretStore(client=client).read("missing")
