"""Tests for the Lambda entry point."""
import importlib.util
import logging
from pathlib import Path

import pytest

from taste.exceptions import UpstreamError

LAMBDA_PATH = Path(__file__).resolve().parent.parent / "cdk" / "lambda_code" / "stats" / "lambda_function.py"

PAYLOAD = {"statusCode": 200, "body": {"books": [], "music": [{"value": "rock", "count": 100}]}}


@pytest.fixture
def lambda_module():
    spec = importlib.util.spec_from_file_location("stats_lambda_function", LAMBDA_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class StubHandler:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error

    def handle(self):
        if self.error:
            raise self.error
        return self.result


def test_lambda_handler_returns_payload(lambda_module, monkeypatch):
    monkeypatch.setattr(lambda_module, "build_handler", lambda: StubHandler(result=PAYLOAD))

    assert lambda_module.lambda_handler({}, None) == PAYLOAD


def test_lambda_handler_reraises_failures(lambda_module, monkeypatch):
    error = UpstreamError("GET https://api.spotify.com/v1/me/top/tracks returned 401", status_code=401)
    monkeypatch.setattr(lambda_module, "build_handler", lambda: StubHandler(error=error))

    with pytest.raises(UpstreamError):
        lambda_module.lambda_handler({}, None)


def test_build_handler_reads_environment(lambda_module, monkeypatch):
    monkeypatch.setenv("GOODREADS_USER_ID", "26737737")
    monkeypatch.setenv("AWS_REGION", "eu-west-1")
    monkeypatch.setenv("SPOTIFY_SECRET_NAME", "secret-2")
    regions = []

    def fake_store(region_name=None):
        regions.append(region_name)
        return object()

    monkeypatch.setattr(lambda_module, "SecretStore", fake_store)

    handler = lambda_module.build_handler()

    assert regions == ["eu-west-1"]
    assert handler.settings.goodreads_user_id == "26737737"
    assert handler.token_manager.secret_name == "secret-2"


def test_build_handler_applies_log_level(lambda_module, monkeypatch):
    monkeypatch.setenv("GOODREADS_USER_ID", "26737737")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setattr(lambda_module, "SecretStore", lambda region_name=None: object())
    root = logging.getLogger()
    previous = root.level

    try:
        lambda_module.build_handler()
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
