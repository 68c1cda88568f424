"""Tests for the local runner."""
import json
import logging

import run_stats
from run_stats import run_stats as render


class StubHandler:
    def handle(self):
        return {"statusCode": 200, "body": {"books": [], "music": [{"value": "neue deutsche härte", "count": 55}]}}


def test_run_stats_prints_indented_json():
    output = render(StubHandler())

    assert json.loads(output)["body"]["music"][0]["count"] == 55
    assert "härte" in output
    assert output.startswith("{\n    ")


def test_main_configures_logging_from_settings(monkeypatch, capsys):
    monkeypatch.setenv("GOODREADS_USER_ID", "26737737")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    levels = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: levels.append(kwargs["level"]))
    monkeypatch.setattr(run_stats, "SecretStore", lambda region_name=None: object())
    monkeypatch.setattr(run_stats, "RequestHandler", lambda store, settings: StubHandler())

    run_stats.main()

    assert levels == ["WARNING"]
    assert json.loads(capsys.readouterr().out)["statusCode"] == 200
