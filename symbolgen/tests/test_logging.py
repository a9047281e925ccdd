"""Logging setup tests"""

import logging
from types import SimpleNamespace

import httpx
from loguru import logger

from symbolgen.core.config import settings
from symbolgen.core.logging import _normalize_level, _slack_sink, get_logger


class TestLogging:
    def test_level_aliases(self):
        assert _normalize_level("warn") == "WARNING"
        assert _normalize_level("fatal") == "CRITICAL"
        assert _normalize_level("nonsense") == "INFO"
        assert _normalize_level(None) == "INFO"

    def test_bound_name(self, log_messages):
        get_logger("tests").info("hello from loguru")
        assert "hello from loguru" in log_messages

    def test_stdlib_logging_is_intercepted(self, log_messages):
        logging.getLogger("symbolgen.tests").warning("hello from stdlib")
        assert "hello from stdlib" in log_messages


class TestSlackSink:
    """Test the webhook notification for failed runs"""

    def make_message(self, text):
        record = {
            "extra": {"name": "symbol_service"},
            "level": logger.level("ERROR"),
            "function": "run",
            "line": 42,
            "message": text,
        }
        return SimpleNamespace(record=record)

    def test_posts_environment_and_origin(self, monkeypatch):
        sent = []
        monkeypatch.setattr(settings, "SLACK_WEBHOOK_URL", "https://hooks.example/T0")
        monkeypatch.setattr(settings, "ENV", "prod")
        monkeypatch.setattr(httpx, "post", lambda url, json, timeout: sent.append((url, json["text"])))

        _slack_sink(self.make_message("Symbol table run failed"))
        assert sent == [("https://hooks.example/T0", "[prod] [ERROR] symbol_service:run:42\nSymbol table run failed")]

    def test_silent_without_webhook(self, monkeypatch):
        sent = []
        monkeypatch.setattr(settings, "SLACK_WEBHOOK_URL", None)
        monkeypatch.setattr(httpx, "post", lambda *args, **kwargs: sent.append(args))
        _slack_sink(self.make_message("ignored"))
        assert sent == []

    def test_webhook_failure_is_not_raised(self, monkeypatch):
        def refuse(*args, **kwargs):
            raise httpx.ConnectError("refused")

        monkeypatch.setattr(settings, "SLACK_WEBHOOK_URL", "https://hooks.example/T0")
        monkeypatch.setattr(httpx, "post", refuse)
        _slack_sink(self.make_message("Symbol table run failed"))
