"""Tests for settings parsing and log formatting."""
import json
import logging

from keygate.core.errors import GatewayError, error_body
from keygate.core.logger import (
    JsonFormatter,
    LoggerService,
    StructuredFormatter,
    TextFormatter,
)
from keygate.core.settings import NEW_RELIC_EU_GRAPHQL_URL, Settings

from .conftest import make_settings


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="keygate.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Key %s",
        args=("created",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("NEW_RELIC_API_KEY", "NEW_RELIC_GRAPHQL_URL", "PORT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.NEW_RELIC_GRAPHQL_URL == NEW_RELIC_EU_GRAPHQL_URL
        assert settings.NEW_RELIC_API_KEY == ""
        assert settings.PORT == 8080
        assert settings.ENABLE_SERVICE_AUTH is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("NEW_RELIC_API_KEY", "NRAK-ENV")
        monkeypatch.setenv("NEW_RELIC_TIMEOUT", "5")

        settings = Settings(_env_file=None)

        assert settings.NEW_RELIC_API_KEY == "NRAK-ENV"
        assert settings.NEW_RELIC_TIMEOUT == 5

    def test_reads_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("NEW_RELIC_API_KEY", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("NEW_RELIC_API_KEY=NRAK-FILE\nUNRELATED=1\n")

        settings = Settings(_env_file=env_file)

        assert settings.NEW_RELIC_API_KEY == "NRAK-FILE"

    def test_cors_origins_from_comma_list(self):
        settings = make_settings(BACKEND_CORS_ORIGINS="https://a.test, https://b.test")

        assert settings.BACKEND_CORS_ORIGINS == ["https://a.test", "https://b.test"]

    def test_cors_origins_from_environment(self, monkeypatch):
        monkeypatch.setenv("BACKEND_CORS_ORIGINS", "https://a.test,https://b.test")
        assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == [
            "https://a.test",
            "https://b.test",
        ]

        monkeypatch.setenv("BACKEND_CORS_ORIGINS", '["https://c.test"]')
        assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == ["https://c.test"]


class TestFormatters:
    def test_json_formatter_includes_extra(self):
        formatter = JsonFormatter(make_settings())

        data = json.loads(formatter.format(_record(request_id="req-1")))

        assert data["message"] == "Key created"
        assert data["level"] == "INFO"
        assert data["request_id"] == "req-1"

    def test_json_formatter_masks_credentials(self):
        formatter = JsonFormatter(make_settings())

        data = json.loads(formatter.format(_record(api_key="NRAK-SECRET")))

        assert data["api_key"] == "***"

    def test_json_formatter_handles_unserializable_values(self):
        formatter = JsonFormatter(make_settings())

        data = json.loads(formatter.format(_record(payload=object())))

        assert data["payload"] == "<non-serializable: object>"

    def test_text_formatter(self):
        line = TextFormatter(make_settings()).format(_record(request_id="req-1"))

        assert "INFO - keygate.test - Key created" in line
        assert "'request_id': 'req-1'" in line

    def test_structured_formatter(self):
        line = StructuredFormatter(make_settings()).format(_record(request_id="req-1"))

        assert "message=Key created" in line
        assert "request_id=req-1" in line

    def test_logger_service_attaches_one_handler(self):
        service = LoggerService(make_settings(LOG_FORMAT="text"))

        logger = service.get_logger("keygate.test.handlers")
        service.get_logger("keygate.test.handlers")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, TextFormatter)


def test_error_body_omits_empty_details():
    assert error_body("No key was created") == {"error": "No key was created"}
    assert GatewayError(400, "bad", [{"x": 1}]).to_dict() == {
        "error": "bad",
        "details": [{"x": 1}],
    }
