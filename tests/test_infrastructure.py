"""Tests for logging formatters, the Sentry filter and request validators."""

import json
import logging

import pytest
from fastapi import HTTPException

from fastlonn.core.logging_config import ColoredFormatter, JSONFormatter
from fastlonn.core.sentry_config import FILTERED, before_send_hook
from fastlonn.core.validators import validate_date_params, validate_year


def make_record(msg="hello %s", args=("world",), level=logging.INFO):
    return logging.LogRecord("fastlonn.test", level, __file__, 10, msg, args, None)


class TestJSONFormatter:
    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "fastlonn.test"
        assert data["message"] == "hello world"

    def test_extra_fields_are_merged(self):
        record = make_record()
        record.extra_fields = {"request_id": "abc", "year": 2025}
        data = json.loads(JSONFormatter().format(record))

        assert data["request_id"] == "abc"
        assert data["year"] == 2025

    def test_non_ascii_kept(self):
        data = JSONFormatter().format(make_record("Fastlønn", ()))
        assert "Fastlønn" in data


def test_colored_formatter_restores_levelname():
    record = make_record(level=logging.WARNING)
    output = ColoredFormatter("%(levelname)s %(message)s").format(record)

    assert "\033[33m" in output
    assert record.levelname == "WARNING"


class TestSentryFilter:
    def test_strips_body_query_and_cookie(self):
        event = {
            "request": {
                "headers": {"cookie": "session=1", "user-agent": "x"},
                "data": {"yearly_income": "600000"},
                "query_string": "year=2025",
            }
        }
        filtered = before_send_hook(event, None)["request"]

        assert filtered["headers"]["cookie"] == FILTERED
        assert filtered["headers"]["user-agent"] == "x"
        assert filtered["data"] == FILTERED
        assert filtered["query_string"] == FILTERED

    def test_event_without_request(self):
        event = {"message": "boom"}
        assert before_send_hook(event, None) == {"message": "boom"}


class TestValidators:
    def test_valid_year(self):
        assert validate_year(2025) == 2025

    @pytest.mark.parametrize("year", [1899, 2201])
    def test_invalid_year(self, year):
        with pytest.raises(HTTPException) as exc:
            validate_year(year)
        assert exc.value.status_code == 400

    def test_invalid_date(self):
        with pytest.raises(HTTPException) as exc:
            validate_date_params(2025, 13, 1)
        assert exc.value.status_code == 400
