import json
import logging

from maica.core.logger import JsonFormatter, ServiceContextFilter, build_handler
from maica.core.monitoring import FILTERED, scrub_event


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("maica.tax", logging.INFO, __file__, 1, "computed %s", ("cit",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_stamps_service_and_extras():
    record = _record(endpoint="calculate")
    ServiceContextFilter("MAICA", "test").filter(record)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "computed cit"
    assert payload["service"] == "MAICA"
    assert payload["env"] == "test"
    assert payload["extra"] == {"endpoint": "calculate"}


def test_plain_handler_carries_env():
    handler = build_handler("plain")
    record = _record()
    assert handler.filter(record)
    assert "| test |" in handler.format(record)


def test_scrub_event_removes_figures_and_tokens():
    event = {
        "request": {
            "data": {"revenue": 50_000_000, "salaries": 10_000_000},
            "headers": {"Authorization": "Bearer abc", "Content-Type": "application/json"},
        },
        "message": "boom",
    }
    scrubbed = scrub_event(event)
    assert scrubbed["request"]["data"] == FILTERED
    assert scrubbed["request"]["headers"]["Authorization"] == FILTERED
    assert scrubbed["request"]["headers"]["Content-Type"] == "application/json"
    assert scrubbed["message"] == "boom"


def test_scrub_event_without_request():
    assert scrub_event({"message": "x"}) == {"message": "x"}
