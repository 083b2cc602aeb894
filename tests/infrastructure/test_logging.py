import json
import logging

from invtrack.infrastructure.logging import JsonFormatter, logging_config


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="invtrack.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="loaded %d products",
        args=(3,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_renders_message():
    entry = json.loads(JsonFormatter().format(_record()))
    assert entry["level"] == "WARNING"
    assert entry["logger"] == "invtrack.test"
    assert entry["message"] == "loaded 3 products"


def test_json_formatter_promotes_extra_fields():
    entry = json.loads(JsonFormatter().format(_record(product_id=7)))
    assert entry["product_id"] == 7


def test_config_targets_package_logger_at_requested_level():
    config = logging_config("info", json_logs=True)
    assert config["loggers"]["invtrack"]["level"] == "INFO"
    assert config["handlers"]["stderr"]["formatter"] == "json"
