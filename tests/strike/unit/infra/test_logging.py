from __future__ import annotations

import json
import logging

from strike.core.models import Point
from strike.core.shot_resolution import resolve_salvo
from strike.infra.config import StrikeConfig, set_strike_config
from strike.infra.logging import JsonFormatter, get_logger, setup_logging


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.json.formatter"
    assert payload["fields"] == {"custom": 1}


def test_json_formatter_omits_fields_without_extras() -> None:
    record = logging.makeLogRecord({"name": "strike", "msg": "plain", "levelname": "INFO"})
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "plain"
    assert "fields" not in payload


def test_setup_logging_uses_config_when_no_handlers(restore_root_logging) -> None:
    root = restore_root_logging
    root.handlers.clear()
    handler = setup_logging(StrikeConfig(log_level="WARNING", log_format="json"))
    assert handler is not None
    assert root.handlers == [handler]
    assert root.level == logging.WARNING
    assert isinstance(handler.formatter, JsonFormatter)


def test_setup_logging_defaults_to_active_config(restore_root_logging) -> None:
    root = restore_root_logging
    root.handlers.clear()
    set_strike_config(StrikeConfig(log_level="DEBUG", log_format="text"))
    handler = setup_logging()
    assert handler is not None
    assert root.level == logging.DEBUG
    assert not isinstance(handler.formatter, JsonFormatter)


def test_setup_logging_does_not_override_existing_handlers(restore_root_logging) -> None:
    root = restore_root_logging
    sentinel = logging.NullHandler()
    root.handlers.clear()
    root.addHandler(sentinel)
    root.setLevel(logging.WARNING)
    assert setup_logging(StrikeConfig(log_level="DEBUG")) is None
    assert root.handlers == [sentinel]
    assert root.level == logging.WARNING


def test_setup_logging_force_replaces_handlers(restore_root_logging) -> None:
    root = restore_root_logging
    root.handlers.clear()
    root.addHandler(logging.NullHandler())
    handler = setup_logging(StrikeConfig(log_level="ERROR"), force=True)
    assert root.handlers == [handler]
    assert root.level == logging.ERROR


def test_strike_modules_log_through_configured_root(restore_root_logging, capsys) -> None:
    root = restore_root_logging
    root.handlers.clear()
    setup_logging(StrikeConfig(log_level="INFO", log_format="json"))

    resolve_salvo([Point(5, 2), Point(3, -1)], 10)

    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    payloads = [json.loads(line) for line in lines]
    assert payloads[-1]["logger"] == "strike.core.shot_resolution"
    assert payloads[-1]["msg"] == "salvo_resolved strikes=2 hits=1"
    assert all(payload["logger"] != "strike.core.hit_detection" for payload in payloads)


def test_get_logger_returns_namespaced_logger() -> None:
    assert get_logger("strike.core.hit_detection") is logging.getLogger("strike.core.hit_detection")
