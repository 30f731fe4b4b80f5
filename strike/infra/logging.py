"""Strike logging policy over the standard logging module."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from strike.infra.config import StrikeConfig, get_strike_config

__all__ = ["JsonFormatter", "get_logger", "setup_logging"]

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra`` values land under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def setup_logging(config: StrikeConfig | None = None, *, force: bool = False) -> logging.Handler | None:
    """Attach a console handler to the root logger per strike config.

    Leaves existing root handlers alone unless ``force`` is set; returns the
    installed handler, or ``None`` when nothing changed.
    """
    root = logging.getLogger()
    if root.handlers and not force:
        return None

    active = config if config is not None else get_strike_config()
    handler = logging.StreamHandler()
    if active.log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, active.log_level, logging.INFO))
    get_logger(__name__).debug(
        "logging_configured level=%s format=%s", active.log_level, active.log_format
    )
    return handler


def get_logger(name: str) -> logging.Logger:
    """Return namespaced logger instance."""
    return logging.getLogger(name)
