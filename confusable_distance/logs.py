"""Logging setup: plain text or one JSON object per line on stderr."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, MutableMapping, Tuple

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_JSON_SAFE_PRIMITIVES = (str, int, float, bool, type(None))


def _iso8601(dt: datetime) -> str:
    # Always UTC, explicit trailing 'Z'
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _json_sanitize(value: Any) -> Any:
    """
    Best-effort JSON sanitizer for log payloads:
    - Pass through JSON-safe primitives
    - Convert bytes to utf-8 (errors replaced)
    - Convert datetimes to ISO8601
    - Fallback to str(value)
    """
    if isinstance(value, _JSON_SAFE_PRIMITIVES):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, datetime):
        return _iso8601(value)
    if isinstance(value, Mapping):
        return {str(k): _json_sanitize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_json_sanitize(v) for v in value]
    return str(value)


class JsonFormatter(logging.Formatter):
    """JSON formatter with stable keys; anything passed via ``extra`` is kept."""

    # Standard LogRecord attributes to exclude from "extra"
    _std_keys: Tuple[str, ...] = (
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "asctime",
    )

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()

        extra: Dict[str, Any] = {}
        for k, v in record.__dict__.items():
            if k not in self._std_keys and not k.startswith("_"):
                extra[k] = v

        payload: Dict[str, Any] = {
            "ts": _iso8601(datetime.fromtimestamp(record.created, tz=timezone.utc)),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
        }
        if extra:
            payload.update(_json_sanitize(extra))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


_configured = False


def configure_logging(level: int | str = "INFO", *, json_logs: bool = False, force: bool = False) -> None:
    """
    Idempotent root logger setup. Output goes to stderr so CLI results on
    stdout stay machine readable.
    """
    global _configured
    if _configured and not force:
        return

    root = logging.getLogger()
    resolved_level = (
        level if isinstance(level, int) else getattr(logging, str(level).upper(), logging.INFO)
    )
    root.setLevel(resolved_level)

    # Remove pre-existing handlers to avoid duplicate lines in tests
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(JsonFormatter() if json_logs else logging.Formatter(_TEXT_FORMAT))
    root.addHandler(handler)

    _configured = True


class ContextAdapter(logging.LoggerAdapter[logging.Logger]):
    """Bind static context (e.g. url, output) to every line of a logger."""

    def __init__(self, logger: logging.Logger, extra: Mapping[str, Any] | None = None):
        super().__init__(logger, dict(extra or {}))

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        merged_extra: Dict[str, Any] = {}
        call_extra = kwargs.get("extra")
        if isinstance(call_extra, Mapping):
            merged_extra.update(dict(call_extra))
        for k, v in (self.extra or {}).items():
            merged_extra.setdefault(k, v)
        kwargs["extra"] = merged_extra
        return msg, kwargs


def bind(logger: logging.Logger | None = None, **context: Any) -> ContextAdapter:
    """
    Return a LoggerAdapter with bound context.

        log = bind(logging.getLogger(__name__), url=url)
        log.info("fetched")
    """
    base = logger or logging.getLogger()
    return ContextAdapter(base, context)
