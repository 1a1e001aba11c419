"""Logging pipeline: console/file handlers with optional JSON formatting."""

from __future__ import annotations

import logging
import os
import queue
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

import orjson

from cloverhunt.infra.app_data import resolve_logs_dir

__all__ = ["JsonFormatter", "LoggingConfig", "build_logging_config", "configure_logging", "setup_logging"]

_QUEUE_LISTENER: QueueListener | None = None

_STANDARD_RECORD_FIELDS = frozenset(
    {
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
        "message",
        "taskName",
    }
)


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


class JsonFormatter(logging.Formatter):
    """JSON formatter with extra-field preservation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode("utf-8")


def configure_logging(config: LoggingConfig) -> None:
    """Install console and optional file handlers on the root logger.

    With a file sink, records reach both handlers through a queue listener so
    file writes happen off the calling thread.
    """
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.getLevelNamesMapping().get(config.level_name.upper(), logging.INFO))

    handlers = _build_handlers(config)
    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def build_logging_config(*, with_file: bool = True) -> LoggingConfig:
    """Build logging configuration from env vars."""
    level_name = os.getenv("CLOVER_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).strip().upper()
    console_format = os.getenv("LOG_FORMAT", "text").strip().lower()
    return LoggingConfig(
        level_name=level_name,
        console_format=console_format,
        file_path=_resolve_run_log_file_path() if with_file else None,
        file_format="json",
    )


def setup_logging(*, with_file: bool = True) -> None:
    """Configure application logging from env vars."""
    config = build_logging_config(with_file=with_file)
    configure_logging(config)
    if config.file_path:
        logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str:
    configured = os.getenv("CLOVER_LOG_DIR", "").strip()
    base_dir = Path(configured) if configured else resolve_logs_dir()
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"clover_run_{stamp}.jsonl")


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    console: logging.Handler = logging.StreamHandler()
    console.setFormatter(_resolve_formatter(config.console_format))
    if not config.file_path:
        return [console]
    file_path = Path(config.file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    run_log = logging.FileHandler(file_path, encoding="utf-8", delay=True)
    run_log.setFormatter(_resolve_formatter(config.file_format))
    return [console, run_log]


def _resolve_formatter(kind: str) -> logging.Formatter:
    factory = _FORMATTERS.get(kind.strip().lower(), _text_formatter)
    return factory()


def _text_formatter() -> logging.Formatter:
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")


_FORMATTERS: dict[str, Callable[[], logging.Formatter]] = {
    "json": JsonFormatter,
    "text": _text_formatter,
}
