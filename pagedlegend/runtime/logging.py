"""Legend logging pipeline: console output plus optional queued file stream."""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from pagedlegend.api.logging import LegendLoggingConfig
from pagedlegend.runtime.config import resolve_log_level_name

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_QUEUE_LISTENER: QueueListener | None = None

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "taskName",
}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; `extra=` fields are kept under `fields`."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRIBUTES}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=repr)


def configure_legend_logging(config: LegendLoggingConfig) -> None:
    """Replace root handlers with the legend pipeline described by `config`.

    The file stream, when configured, is fed through a queue so render passes
    never block on disk writes.
    """
    global _QUEUE_LISTENER

    shutdown_legend_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    console = logging.StreamHandler()
    console.setFormatter(_formatter(config.console_format))
    root.addHandler(console)
    if not config.file_path:
        return

    file_handler = _file_handler(Path(config.file_path), config.file_format)
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, file_handler, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def setup_legend_logging(config: LegendLoggingConfig | None = None) -> bool:
    """Install the legend pipeline unless the application configured logging.

    Returns whether handlers were installed.
    """
    if logging.getLogger().handlers:
        return False
    configure_legend_logging(config or LegendLoggingConfig(level_name=resolve_log_level_name()))
    return True


def shutdown_legend_logging() -> None:
    """Drain and stop the file stream listener, if running."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None


def _file_handler(path: Path, kind: str) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(_formatter(kind))
    return handler


def _formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)
