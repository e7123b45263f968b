from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Optional

_FMT = "[%(levelname)s] %(trace_id)s %(name)s: %(message)s"

_trace_id: ContextVar[str] = ContextVar("capturelive_trace_id", default="-")


def set_trace_id(trace_id: str) -> None:
    _trace_id.set(trace_id or "-")


def clear_trace_id() -> None:
    _trace_id.set("-")


def get_trace_id() -> str:
    return _trace_id.get()


class _TraceIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = get_trace_id()
        return True


def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FMT))
    handler.addFilter(_TraceIdFilter())
    return handler


def get_logger(name: str = "capturelive") -> logging.Logger:
    """
    Child loggers ("capturelive.buffer", ...) propagate to the "capturelive"
    root which owns the console handler.
    """
    logger = logging.getLogger(name)
    root = logging.getLogger("capturelive")
    if root.handlers:
        return logger
    root.setLevel(logging.INFO)
    root.addHandler(_make_handler(logging.StreamHandler(), logging.INFO))
    return logger


def configure_logging(
    *,
    logger_name: str = "capturelive",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    log_path: Optional[str] = None,
) -> logging.Logger:
    """
    Process-level logging baseline: console to stderr, optional file.
    Safe to call more than once; existing handlers are replaced.
    """
    logger = logging.getLogger(logger_name)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    logger.setLevel(min(console_level, file_level) if log_path else console_level)
    logger.addHandler(_make_handler(logging.StreamHandler(), console_level))
    if log_path:
        logger.addHandler(_make_handler(logging.FileHandler(log_path, encoding="utf-8"), file_level))
    return logger


def parse_level(level: str) -> int:
    value = logging.getLevelName((level or "INFO").strip().upper())
    return value if isinstance(value, int) else logging.INFO
