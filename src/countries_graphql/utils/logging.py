from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import structlog


# Transport internals; our own graphql_client events already cover each request.
QUIET_LOGGERS = ("httpx", "httpcore")


def _build_handlers(lvl: str, file_path: str | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(file_path, encoding="utf-8"))

    formatter = logging.Formatter("%(message)s")
    for h in handlers:
        h.setLevel(lvl)
        h.setFormatter(formatter)
    return handlers


def setup_logging(
    *,
    level: str | None = None,
    log_file: str | Path | None = None,
) -> None:
    """
    One JSON object per line on stderr, and in `log_file` (or env LOG_FILE) when set.
    No file is written by default. Non-ASCII values such as flag emoji are kept verbatim.
    """
    lvl = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    file_path = str(log_file) if log_file else os.getenv("LOG_FILE")

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
        if isinstance(h, logging.FileHandler):
            h.close()
    root.setLevel(lvl)
    for h in _build_handlers(lvl, file_path):
        root.addHandler(h)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, lvl, logging.INFO)),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(**kwargs: Any):
    return structlog.get_logger().bind(**kwargs)
