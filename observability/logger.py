"""Structured logging utilities for the interview backend."""
from __future__ import annotations

import json
import logging
import logging.handlers
import os
import sys
import time
import uuid
from typing import Any

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ENABLE_FILE_LOGS = os.getenv("ENABLE_FILE_LOGS", "0") in ("1", "true", "True")
LOG_FILE = os.getenv("LOG_FILE", "logs/interview.log")
LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", "5242880"))
LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "5"))

HUMAN_FORMAT = "[%(asctime)s] %(levelname)s %(name)s :: %(message)s"
HUMAN_DATEFMT = "%Y-%m-%d %H:%M:%S"

_logger = logging.getLogger("interview")
_logger.setLevel(LOG_LEVEL)
_logger.propagate = False


def _is_json(record: logging.LogRecord) -> bool:
    return getattr(record, "is_json", False) is True


def _human_file_name(path: str) -> str:
    root, _ = os.path.splitext(path)
    return f"{root}-human.log"


def _attach(handler: logging.Handler, fmt: logging.Formatter, *, json_lines: bool) -> None:
    handler.setLevel(LOG_LEVEL)
    handler.setFormatter(fmt)
    handler.addFilter(_is_json if json_lines else (lambda record: not _is_json(record)))
    _logger.addHandler(handler)


def _rotating(path: str) -> logging.Handler:
    return logging.handlers.RotatingFileHandler(path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT)


def _ensure_handlers() -> None:
    if _logger.handlers:
        return

    human = logging.Formatter(HUMAN_FORMAT, datefmt=HUMAN_DATEFMT)
    _attach(logging.StreamHandler(stream=sys.stdout), human, json_lines=False)

    if not ENABLE_FILE_LOGS:
        return

    log_dir = os.path.dirname(LOG_FILE)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    # JSON to LOG_FILE, human lines beside it
    _attach(_rotating(LOG_FILE), logging.Formatter("%(message)s"), json_lines=True)
    _attach(_rotating(_human_file_name(LOG_FILE)), human, json_lines=False)


def _format_human(evt: dict[str, Any]) -> str:
    base = f"candidate={evt.get('candidate_id')} kind={evt.get('kind')}"
    extras: list[str] = []
    for key in ("node", "role", "difficulty", "question_id", "score", "count", "recommendation", "ms"):
        if key in evt:
            extras.append(f"{key}={evt[key]}")
    return base + (" " + " ".join(extras) if extras else "")


def _emit(msg: str, *, level: int, is_json: bool) -> None:
    record = _logger.makeRecord(
        name=_logger.name,
        level=level,
        fn="",
        lno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    record.is_json = is_json  # type: ignore[attr-defined]
    _logger.handle(record)


def log_event(kind: str, candidate_id: str, *, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a human line to console and JSON/human lines to files."""

    _ensure_handlers()

    payload: dict[str, Any] = {
        "ts": time.time(),
        "trace": str(uuid.uuid4()),
        "kind": kind,
        "candidate_id": candidate_id,
    }
    payload.update(fields)

    _emit(_format_human(payload), level=level, is_json=False)

    if not ENABLE_FILE_LOGS:
        return

    _emit(json.dumps(payload, ensure_ascii=False, default=str), level=level, is_json=True)


__all__ = ["log_event"]
