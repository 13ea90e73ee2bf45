"""Simple span helper for recording operation timings."""
from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator

from .logger import log_event


@contextmanager
def span(name: str, candidate_id: str = "-") -> Iterator[None]:
    start = time.time()
    try:
        yield
    finally:
        elapsed_ms = int((time.time() - start) * 1000)
        log_event("span", candidate_id, node=name, ms=elapsed_ms)


__all__ = ["span"]
