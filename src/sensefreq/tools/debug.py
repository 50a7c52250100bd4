"""Minimal helpers for opt-in debug/instrumentation hooks."""

from __future__ import annotations

import os
import sys
import time
from contextlib import contextmanager
from typing import Callable, Iterator


def debug_enabled() -> bool:
    """Return True when ``SENSEFREQ_DEBUG`` asks for timing output."""
    return os.getenv("SENSEFREQ_DEBUG", "").lower() in {"1", "true", "yes", "on"}


@contextmanager
def time_block(label: str, *, emitter: Callable[[str], None] | None = None) -> Iterator[None]:
    """
    Context manager that emits elapsed time when debugging is enabled.

    The overhead is a single environment lookup when disabled.
    """
    if not debug_enabled():
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        target = emitter or (lambda msg: print(msg, file=sys.stderr, flush=True))
        target(f"[DEBUG] {label} took {elapsed_ms:.3f} ms")
