"""Serialised console output shared by every component."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

log_lock = threading.Lock()


def emit(message: str, stream: TextIO | None = None) -> None:
    """Write one line to ``stream`` (standard output by default) under the shared lock."""
    with log_lock:
        target = stream if stream is not None else sys.stdout
        print(message, file=target, flush=True)