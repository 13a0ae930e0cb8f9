"""Tracking of flows by source and destination."""

from __future__ import annotations

import threading
from collections import Counter

from .console import emit
from .policy import Flow


class SessionTable:
    """Counts flows per session key, safely across threads."""

    def __init__(self) -> None:
        self._sessions: Counter[str] = Counter()
        self._lock = threading.Lock()

    @staticmethod
    def _key(flow: Flow) -> str:
        return flow.src_ip + flow.dst_ip

    def track(self, flow: Flow) -> None:
        with self._lock:
            self._sessions[self._key(flow)] += 1
            emit(f"[SESSION] active={len(self._sessions)}")

    def count(self, flow: Flow) -> int:
        """Number of times the flow's session has been tracked."""
        with self._lock:
            return self._sessions.get(self._key(flow), 0)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)