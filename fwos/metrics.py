"""Verdict counters."""

from __future__ import annotations

import threading

from .console import emit


class Metrics:
    """Counts allowed and denied packets."""

    def __init__(self) -> None:
        self.allowed = 0
        self.denied = 0
        self._lock = threading.Lock()

    def record_packet(self, verdict: bool) -> None:
        with self._lock:
            if verdict:
                self.allowed += 1
            else:
                self.denied += 1

    def summary(self) -> str:
        return (
            "\n========== FIREWALL SUMMARY ==========\n"
            f"allowed packets: {self.allowed}\n"
            f"denied packets : {self.denied}"
        )

    def print_summary(self) -> None:
        emit(self.summary())