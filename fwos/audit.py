"""Audit trail of firewall verdicts."""

from __future__ import annotations

from .console import emit
from .policy import Flow


class AuditLogger:
    """Writes one audit line per evaluated flow."""

    def log(self, flow: Flow, allowed: bool) -> None:
        verdict = "ALLOW" if allowed else "DENY"
        emit(f"[AUDIT] {flow.src_ip} -> {flow.dst_ip} {verdict}")