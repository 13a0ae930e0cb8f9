"""The control plane: boots the services and pushes a batch of flows through them."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

from .audit import AuditLogger
from .cluster import ClusterManager
from .console import emit
from .metrics import Metrics
from .policy import Flow, PolicyEngine
from .sessions import SessionTable
from .workers import ThreadPool


def make_flow(index: int) -> Flow:
    """Build the synthetic flow with the given sequence number."""
    even = index % 2 == 0
    return Flow(
        src_ip=f"10.1.1.{index}",
        dst_ip="10.0.0.1" if index % 7 == 0 else "8.8.8.8",
        protocol="tcp" if even else "udp",
        port=443 if even else 53,
    )


class ControlPlane:
    """Orchestrates cluster, policy, sessions, audit and metrics."""

    def __init__(
        self, flow_count: int = 50, worker_count: int = 4, pause: float = 0.04
    ) -> None:
        self.flow_count = flow_count
        self.worker_count = worker_count
        self.pause = pause

    def initialize(self) -> None:
        emit("[FWOS] booting distributed firewall OS")

    def run(self) -> Metrics:
        """Process the flows on the worker pool, print the summary and return the metrics."""
        ClusterManager().bootstrap()

        engine = PolicyEngine()
        engine.load_default_rules()

        audit = AuditLogger()
        metrics = Metrics()
        sessions = SessionTable()

        def handle(index: int) -> None:
            try:
                flow = make_flow(index)
                allowed = engine.evaluate(flow)
                sessions.track(flow)
                metrics.record_packet(allowed)
                audit.log(flow, allowed)
                verdict = "ALLOW" if allowed else "DENY"
                emit(
                    f"[TRACE] {flow.src_ip} -> {flow.dst_ip} proto={flow.protocol}"
                    f" port={flow.port} verdict={verdict}"
                )
                if self.pause > 0:
                    time.sleep(self.pause)
            except Exception as exc:
                emit(f"[ERROR] worker exception: {exc}", sys.stderr)

        with ThreadPool(self.worker_count) as pool:
            for index in range(self.flow_count):
                pool.enqueue(lambda index=index: handle(index))

        metrics.print_summary()
        emit("[FWOS] shutdown complete")
        return metrics


def main(argv: Sequence[str] | None = None) -> int:
    plane = ControlPlane()
    plane.initialize()
    plane.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())