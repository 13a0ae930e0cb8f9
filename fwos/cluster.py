"""Cluster start-up."""

from __future__ import annotations

from .console import emit


class ClusterManager:
    """Brings up the cluster services of the local node."""

    def bootstrap(self) -> None:
        emit("[CLUSTER] node-1 elected leader")
        emit("[CLUSTER] heartbeat service started")
        emit("[CLUSTER] policy replication enabled")