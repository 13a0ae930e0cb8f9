"""Node membership, replicated policy values and address-based filtering."""

from __future__ import annotations

from .console import emit


class NodeCluster:
    """Tracks cluster nodes and elects the first one as leader."""

    def __init__(self) -> None:
        self.nodes: list[str] = []
        self.leader = ""

    def add_node(self, node_id: str) -> None:
        self.nodes.append(node_id)

    def elect_leader(self) -> str:
        """Elect the first node added; return an empty string if there are none."""
        if not self.nodes:
            return ""
        self.leader = self.nodes[0]
        emit(f"[CLUSTER] Leader elected: {self.leader}")
        return self.leader


class DistributedPolicy:
    """Key/value store of policy settings; unknown keys read as empty."""

    def __init__(self) -> None:
        self._cache: dict[str, str] = {}

    def set_policy(self, key: str, value: str) -> None:
        self._cache[key] = value

    def get_policy(self, key: str) -> str:
        return self._cache.setdefault(key, "")


class AddressPolicy:
    """Blocks traffic to the protected address and allows everything else."""

    BLOCKED_DESTINATION = "10.0.0.1"

    def evaluate(self, src_ip: str, dst_ip: str) -> bool:
        return dst_ip != self.BLOCKED_DESTINATION