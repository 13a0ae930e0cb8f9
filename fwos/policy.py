"""Rule-based flow evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .console import emit


@dataclass(frozen=True)
class Flow:
    """A network flow as seen by the firewall."""

    src_ip: str
    dst_ip: str
    protocol: str
    port: int


@dataclass(frozen=True)
class Rule:
    """A rule matching destination address, protocol and port."""

    action: str
    dst_ip: str
    protocol: str
    port: int

    def matches(self, flow: Flow) -> bool:
        return (
            self.dst_ip == flow.dst_ip
            and self.protocol == flow.protocol
            and self.port == flow.port
        )


@dataclass
class PolicyEngine:
    """Evaluates flows against an ordered list of rules; the first match decides."""

    rules: list[Rule] = field(default_factory=list)

    def load_default_rules(self) -> None:
        self.rules.append(Rule("DENY", "10.0.0.1", "tcp", 443))
        self.rules.append(Rule("DENY", "8.8.8.8", "udp", 53))
        emit(f"[POLICY] loaded {len(self.rules)} rules")

    def evaluate(self, flow: Flow) -> bool:
        """Return True if the flow is allowed."""
        for rule in self.rules:
            if rule.matches(flow):
                return rule.action != "DENY"
        return True