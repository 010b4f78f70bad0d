from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Node:
    label: str
    color: str
    stage: int


@dataclass(frozen=True)
class Link:
    source: int
    target: int
    value: int
    color: str


@dataclass(frozen=True)
class IndustryFunnel:
    """Per-industry stage counts feeding the flow graph."""
    industry: str
    connects: int = 0
    conversations: int = 0
    meetings: int = 0
    applications: int = 0
    approved: int = 0
    rejected: int = 0

    @property
    def remaining(self) -> int:
        """Applications with neither outcome yet (may be negative on bad data)."""
        return self.applications - self.approved - self.rejected


@dataclass(frozen=True)
class FlowAnomaly:
    """A stage remainder that came out negative and was clamped to 0."""
    industry: Optional[str]
    stage: str
    value: int

    def describe(self) -> str:
        who = self.industry or "All industries"
        return f"{who}: {self.stage} drop-off computed as {self.value}, clamped to 0"


@dataclass(frozen=True)
class FlowTotals:
    connects: int = 0
    conversations: int = 0
    meetings: int = 0
    applications: int = 0
    conversation_rate: float = 0.0
    meeting_rate: float = 0.0
    application_rate: float = 0.0


@dataclass(frozen=True)
class FlowGraph:
    industries: Tuple[str, ...]
    nodes: Tuple[Node, ...]
    links: Tuple[Link, ...]
    totals: FlowTotals = field(default_factory=FlowTotals)
    anomalies: Tuple[FlowAnomaly, ...] = ()
