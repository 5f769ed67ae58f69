from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DecisionTally:
    edges: int = 0
    nodes: int = 0

    def __add__(self, other: "DecisionTally") -> "DecisionTally":
        return DecisionTally(edges=self.edges + other.edges, nodes=self.nodes + other.nodes)


@dataclass(frozen=True)
class ComplexityRecord:
    line: int
    name: str
    complexity: int
