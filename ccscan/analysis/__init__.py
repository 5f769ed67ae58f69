"""Decision-point classification and complexity computation."""

from ccscan.analysis.complexity import classify, cyclomatic_complexity, iter_nodes, tally_decisions
from ccscan.analysis.operators import resolve_operator

__all__ = [
    "classify",
    "cyclomatic_complexity",
    "iter_nodes",
    "tally_decisions",
    "resolve_operator",
]
