from __future__ import annotations

from typing import Iterable

from ccscan.analysis.operators import resolve_operator
from ccscan.core.errors import OperatorResolutionFailure
from ccscan.core.records import DecisionTally
from ccscan.logging_config import get_logger
from ccscan.parsing.libclang import Kind


logger = get_logger(__name__)

BRANCH_KINDS = frozenset(
    {
        Kind.IF_STMT,
        Kind.FOR_STMT,
        Kind.WHILE_STMT,
        Kind.DEFAULT_STMT,
        Kind.CASE_STMT,
        Kind.CONDITIONAL_OPERATOR,
    }
)
SHORT_CIRCUIT_OPERATORS = frozenset({"&&", "||"})

NO_DECISION = DecisionTally()
DECISION = DecisionTally(edges=2, nodes=1)


def iter_nodes(frontend, node) -> Iterable[object]:
    """Yield ``node`` and its descendants in depth-first pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(frontend.children(current)))


def classify(frontend, node) -> DecisionTally:
    kind = frontend.kind(node)
    if kind in BRANCH_KINDS:
        return DECISION
    if kind is Kind.BINARY_OPERATOR:
        try:
            symbol = resolve_operator(frontend, node)
        except OperatorResolutionFailure as exc:
            line, column = frontend.location(node)
            logger.debug("Skipping binary operator at %s:%s: %s", line, column, exc)
            return NO_DECISION
        if symbol in SHORT_CIRCUIT_OPERATORS:
            return DECISION
    return NO_DECISION


def tally_decisions(frontend, node) -> DecisionTally:
    tally = NO_DECISION
    for current in iter_nodes(frontend, node):
        tally = tally + classify(frontend, current)
    return tally


def cyclomatic_complexity(tally: DecisionTally) -> int:
    # One synthetic entry node stands for the function body itself.
    nodes = tally.nodes + 1
    return tally.edges - nodes + 2
