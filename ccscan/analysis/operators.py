"""
Binary operator resolution.

libclang exposes a binary operator only as a BINARY_OPERATOR cursor with
two operand children; the operator symbol itself is not available. It is
recovered from tokens instead: the left operand's tokens are a prefix of
the whole expression's tokens, so the operator is the token right after
that prefix.
"""

from __future__ import annotations

from ccscan.core.errors import OperatorResolutionFailure


def resolve_operator(frontend, node) -> str:
    """Return the operator symbol of a binary operator node."""
    expression_tokens = frontend.tokenize(node)
    left_operand = frontend.first_child(node)
    if left_operand is None:
        raise OperatorResolutionFailure("Binary operator has no left operand")
    operand_tokens = frontend.tokenize(left_operand)
    if not operand_tokens:
        raise OperatorResolutionFailure("Left operand has no tokens")
    index = len(operand_tokens)
    if index >= len(expression_tokens):
        raise OperatorResolutionFailure(
            "Operator token out of range",
            {"operand_tokens": str(index), "expression_tokens": str(len(expression_tokens))},
        )
    return expression_tokens[index]
