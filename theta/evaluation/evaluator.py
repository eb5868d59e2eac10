"""Core evaluator for the Theta interpreter.

Call-by-value, tree-walking evaluation over a SymbolTable of run-time values.
Each node class is dispatched through the NODE_FORMS registry. The tree must
have passed `theta.checking.checker.check`; shapes the checker rules out are
reported as EvaluationInvariantError.
"""

from __future__ import annotations

import logging

from theta.config import recursion_limit
from theta.errors import EvaluationInvariantError, ThetaRecursionError
from theta.evaluation.forms import NODE_FORMS
from theta.types.nodes import AstNode
from theta.types.symbol_table import SymbolTable
from theta.types.values import Value

logger = logging.getLogger(__name__)


def evaluate(tree: AstNode) -> Value:
    """Evaluate a type checked tree under an empty environment."""
    logger.debug("evaluating %s", type(tree).__name__)
    try:
        with recursion_limit():
            result = evaluate_node(tree, SymbolTable())
    except RecursionError as err:
        logger.warning("evaluation exceeded the recursion limit")
        raise ThetaRecursionError(
            "program recursed deeper than THETA_RECURSION_LIMIT allows"
        ) from err
    logger.debug("evaluated to %s", result)
    return result


def evaluate_node(node: AstNode, table: SymbolTable[Value]) -> Value:
    """Single evaluation step: dispatch `node` to its form."""
    form = NODE_FORMS.get(type(node))
    if form is None:
        raise EvaluationInvariantError(f"Cannot evaluate {node!r}: not a Theta syntax node")
    return form(node, table, evaluate_node)
