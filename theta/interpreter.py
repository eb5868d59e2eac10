from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from theta.checking.checker import check
from theta.config import get_log_level
from theta.evaluation.evaluator import evaluate
from theta.types.nodes import AstNode
from theta.types.type_assignment import Type
from theta.types.values import Value

logger = logging.getLogger(__name__)


def _configure_logging(level: int) -> None:
    # Only the theta logger is touched; the host's root logger stays as it is
    package_logger = logging.getLogger("theta")
    if not package_logger.handlers:
        package_logger.addHandler(logging.StreamHandler())
    package_logger.setLevel(level)


@dataclass(frozen=True)
class Result:
    type: Type
    value: Value

    def __str__(self) -> str:
        return f"{self.value} : {self.type}"


class Interpreter:
    """
    Runs already-parsed Theta programs: type check first, evaluate only on success.
    Holds no state between runs; every call starts from an empty environment.
    """

    def __init__(
        self,
        check_fn: Callable[[AstNode], Type] | None = None,
        eval_fn: Callable[[AstNode], Value] | None = None,
    ):
        self.check_fn = check_fn or check
        self.eval_fn = eval_fn or evaluate

        level = get_log_level()
        if level is not None:
            _configure_logging(level)

    def check(self, tree: AstNode) -> Type:
        return self.check_fn(tree)

    def evaluate(self, tree: AstNode) -> Value:
        return self.eval_fn(tree)

    def run(self, tree: AstNode) -> Result:
        """Check `tree`, then evaluate it.

        A ThetaTypeError from checking propagates to the caller and the tree is
        never evaluated.
        """
        tree_type = self.check(tree)
        logger.debug("program has type %s", tree_type)
        return Result(tree_type, self.evaluate(tree))
