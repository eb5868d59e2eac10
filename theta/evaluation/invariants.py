"""Guards for shapes the type checker guarantees.

A failed guard means an unchecked tree reached the evaluator or the checker
and evaluator rules have drifted apart; both are implementer bugs.
"""

from __future__ import annotations

from typing import TypeVar

from theta.errors import EvaluationInvariantError

V = TypeVar("V")


def expect_value(value: object, kind: type[V], context: str) -> V:
    """Return `value` if it is a `kind`, otherwise fail the invariant."""
    if not isinstance(value, kind):
        raise EvaluationInvariantError(
            f"Bug in type checker: {context} evaluated to {value!r}, expected {kind.__name__}"
        )
    return value
