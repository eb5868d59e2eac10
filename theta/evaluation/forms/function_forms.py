"""Evaluation forms for abstraction, application and fix.

Recursion avoids a cyclic environment: `fix` binds the function's own name to
a Fix wrapper, and each lookup of that name unrolls exactly one more copy of
the body.
"""

from theta import EvaluatorFn
from theta.evaluation.invariants import expect_value
from theta.types.nodes import Abstraction, Application, Fixpoint
from theta.types.symbol_table import Scope, SymbolTable
from theta.types.values import Fix, Func, Value


def unroll(fix: Fix, evaluate_fn: EvaluatorFn) -> Value:
    """Evaluate the body of the wrapped functional with its parameter bound to itself.

    Each call binds a freshly wrapped Fix, so every recursive step gets its own
    finite copy instead of sharing a mutable cell.
    """
    func = fix.func
    env = func.env.clone()
    # A binding of the same name in the captured table is shadowed for the body anyway
    env.remove(func.param)
    env.push(Scope(func.param, Fix(func)))
    return evaluate_fn(func.body, env)


def force(value: Value, evaluate_fn: EvaluatorFn) -> Value:
    """Unroll `value` until it is no longer a Fix."""
    while isinstance(value, Fix):
        value = unroll(value, evaluate_fn)
    return value


def abstraction_form(node: Abstraction, table: SymbolTable[Value], evaluate_fn: EvaluatorFn) -> Value:
    return Func(node.param, node.body, table.clone())


def application_form(node: Application, table: SymbolTable[Value], evaluate_fn: EvaluatorFn) -> Value:
    callee = evaluate_fn(node.left, table)
    # The argument is evaluated in the caller's table, not the closure's
    argument = evaluate_fn(node.right, table)
    func = expect_value(force(callee, evaluate_fn), Func, "left argument of an application")
    return evaluate_fn(func.body, func.env.extended(func.param, argument))


def fixpoint_form(node: Fixpoint, table: SymbolTable[Value], evaluate_fn: EvaluatorFn) -> Value:
    func = expect_value(evaluate_fn(node.point, table), Func, "argument of fix")
    return unroll(Fix(func), evaluate_fn)
