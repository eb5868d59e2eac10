from theta import EvaluatorFn
from theta.evaluation.invariants import expect_value
from theta.types.nodes import Arithmetic, IsZero, Operator
from theta.types.symbol_table import SymbolTable
from theta.types.values import Bool, Nat, Value


def arithmetic_form(node: Arithmetic, table: SymbolTable[Value], evaluate_fn: EvaluatorFn) -> Value:
    operand = expect_value(evaluate_fn(node.operand, table), Nat, f"operand of {node.op.value}")
    if node.op is Operator.SUCC:
        return Nat(operand.value + 1)
    # Naturals bottom out: pred 0 is 0
    return Nat(max(operand.value - 1, 0))


def is_zero_form(node: IsZero, table: SymbolTable[Value], evaluate_fn: EvaluatorFn) -> Value:
    operand = expect_value(evaluate_fn(node.operand, table), Nat, "operand of iszero")
    return Bool(operand.value == 0)
