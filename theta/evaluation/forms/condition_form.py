from theta import EvaluatorFn
from theta.evaluation.invariants import expect_value
from theta.types.nodes import Condition
from theta.types.symbol_table import SymbolTable
from theta.types.values import Bool, Value


def condition_form(node: Condition, table: SymbolTable[Value], evaluate_fn: EvaluatorFn) -> Value:
    clause = expect_value(evaluate_fn(node.clause, table), Bool, "clause of an if expression")
    # Only the taken branch is evaluated
    if clause.value:
        return evaluate_fn(node.then_arm, table)
    return evaluate_fn(node.else_arm, table)
