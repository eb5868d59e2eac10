from theta import EvaluatorFn
from theta.errors import EvaluationInvariantError
from theta.evaluation.invariants import expect_value
from theta.types import values
from theta.types.nodes import Matching, Tagging
from theta.types.symbol_table import SymbolTable
from theta.types.values import Value


def tagging_form(node: Tagging, table: SymbolTable[Value], evaluate_fn: EvaluatorFn) -> Value:
    return values.Variant(node.tag, evaluate_fn(node.value, table))


def matching_form(node: Matching, table: SymbolTable[Value], evaluate_fn: EvaluatorFn) -> Value:
    variant = expect_value(evaluate_fn(node.scrutinee, table), values.Variant, "argument of case")
    case = node.cases.get(variant.tag)
    if case is None:
        raise EvaluationInvariantError(
            f"Bug in type checker: argument of case has no arm for tag {variant.tag}"
        )
    return evaluate_fn(case.arm, table.extended(case.name, variant.value))
