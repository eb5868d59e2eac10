from theta import EvaluatorFn
from theta.errors import EvaluationInvariantError
from theta.evaluation.invariants import expect_value
from theta.types import values
from theta.types.nodes import Projection, Record
from theta.types.symbol_table import SymbolTable
from theta.types.values import Value


def record_form(node: Record, table: SymbolTable[Value], evaluate_fn: EvaluatorFn) -> Value:
    # Every field sees the same table; no field can observe another
    return values.Record({name: evaluate_fn(expr, table) for name, expr in node.fields.items()})


def projection_form(node: Projection, table: SymbolTable[Value], evaluate_fn: EvaluatorFn) -> Value:
    target = expect_value(evaluate_fn(node.target, table), values.Record, "target of a projection")
    if node.field not in target.fields:
        raise EvaluationInvariantError(
            f"Bug in type checker: attribute {node.field} of projection was not found"
        )
    return target.fields[node.field]
