from theta import EvaluatorFn
from theta.errors import EvaluationInvariantError
from theta.evaluation.forms.function_forms import force
from theta.types.nodes import Identifier, Literal, LiteralValue
from theta.types.symbol_table import SymbolTable
from theta.types.values import Bool, Nat, Value


def literal_form(node: Literal, table: SymbolTable[Value], evaluate_fn: EvaluatorFn) -> Value:
    if node.value is LiteralValue.ZERO:
        return Nat(0)
    return Bool(node.value is LiteralValue.TRUE)


def identifier_form(node: Identifier, table: SymbolTable[Value], evaluate_fn: EvaluatorFn) -> Value:
    value = table.lookup(node.name)
    if value is None:
        raise EvaluationInvariantError(f"Bug in type checker: came across unknown variable {node.name}")
    # The name bound by fix is the only place a Fix lives; consumers see it unrolled
    return force(value, evaluate_fn)
