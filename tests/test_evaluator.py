import pytest

from theta.errors import EvaluationInvariantError, ThetaError, ThetaRecursionError
from theta.evaluation.evaluator import evaluate, evaluate_node
from theta.types.nodes import (
    Abstraction,
    Application,
    Arithmetic,
    Case,
    Condition,
    Fixpoint,
    Identifier,
    IsZero,
    Literal,
    LiteralValue,
    Matching,
    Operator,
    Projection,
    Record,
    Tagging,
)
from theta.types.symbol_table import SymbolTable
from theta.types import values
from theta.checking.checker import check
from theta.types.type_assignment import BOOL, NAT, Arrow, RecordType, VariantType

ZERO = Literal(LiteralValue.ZERO)
TRUE = Literal(LiteralValue.TRUE)
FALSE = Literal(LiteralValue.FALSE)

OPTION = VariantType({"some": NAT, "none": BOOL})


def succ(e):
    return Arithmetic(Operator.SUCC, e)


def pred(e):
    return Arithmetic(Operator.PRED, e)


def var(name):
    return Identifier(name)


def nat(n):
    e = ZERO
    for _ in range(n):
        e = succ(e)
    return e


def boom():
    """A subtree the evaluator cannot reduce: applying a Nat."""
    return Application(ZERO, ZERO)


# -----------------------------------------------------
# Primitives
# -----------------------------------------------------

@pytest.mark.parametrize(
    "tree,expected",
    [
        (TRUE, values.Bool(True)),
        (FALSE, values.Bool(False)),
        (ZERO, values.Nat(0)),
        (nat(2), values.Nat(2)),
        (pred(nat(3)), values.Nat(2)),
        (pred(ZERO), values.Nat(0)),
        (pred(pred(succ(ZERO))), values.Nat(0)),
        (IsZero(ZERO), values.Bool(True)),
        (IsZero(nat(1)), values.Bool(False)),
        (IsZero(pred(nat(1))), values.Bool(True)),
        (Condition(TRUE, nat(1), nat(2)), values.Nat(1)),
        (Condition(FALSE, nat(1), nat(2)), values.Nat(2)),
        (Condition(IsZero(ZERO), FALSE, TRUE), values.Bool(False)),
    ],
)
def test_primitives(tree, expected):
    assert evaluate(tree) == expected


def test_condition_only_evaluates_taken_branch():
    assert evaluate(Condition(TRUE, nat(1), boom())) == values.Nat(1)
    assert evaluate(Condition(FALSE, boom(), nat(2))) == values.Nat(2)


# -----------------------------------------------------
# Functions and closures
# -----------------------------------------------------

def test_abstraction_builds_a_closure():
    fn = evaluate(Abstraction("x", NAT, succ(var("x"))))
    assert isinstance(fn, values.Func)
    assert fn.param == "x"
    assert fn.body == succ(var("x"))
    assert len(fn.env) == 0


def test_abstraction_body_is_not_evaluated():
    assert isinstance(evaluate(Abstraction("x", NAT, boom())), values.Func)


def test_application():
    tree = Application(Abstraction("x", NAT, succ(var("x"))), nat(1))
    assert evaluate(tree) == values.Nat(2)


def test_higher_order_application():
    twice = Abstraction(
        "f", Arrow(NAT, NAT),
        Abstraction("x", NAT, Application(var("f"), Application(var("f"), var("x")))),
    )
    inc = Abstraction("n", NAT, succ(var("n")))
    assert evaluate(Application(Application(twice, inc), ZERO)) == values.Nat(2)


def test_closure_uses_captured_environment():
    # (λy. (λf. (λy. f 0) 2) (λz. y)) 1
    tree = Application(
        Abstraction(
            "y", NAT,
            Application(
                Abstraction(
                    "f", Arrow(NAT, NAT),
                    Application(Abstraction("y", NAT, Application(var("f"), ZERO)), nat(2)),
                ),
                Abstraction("z", NAT, var("y")),
            ),
        ),
        nat(1),
    )
    assert evaluate(tree) == values.Nat(1)


def test_argument_is_evaluated_in_caller_environment():
    # the closure binds x=1, the call site has x=2 and passes x
    table = SymbolTable().extended("x", values.Nat(2))
    closure = values.Func("y", var("y"), SymbolTable().extended("x", values.Nat(1)))
    table = table.extended("g", closure)
    assert evaluate_node(Application(var("g"), var("x")), table) == values.Nat(2)
    assert evaluate_node(
        Application(Abstraction("y", NAT, var("y")), var("x")), table
    ) == values.Nat(2)


def test_arguments_are_evaluated_eagerly():
    tree = Application(Abstraction("x", NAT, ZERO), boom())
    with pytest.raises(EvaluationInvariantError):
        evaluate(tree)


# -----------------------------------------------------
# Records and variants
# -----------------------------------------------------

def test_record_and_projection():
    rec = Record({"status": TRUE, "result": succ(ZERO)})
    assert evaluate(rec) == values.Record({"result": values.Nat(1), "status": values.Bool(True)})
    assert evaluate(Projection(rec, "result")) == values.Nat(1)


def test_record_fields_do_not_see_each_other():
    tree = Application(
        Abstraction("a", NAT, Record({"a": succ(var("a")), "b": var("a")})),
        ZERO,
    )
    assert evaluate(tree) == values.Record({"a": values.Nat(1), "b": values.Nat(0)})


def test_tagging():
    assert evaluate(Tagging("some", nat(1), OPTION)) == values.Variant("some", values.Nat(1))


@pytest.mark.parametrize(
    "scrutinee,expected",
    [
        (Tagging("some", nat(1), OPTION), values.Nat(1)),
        (Tagging("none", TRUE, OPTION), values.Nat(0)),
    ],
)
def test_matching(scrutinee, expected):
    tree = Matching(scrutinee, {"some": Case("x", var("x")), "none": Case("y", ZERO)})
    assert evaluate(tree) == expected


def test_matching_arm_binding_shadows():
    tree = Application(
        Abstraction(
            "x", NAT,
            Matching(Tagging("some", nat(3), OPTION),
                     {"some": Case("x", var("x")), "none": Case("y", var("x"))}),
        ),
        nat(1),
    )
    assert evaluate(tree) == values.Nat(3)


# -----------------------------------------------------
# Fixpoint
# -----------------------------------------------------

def is_even():
    body = Abstraction(
        "n", NAT,
        Condition(
            IsZero(var("n")),
            TRUE,
            Condition(IsZero(pred(var("n"))), FALSE, Application(var("f"), pred(pred(var("n"))))),
        ),
    )
    return Fixpoint(Abstraction("f", Arrow(NAT, BOOL), body))


@pytest.mark.parametrize("n,expected", [(0, True), (1, False), (2, True), (7, False), (10, True)])
def test_fixpoint_is_even(n, expected):
    assert evaluate(Application(is_even(), nat(n))) == values.Bool(expected)


def test_fixpoint_evaluates_to_unrolled_function():
    fn = evaluate(is_even())
    assert isinstance(fn, values.Func)
    assert fn.param == "n"
    assert fn.env.lookup("f") == values.Fix(evaluate(is_even().point))


def test_fixpoint_of_a_constant_functional():
    assert evaluate(Fixpoint(Abstraction("x", NAT, nat(2)))) == values.Nat(2)


def test_recursive_addition():
    # fix (λadd. λm. λn. if iszero m then n else succ (add (pred m) n))
    add_type = Arrow(NAT, Arrow(NAT, NAT))
    add = Fixpoint(Abstraction(
        "add", add_type,
        Abstraction("m", NAT, Abstraction("n", NAT, Condition(
            IsZero(var("m")),
            var("n"),
            succ(Application(Application(var("add"), pred(var("m"))), var("n"))),
        ))),
    ))
    assert evaluate(Application(Application(add, nat(3)), nat(4))) == values.Nat(7)


PARITY = RecordType({"even": Arrow(NAT, BOOL), "odd": Arrow(NAT, BOOL)})


def even_odd():
    # fix (λr. {even = λn. if iszero n then true else r.odd (pred n), odd = ...})
    def step(base, other):
        return Abstraction("n", NAT, Condition(
            IsZero(var("n")),
            base,
            Application(Projection(var("r"), other), pred(var("n"))),
        ))

    return Fixpoint(Abstraction("r", PARITY, Record({
        "even": step(TRUE, "odd"),
        "odd": step(FALSE, "even"),
    })))


@pytest.mark.parametrize("n", [0, 1, 2, 5, 8])
def test_mutual_recursion_through_a_record_fixpoint(n):
    for field, expected in (("even", n % 2 == 0), ("odd", n % 2 == 1)):
        tree = Application(Projection(even_odd(), field), nat(n))
        assert check(tree) == BOOL
        assert evaluate(tree) == values.Bool(expected)


def test_record_fixpoint_evaluates_to_the_record():
    result = evaluate(even_odd())
    assert isinstance(result, values.Record)
    assert set(result.fields) == {"even", "odd"}
    assert all(isinstance(fn, values.Func) for fn in result.fields.values())


@pytest.mark.parametrize(
    "tree",
    [
        Fixpoint(Abstraction("x", NAT, var("x"))),
        IsZero(Fixpoint(Abstraction("x", NAT, var("x")))),
        Fixpoint(Abstraction("x", NAT, succ(var("x")))),
        Fixpoint(Abstraction("f", Arrow(NAT, NAT), var("f"))),
    ],
)
def test_divergent_fixpoint_hits_the_recursion_bound(monkeypatch, tree):
    monkeypatch.setenv("THETA_RECURSION_LIMIT", "3000")
    check(tree)
    with pytest.raises(ThetaRecursionError):
        evaluate(tree)


def test_unbounded_recursion_is_reported(monkeypatch):
    monkeypatch.setenv("THETA_RECURSION_LIMIT", "3000")
    loop = Fixpoint(Abstraction(
        "f", Arrow(NAT, NAT),
        Abstraction("n", NAT, Application(var("f"), var("n"))),
    ))
    with pytest.raises(ThetaRecursionError):
        evaluate(Application(loop, ZERO))


# -----------------------------------------------------
# Invariant failures on unchecked trees
# -----------------------------------------------------

@pytest.mark.parametrize(
    "tree",
    [
        var("x"),
        Application(ZERO, ZERO),
        succ(TRUE),
        IsZero(FALSE),
        Condition(ZERO, TRUE, FALSE),
        Projection(ZERO, "a"),
        Projection(Record({"a": ZERO}), "b"),
        Matching(ZERO, {}),
        Matching(Tagging("some", ZERO, OPTION), {"none": Case("y", ZERO)}),
        Fixpoint(ZERO),
    ],
)
def test_invariant_failures(tree):
    with pytest.raises(EvaluationInvariantError) as info:
        evaluate(tree)
    assert not isinstance(info.value, ThetaError)
    assert "Bug in type checker" in str(info.value)


def test_non_node_is_an_invariant_failure():
    with pytest.raises(EvaluationInvariantError):
        evaluate("succ 0")
