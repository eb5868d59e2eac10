from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from theta.types.nodes import Span


class ThetaError(Exception):
    """ Base class for all Theta errors"""
    pass


class ThetaConfigError(ThetaError):
    """ Raised when a THETA_* environment variable holds an unusable value"""


class InvalidTreeError(ThetaError):
    """ Raised when something other than a Theta syntax node is handed to the checker"""


class ThetaRecursionError(ThetaError):
    """ Raised when a program recurses deeper than the configured stack depth"""


class ThetaTypeError(ThetaError):
    """ Base class for type checking failures.

    Carries the human-readable message and, when the parser supplied one, the
    source span of the node that failed to check.
    """

    def __init__(self, message: str, span: Span | None = None):
        super().__init__(message)
        self.message = message
        self.span = span

    def __str__(self) -> str:
        if self.span is None:
            return self.message
        return f"{self.message} at line {self.span.line}, column {self.span.column}"


class UndefinedIdentifierError(ThetaTypeError):
    """ Raised when an identifier is used outside the scope of any binder"""


class NonBoolConditionError(ThetaTypeError):
    """ Raised when the clause of an if expression is not a Bool"""


class BranchMismatchError(ThetaTypeError):
    """ Raised when the then and else arms of an if expression differ in type"""


class NonNatOperandError(ThetaTypeError):
    """ Raised when succ, pred or iszero is applied to something other than a Nat"""


class NonFunctionApplicationError(ThetaTypeError):
    """ Raised when the left side of an application is not a function"""


class ArgumentMismatchError(ThetaTypeError):
    """ Raised when an argument does not match the domain of the applied function"""


class NonRecordProjectionError(ThetaTypeError):
    """ Raised when a projection targets something other than a record"""


class MissingFieldError(ThetaTypeError):
    """ Raised when a projection names a field the record type does not have"""


class NonVariantMatchError(ThetaTypeError):
    """ Raised when a case expression scrutinises something other than a variant"""


class NonExhaustiveMatchError(ThetaTypeError):
    """ Raised when a case expression does not handle every alternative"""


class UnknownCaseError(ThetaTypeError):
    """ Raised when a case expression handles a tag the variant does not define"""


class ArmMismatchError(ThetaTypeError):
    """ Raised when the arms of a case expression differ in type"""


class EmptyVariantError(ThetaTypeError):
    """ Raised when a case expression scrutinises a variant with no alternatives"""


class TagNotInVariantError(ThetaTypeError):
    """ Raised when a tagged value does not fit the declared variant type"""


class NonFunctionFixpointError(ThetaTypeError):
    """ Raised when the argument of fix is not a function"""


class AsymmetricFixpointError(ThetaTypeError):
    """ Raised when the argument of fix maps a type to a different type"""


class EvaluationInvariantError(AssertionError):
    """ Raised when the evaluator meets a shape the type checker should have ruled out.

    This is an implementer bug (checker and evaluator disagree, or an unchecked
    tree was evaluated), so it is deliberately not a ThetaError.
    """
