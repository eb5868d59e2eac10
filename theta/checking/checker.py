"""Structural type checker for Theta.

`check` assigns a type to a tree or raises the first ThetaTypeError it meets.
Binders (abstraction parameters and case arm names) extend a clone of the
current SymbolTable, so a binding is only visible inside its own subtree.
"""

from __future__ import annotations

import logging

from theta.config import recursion_limit
from theta.errors import (
    ArgumentMismatchError,
    ArmMismatchError,
    AsymmetricFixpointError,
    BranchMismatchError,
    EmptyVariantError,
    InvalidTreeError,
    MissingFieldError,
    NonBoolConditionError,
    NonExhaustiveMatchError,
    NonFunctionApplicationError,
    NonFunctionFixpointError,
    NonNatOperandError,
    NonRecordProjectionError,
    NonVariantMatchError,
    TagNotInVariantError,
    ThetaRecursionError,
    ThetaTypeError,
    UndefinedIdentifierError,
    UnknownCaseError,
)
from theta.types.nodes import (
    Abstraction,
    Application,
    Arithmetic,
    AstNode,
    Condition,
    Fixpoint,
    Identifier,
    IsZero,
    Literal,
    LiteralValue,
    Matching,
    Projection,
    Record,
    Tagging,
)
from theta.types.symbol_table import SymbolTable
from theta.types.type_assignment import (
    BOOL,
    NAT,
    Arrow,
    RecordType,
    Type,
    VariantType,
    has_variant,
)

logger = logging.getLogger(__name__)

TypeTable = SymbolTable[Type]


def check(tree: AstNode) -> Type:
    """Return the type of `tree`, raising a ThetaTypeError subclass on failure."""
    logger.debug("checking %s", type(tree).__name__)
    try:
        with recursion_limit():
            result = check_node(tree, SymbolTable())
    except ThetaTypeError as err:
        logger.debug("type check failed: %s", err)
        raise
    except RecursionError as err:
        logger.warning("type check exceeded the recursion limit")
        raise ThetaRecursionError("program is nested too deeply to type check") from err
    logger.debug("checked: %s", result)
    return result


def check_node(node: AstNode, table: TypeTable) -> Type:
    match node:
        case Literal(value=value):
            return NAT if value is LiteralValue.ZERO else BOOL

        case IsZero(operand=operand):
            operand_type = check_node(operand, table)
            if operand_type != NAT:
                raise NonNatOperandError(
                    f"The argument of a zero check should be of type Nat, found {operand_type}",
                    node.span,
                )
            return BOOL

        case Identifier(name=name):
            bound = table.lookup(name)
            if bound is None:
                raise UndefinedIdentifierError(f"Identifier {name} is not defined", node.span)
            return bound

        case Condition(clause=clause, then_arm=then_arm, else_arm=else_arm):
            clause_type = check_node(clause, table)
            if clause_type != BOOL:
                raise NonBoolConditionError(
                    f"The clause of an if expression should be of type Bool, found {clause_type}",
                    node.span,
                )
            then_type = check_node(then_arm, table)
            else_type = check_node(else_arm, table)
            if then_type != else_type:
                raise BranchMismatchError(
                    "The different outcomes of an if expression should have the same type, "
                    f"found {then_type} and {else_type}",
                    node.span,
                )
            return then_type

        case Arithmetic(op=op, operand=operand):
            operand_type = check_node(operand, table)
            if operand_type != NAT:
                raise NonNatOperandError(
                    f"The argument of {op.value} should be of type Nat, found {operand_type}",
                    node.span,
                )
            return NAT

        case Application(left=left, right=right):
            left_type = check_node(left, table)
            right_type = check_node(right, table)
            if not isinstance(left_type, Arrow):
                raise NonFunctionApplicationError(
                    f"Left argument of an application should be a function type, found {left_type}",
                    node.span,
                )
            if left_type.domain != right_type:
                raise ArgumentMismatchError(
                    f"Function of type {left_type} cannot be applied to an argument of type {right_type}",
                    node.span,
                )
            return left_type.codomain

        case Abstraction(param=param, param_type=param_type, body=body):
            body_type = check_node(body, table.extended(param, param_type))
            return Arrow(param_type, body_type)

        case Projection(target=target, field=field):
            target_type = check_node(target, table)
            if not isinstance(target_type, RecordType):
                raise NonRecordProjectionError(
                    f"Target of a projection should be a record, found {target_type}",
                    node.span,
                )
            if field not in target_type.fields:
                raise MissingFieldError(
                    f"Attribute {field} of projection is not part of the record type {target_type}",
                    node.span,
                )
            return target_type.fields[field]

        case Record(fields=fields):
            return RecordType({name: check_node(value, table) for name, value in fields.items()})

        case Matching():
            return _check_matching(node, table)

        case Tagging(tag=tag, value=value, variant_type=variant_type):
            value_type = check_node(value, table)
            if not has_variant(variant_type, tag, value_type):
                raise TagNotInVariantError(
                    f"Tag {tag} with a value of type {value_type} is not part of the variant {variant_type}",
                    node.span,
                )
            return variant_type

        case Fixpoint(point=point):
            point_type = check_node(point, table)
            if not isinstance(point_type, Arrow):
                raise NonFunctionFixpointError(
                    f"Argument of fixpoint is not a function, found {point_type}",
                    node.span,
                )
            if point_type.domain != point_type.codomain:
                raise AsymmetricFixpointError(
                    f"Function argument of fixpoint does not result in the same type: {point_type}",
                    node.span,
                )
            return point_type.codomain

    raise InvalidTreeError(f"Cannot type check {node!r}: not a Theta syntax node")


def _check_matching(node: Matching, table: TypeTable) -> Type:
    scrutinee_type = check_node(node.scrutinee, table)
    if not isinstance(scrutinee_type, VariantType):
        raise NonVariantMatchError(
            f"Argument of case expression should be a variant, found {scrutinee_type}",
            node.span,
        )
    if not scrutinee_type.alternatives:
        raise EmptyVariantError("Variant can't be empty", node.span)

    missing = [tag for tag in scrutinee_type.alternatives if tag not in node.cases]
    if missing:
        raise NonExhaustiveMatchError(
            f"Not all alternatives of {scrutinee_type} are handled, missing {', '.join(missing)}",
            node.span,
        )
    unknown = [tag for tag in node.cases if tag not in scrutinee_type.alternatives]
    if unknown:
        raise UnknownCaseError(
            f"Case {', '.join(unknown)} is not part of the variant {scrutinee_type}",
            node.span,
        )

    # First arm in declaration order of the variant sets the expected type
    arm_type: Type | None = None
    for tag, payload_type in scrutinee_type.alternatives.items():
        case = node.cases[tag]
        current = check_node(case.arm, table.extended(case.name, payload_type))
        if arm_type is None:
            arm_type = current
        elif current != arm_type:
            raise ArmMismatchError(
                "All outcomes of a case expression should result in the same type, "
                f"found {arm_type} and {current}",
                node.span,
            )
    return arm_type
