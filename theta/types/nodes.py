"""Abstract syntax tree for Theta programs.

Nodes are immutable and own their children. The external parser builds them
and may attach a Span to each node; spans are carried into type errors but
never take part in node equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Union

from theta import Name
from theta.types.type_assignment import Type


@dataclass(frozen=True)
class Span:
    """Source location of a node: character offsets plus 1-based line/column."""
    start: int
    end: int
    line: int = 1
    column: int = 1


class Operator(Enum):
    SUCC = "succ"
    PRED = "pred"


class LiteralValue(Enum):
    TRUE = "true"
    FALSE = "false"
    ZERO = "0"


@dataclass(frozen=True)
class Node:
    span: Optional[Span] = field(default=None, compare=False, repr=False, kw_only=True)


@dataclass(frozen=True)
class Abstraction(Node):
    param: Name
    param_type: Type
    body: AstNode


@dataclass(frozen=True)
class Application(Node):
    left: AstNode
    right: AstNode


@dataclass(frozen=True)
class Identifier(Node):
    name: Name


@dataclass(frozen=True)
class Condition(Node):
    clause: AstNode
    then_arm: AstNode
    else_arm: AstNode


@dataclass(frozen=True)
class Arithmetic(Node):
    op: Operator
    operand: AstNode


@dataclass(frozen=True)
class IsZero(Node):
    operand: AstNode


@dataclass(frozen=True)
class Literal(Node):
    value: LiteralValue


@dataclass(frozen=True)
class Projection(Node):
    target: AstNode
    field: Name


@dataclass(frozen=True)
class Record(Node):
    fields: Mapping[Name, AstNode]

    def __post_init__(self):
        object.__setattr__(self, "fields", dict(self.fields))


@dataclass(frozen=True)
class Case:
    """One arm of a case expression: binds `name` to the payload, then runs `arm`."""
    name: Name
    arm: AstNode


@dataclass(frozen=True)
class Matching(Node):
    scrutinee: AstNode
    cases: Mapping[Name, Case]

    def __post_init__(self):
        object.__setattr__(self, "cases", dict(self.cases))


@dataclass(frozen=True)
class Tagging(Node):
    tag: Name
    value: AstNode
    variant_type: Type


@dataclass(frozen=True)
class Fixpoint(Node):
    point: AstNode


AstNode = Union[
    Abstraction,
    Application,
    Identifier,
    Condition,
    Arithmetic,
    IsZero,
    Literal,
    Projection,
    Record,
    Matching,
    Tagging,
    Fixpoint,
]
