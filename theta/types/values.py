"""Run-time values produced by the Theta evaluator."""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import Any, Mapping, Union

from theta import Name
from theta.types.nodes import AstNode
from theta.types.symbol_table import SymbolTable


@dataclass(frozen=True)
class Nat:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Bool:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Func:
    """A closure: parameter, body and a frozen copy of the defining table."""

    param: Name
    body: AstNode
    env: SymbolTable[Value] = field(default_factory=SymbolTable)

    def __str__(self) -> str:
        return f"<fun {self.param}>"


@dataclass(frozen=True)
class Record:
    fields: Mapping[Name, Value]

    def __post_init__(self):
        object.__setattr__(self, "fields", dict(self.fields))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{name}={val}" for name, val in self.fields.items()))
            buffer.write("}")
            return buffer.getvalue()


@dataclass(frozen=True)
class Variant:
    tag: Name
    value: Value

    def __str__(self) -> str:
        return f"<{self.tag}={self.value}>"


@dataclass(frozen=True)
class Fix:
    """A recursive function that has not been unrolled yet."""

    func: Func

    def __str__(self) -> str:
        return f"<fix {self.func.param}>"


Value = Union[Nat, Bool, Func, Record, Variant, Fix]


def to_python(value: Value) -> Any:
    """Convert a value to plain Python data; functions are returned unchanged."""
    match value:
        case Nat(n):
            return n
        case Bool(b):
            return b
        case Record(fields):
            return {name: to_python(v) for name, v in fields.items()}
        case Variant(tag, payload):
            return (tag, to_python(payload))
    return value
