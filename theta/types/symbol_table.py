"""Lexically scoped symbol table for Theta.

A SymbolTable is an ordered stack of single-binding Scopes, outermost first.
The checker instantiates it with Types and the evaluator with run-time Values.
Tables are extended by cloning then pushing, so a closure that captured a
table keeps a frozen view of its defining environment.
"""

from __future__ import annotations

from io import StringIO
from typing import Generic, Iterator, Optional, TypeVar

from theta import Name

T = TypeVar("T")


class Scope(Generic[T]):
    """One layer of a lexical environment: a single name bound to a value."""

    __slots__ = ("name", "value")

    def __init__(self, name: Name, value: T):
        self.name: Name = name
        self.value: T = value

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Scope)
            and self.name == other.name
            and self.value == other.value
        )

    def __repr__(self) -> str:
        return f"Scope({self.name!r}, {self.value!r})"


class SymbolTable(Generic[T]):
    """Stack of Scopes searched from the most recent binding to the oldest."""

    __slots__ = ("scopes",)

    def __init__(self, scopes: Optional[list[Scope[T]]] = None):
        # Outer environment first, most recent scope last
        self.scopes: list[Scope[T]] = list(scopes) if scopes else []

    def push(self, scope: Scope[T]) -> None:
        """Add `scope` as the new innermost binding."""
        self.scopes.append(scope)

    def lookup(self, name: Name) -> Optional[T]:
        """Return the innermost value bound to `name`, or None when unbound."""
        for scope in reversed(self.scopes):
            if scope.name == name:
                return scope.value
        return None

    def remove(self, name: Name) -> None:
        """Delete the outermost scope that binds `name`, if there is one."""
        for index, scope in enumerate(self.scopes):
            if scope.name == name:
                del self.scopes[index]
                return

    def clone(self) -> SymbolTable[T]:
        # Scopes are never mutated in place, so sharing them is safe
        return SymbolTable(self.scopes)

    def extended(self, name: Name, value: T) -> SymbolTable[T]:
        """Return a clone of this table with `name` bound to `value` innermost."""
        table = self.clone()
        table.push(Scope(name, value))
        return table

    def names(self) -> Iterator[Name]:
        """Yield the visible names, innermost first, each once."""
        seen: set[Name] = set()
        for scope in reversed(self.scopes):
            if scope.name not in seen:
                seen.add(scope.name)
                yield scope.name

    def __contains__(self, name: object) -> bool:
        return any(scope.name == name for scope in self.scopes)

    def __len__(self) -> int:
        return len(self.scopes)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SymbolTable) and self.scopes == other.scopes

    def __str__(self) -> str:
        """Compact view of the visible bindings, innermost first."""
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for name in self.names():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{name}: {self.lookup(name)}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Every scope, shadowed ones included, outermost first."""
        with StringIO() as buffer:
            buffer.write("<SymbolTable: ")
            buffer.write(" -> ".join(f"{s.name}={s.value!r}" for s in self.scopes))
            buffer.write(">")
            return buffer.getvalue()
