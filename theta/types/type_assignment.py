"""Structural types for Theta.

A type is either a base type (Bool, Nat) or a composite: Arrow, RecordType
or VariantType. Equality is purely structural; record and variant entries
compare as unordered mappings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Union

from theta import Name


class BaseType(Enum):
    BOOL = "Bool"
    NAT = "Nat"


@dataclass(frozen=True)
class Single:
    base: BaseType

    def __str__(self) -> str:
        return self.base.value


@dataclass(frozen=True)
class Arrow:
    domain: Type
    codomain: Type

    def __str__(self) -> str:
        # Arrows associate to the right
        left = f"({self.domain})" if isinstance(self.domain, Arrow) else str(self.domain)
        return f"{left} -> {self.codomain}"


@dataclass(frozen=True)
class RecordType:
    fields: Mapping[Name, Type] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "fields", dict(self.fields))

    def __hash__(self) -> int:
        return hash(("record", frozenset(self.fields.items())))

    def __str__(self) -> str:
        inner = ", ".join(f"{name}: {t}" for name, t in self.fields.items())
        return "{" + inner + "}"


@dataclass(frozen=True)
class VariantType:
    alternatives: Mapping[Name, Type] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "alternatives", dict(self.alternatives))

    def __hash__(self) -> int:
        return hash(("variant", frozenset(self.alternatives.items())))

    def has_variant(self, tag: Name, data_type: Type) -> bool:
        """True iff `tag` is an alternative whose payload type is `data_type`."""
        payload = self.alternatives.get(tag)
        return payload is not None and payload == data_type

    def __str__(self) -> str:
        inner = ", ".join(f"{tag}: {t}" for tag, t in self.alternatives.items())
        return "<" + inner + ">"


Type = Union[Single, Arrow, RecordType, VariantType]

BOOL = Single(BaseType.BOOL)
NAT = Single(BaseType.NAT)


def has_variant(data_type: Type, tag: Name, payload: Type) -> bool:
    """Variant membership test that answers False for non-variant types."""
    return isinstance(data_type, VariantType) and data_type.has_variant(tag, payload)
