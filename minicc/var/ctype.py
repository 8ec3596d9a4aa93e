"""Types of the variable language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TypeKind(Enum):
    INT = auto()


@dataclass(frozen=True)
class CType:
    """A type with its size and alignment in bytes."""

    kind: TypeKind
    size: int
    align: int


_INT = CType(TypeKind.INT, 4, 4)


def int_type() -> CType:
    """The shared ``int`` type: four bytes, four-byte aligned."""
    return _INT