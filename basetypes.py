"""Type annotations attached to function values.

This module defines the `TypeKind` enum, the immutable `BaseType` value
(`void`, `number`, `string`, or a function type carrying parameters and a
return type) and the `Param` dataclass naming a function parameter. The
parser currently only produces `VOID`; the other types exist so function
signatures have somewhere to go once parameter syntax is parsed.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


class TypeKind(Enum):
    VOID = auto()
    NUMBER = auto()
    STRING = auto()
    FUNCTION = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class BaseType:
    kind: TypeKind
    params: Tuple[Param, ...] = ()
    return_type: Optional[BaseType] = None

    @staticmethod
    def function(params: Sequence[Param], return_type: BaseType) -> BaseType:
        return BaseType(TypeKind.FUNCTION, tuple(params), return_type)

    def __str__(self) -> str:
        if self.kind != TypeKind.FUNCTION:
            return str(self.kind)
        args = ", ".join(str(p) for p in self.params)
        return f"fn({args}) -> {self.return_type}"


@dataclass(frozen=True)
class Param:
    identifier: str
    basetype: BaseType

    def __str__(self) -> str:
        return f"{self.identifier}: {self.basetype}"


VOID = BaseType(TypeKind.VOID)
NUMBER = BaseType(TypeKind.NUMBER)
STRING = BaseType(TypeKind.STRING)
