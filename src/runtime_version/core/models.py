"""Core dataclasses describing comparison operations and operands."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, Union

from ..utils import text_of


class Operation(str, Enum):
    GTE = "gte"
    LTE = "lte"
    LT = "lt"
    GT = "gt"
    EQ = "eq"
    COMPARE = "compare"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def apply(self, result: int) -> Union[bool, int]:
        """Map a three-way comparison result to this operation's answer."""
        if self is Operation.GTE:
            return result >= 0
        if self is Operation.LTE:
            return result <= 0
        if self is Operation.LT:
            return result == -1
        if self is Operation.GT:
            return result == 1
        if self is Operation.EQ:
            return result == 0
        return result

    @classmethod
    def parse(cls, value: Union["Operation", str]) -> "Operation":
        if isinstance(value, cls):
            return value
        token = str(value).strip()
        for operation in cls:
            if token == operation.value or token == operation.symbol:
                return operation
        raise ValueError(f"Unknown comparison operation: {value!r}")


_SYMBOLS = {
    Operation.GTE: ">=",
    Operation.LTE: "<=",
    Operation.LT: "<",
    Operation.GT: ">",
    Operation.EQ: "==",
    Operation.COMPARE: "<=>",
}


@dataclass(frozen=True, slots=True)
class TextSpecifier:
    text: str

    @property
    def key(self) -> Hashable:
        return self.text


@dataclass(frozen=True, slots=True)
class RawSequence:
    values: tuple[Any, ...]

    @property
    def key(self) -> Hashable:
        return self.values


Specifier = Union[TextSpecifier, RawSequence]


def to_specifier(operand: Any) -> Specifier:
    """Normalise an operand into its cache-key carrying form."""
    if isinstance(operand, (TextSpecifier, RawSequence)):
        return operand
    if isinstance(operand, (list, tuple)):
        return RawSequence(tuple(operand))
    return TextSpecifier(text_of(operand).strip())
