"""Comparison logic for runtime version specifiers."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional, Sequence, Union

from ..config import RuntimeConfig
from ..utils import coerce_int, tokenize
from .cache import ComparisonCache
from .models import Operation, RawSequence, Specifier, to_specifier

logger = logging.getLogger(__name__)


def compare_tokens(current: Sequence[Any], other: Sequence[Any]) -> int:
    """Three-way positional comparison over the positions of ``current``.

    Positions of ``other`` past the end of ``current`` are never inspected;
    missing positions of ``other`` count as 0.
    """
    for index in range(len(current)):
        a = coerce_int(current[index])
        b = coerce_int(other[index]) if index < len(other) else 0
        if a < b:
            return -1
        if a > b:
            return 1
    return 0


class VersionComparator:
    """Compares a fixed runtime version against version specifiers."""

    def __init__(self, version: str) -> None:
        self._version = version
        self._tokens: tuple[int, ...] = tuple(tokenize(version))
        self._cache = ComparisonCache()

    @classmethod
    def from_config(cls, config: Optional[RuntimeConfig] = None) -> "VersionComparator":
        config = config or RuntimeConfig()
        return cls(config.resolved_version())

    @property
    def version(self) -> str:
        return self._version

    @property
    def tokens(self) -> tuple[int, ...]:
        return self._tokens

    @staticmethod
    def tokenize(value: Any) -> Sequence[int]:
        return tokenize(value)

    def gte(self, operand: Any) -> bool:
        return self.evaluate(Operation.GTE, operand)

    def lte(self, operand: Any) -> bool:
        return self.evaluate(Operation.LTE, operand)

    def lt(self, operand: Any) -> bool:
        return self.evaluate(Operation.LT, operand)

    def gt(self, operand: Any) -> bool:
        return self.evaluate(Operation.GT, operand)

    def eq(self, operand: Any) -> bool:
        return self.evaluate(Operation.EQ, operand)

    def compare(self, operand: Any) -> int:
        return self.evaluate(Operation.COMPARE, operand)

    def evaluate(self, operation: Union[Operation, str], operand: Any) -> Union[bool, int]:
        operation = Operation.parse(operation)
        specifier = to_specifier(operand)
        key = specifier.key
        if not _is_hashable(key):
            # unhashable sequence elements cannot be cached
            return self._compute(operation, specifier)
        return self._cache.fetch(operation, key, lambda: self._compute(operation, specifier))

    def _compute(self, operation: Operation, specifier: Specifier) -> Union[bool, int]:
        if isinstance(specifier, RawSequence):
            other = specifier.values
        else:
            other = tokenize(specifier.text)
        result = compare_tokens(self._tokens, other)
        logger.debug("%s %s %r -> %d", self._version, operation.symbol, specifier.key, result)
        return operation.apply(result)

    def __ge__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.gte(other)

    def __le__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.lte(other)

    def __lt__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.lt(other)

    def __gt__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.gt(other)

    def __eq__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.eq(other)

    def __ne__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return not self.eq(other)

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"VersionComparator({self._version!r})"


def _is_operand(value: Any) -> bool:
    return isinstance(value, (str, Enum, list, tuple))


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


__all__ = ["VersionComparator", "compare_tokens"]
