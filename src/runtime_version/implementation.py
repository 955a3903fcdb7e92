"""Interpreter engine identification."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from .config import RuntimeConfig
from .utils import text_of


class Engine:
    """Wraps the interpreter implementation name."""

    def __init__(self, name: str) -> None:
        self._name = name

    @classmethod
    def from_config(cls, config: Optional[RuntimeConfig] = None) -> "Engine":
        config = config or RuntimeConfig()
        return cls(config.resolved_engine_name())

    @property
    def name(self) -> str:
        return self._name

    def matches(self, value: Any) -> bool:
        return self._name == text_of(value)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Engine):
            return self._name == other._name
        if isinstance(other, (str, Enum)):
            return self.matches(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Engine({self._name!r})"


__all__ = ["Engine"]
