"""Process-wide engine and version, resolved once on first use."""
from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from .config import RuntimeConfig
from .core.comparer import VersionComparator
from .implementation import Engine
from .utils import tokenize

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_comparator: Optional[VersionComparator] = None
_engine: Optional[Engine] = None


def current() -> VersionComparator:
    """Return the comparator for the running interpreter."""
    global _comparator
    comparator = _comparator
    if comparator is None:
        with _lock:
            if _comparator is None:
                _comparator = VersionComparator.from_config(RuntimeConfig())
                logger.debug("Resolved runtime version %s", _comparator.version)
            comparator = _comparator
    return comparator


def engine() -> Engine:
    """Return the engine of the running interpreter."""
    global _engine
    resolved = _engine
    if resolved is None:
        with _lock:
            if _engine is None:
                _engine = Engine.from_config(RuntimeConfig())
                logger.debug("Resolved runtime engine %s", _engine.name)
            resolved = _engine
    return resolved


def reset() -> None:
    """Forget the resolved engine and comparator (tests only)."""
    global _comparator, _engine
    with _lock:
        _comparator = None
        _engine = None


def gte(operand: Any) -> bool:
    return current().gte(operand)


def lte(operand: Any) -> bool:
    return current().lte(operand)


def lt(operand: Any) -> bool:
    return current().lt(operand)


def gt(operand: Any) -> bool:
    return current().gt(operand)


def eq(operand: Any) -> bool:
    return current().eq(operand)


def compare(operand: Any) -> int:
    return current().compare(operand)


def engine_matches(name: Any) -> bool:
    return engine().matches(name)


__all__ = [
    "compare",
    "current",
    "engine",
    "engine_matches",
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
    "reset",
    "tokenize",
]
