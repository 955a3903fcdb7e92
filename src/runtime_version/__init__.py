"""Runtime engine and version identification with cached comparisons."""
from __future__ import annotations

from importlib import import_module
from typing import Any

from . import utils
from .config import RuntimeConfig
from .utils import tokenize

__all__ = [
    "RuntimeConfig",
    "Engine",
    "Operation",
    "VersionComparator",
    "compare",
    "current",
    "engine",
    "engine_matches",
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
    "tokenize",
    "utils",
]

_RUNTIME_NAMES = {
    "compare",
    "current",
    "engine",
    "engine_matches",
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
}


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effect
    if name in _RUNTIME_NAMES:
        module = import_module(".runtime", __name__)
        return getattr(module, name)
    if name == "Engine":
        module = import_module(".implementation", __name__)
        return module.Engine
    if name in {"Operation", "VersionComparator"}:
        module = import_module(".core", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
