"""Version comparison building blocks."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "ComparisonCache",
    "Operation",
    "RawSequence",
    "TextSpecifier",
    "VersionComparator",
    "compare_tokens",
    "to_specifier",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name in {"VersionComparator", "compare_tokens"}:
        module = import_module(".comparer", __name__)
        return getattr(module, name)
    if name == "ComparisonCache":
        module = import_module(".cache", __name__)
        return module.ComparisonCache
    if name in {"Operation", "RawSequence", "TextSpecifier", "to_specifier"}:
        module = import_module(".models", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
