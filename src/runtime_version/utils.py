"""Utility helpers for version tokenization."""
from __future__ import annotations

import re
from enum import Enum
from typing import Any, Sequence

_LEADING_INT_RE = re.compile(r"\s*([+-]?)(\d+(?:_\d+)*)")
# stays under the smallest allowed int string conversion limit
_DIGIT_CHUNK = 500


def coerce_int(value: Any) -> int:
    """Best-effort integer parse; anything unparseable becomes 0."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        return int(value)
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        return 0
    value = _parse_digits(match.group(2).replace("_", ""))
    return -value if match.group(1) == "-" else value


def _parse_digits(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start:start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def text_of(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def split_version(text: str) -> list[str]:
    """Split on dots, dropping empty pieces left by trailing separators."""
    pieces = text.split(".")
    while pieces and pieces[-1] == "":
        pieces.pop()
    return pieces


def tokenize(value: Any) -> Sequence[int]:
    """Break a version identifier into integer tokens.

    Lists and tuples are taken as already tokenized and returned unchanged.
    """
    if isinstance(value, (list, tuple)):
        return value
    return [coerce_int(piece) for piece in split_version(text_of(value).strip())]
