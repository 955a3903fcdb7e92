"""Configuration dataclasses for runtime version detection."""
from __future__ import annotations

import platform
import sys
from dataclasses import dataclass
from typing import Optional


DEFAULT_ENGINE_NAME = "cpython"


@dataclass(slots=True)
class RuntimeConfig:
    engine_name: Optional[str] = None
    version: Optional[str] = None

    def resolved_engine_name(self) -> str:
        if self.engine_name is not None:
            return self.engine_name
        implementation = getattr(sys, "implementation", None)
        name = getattr(implementation, "name", None)
        return name or DEFAULT_ENGINE_NAME

    def resolved_version(self) -> str:
        if self.version is not None:
            return self.version
        return platform.python_version()
