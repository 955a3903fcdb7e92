"""Command-line interface for runtime version checks."""
from __future__ import annotations

import argparse
import json
import logging
from typing import Any

if __package__ is None or __package__ == "":  # pragma: no cover - script execution path
    import sys
    from pathlib import Path

    PACKAGE_ROOT = Path(__file__).resolve().parents[1]
    if str(PACKAGE_ROOT) not in sys.path:
        sys.path.insert(0, str(PACKAGE_ROOT))

    from runtime_version import runtime
    from runtime_version.config import RuntimeConfig
    from runtime_version.core.comparer import VersionComparator
    from runtime_version.core.models import Operation
    from runtime_version.implementation import Engine
else:  # pragma: no cover - package execution path
    from . import runtime
    from .config import RuntimeConfig
    from .core.comparer import VersionComparator
    from .core.models import Operation
    from .implementation import Engine

logger = logging.getLogger(__name__)

_OPERATION_CHOICES = sorted(
    {operation.value for operation in Operation} | {operation.symbol for operation in Operation}
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect and compare the running interpreter version")
    parser.add_argument(
        "--check",
        nargs=2,
        action="append",
        default=[],
        metavar=("OP", "SPEC"),
        help=f"Compare the runtime version against SPEC; OP is one of {', '.join(_OPERATION_CHOICES)}",
    )
    parser.add_argument("--engine-is", help="Require the interpreter engine name to match exactly")
    parser.add_argument("--engine", help="Override the detected engine name")
    parser.add_argument("--runtime-version", help="Override the detected version string")
    parser.add_argument("--json", action="store_true", help="Print a JSON payload instead of plain text")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    for op, _spec in args.check:
        if op not in _OPERATION_CHOICES:
            parser.error(f"argument --check: invalid operation {op!r} (choose from {', '.join(_OPERATION_CHOICES)})")

    comparator, engine = _resolve(args)
    checks = [_run_check(comparator, op, spec) for op, spec in args.check]
    passed = all(check["passed"] for check in checks)
    engine_ok = None
    if args.engine_is is not None:
        engine_ok = engine.matches(args.engine_is)
        logger.info("engine %s matches %s: %s", engine.name, args.engine_is, engine_ok)
        passed = passed and engine_ok

    if args.json:
        payload: dict[str, Any] = {
            "engine": engine.name,
            "version": comparator.version,
            "tokens": list(comparator.tokens),
            "checks": checks,
            "passed": passed,
        }
        if engine_ok is not None:
            payload["engine_matches"] = {"name": args.engine_is, "result": engine_ok}
        print(json.dumps(payload, indent=2))
    elif checks or engine_ok is not None:
        for check in checks:
            print(f"{comparator.version} {check['symbol']} {check['spec']}: {check['result']}")
        if engine_ok is not None:
            print(f"engine {engine.name} == {args.engine_is}: {engine_ok}")
    else:
        print(f"{engine.name} {comparator.version}")

    return 0 if passed else 1


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _resolve(args: argparse.Namespace) -> tuple[VersionComparator, Engine]:
    if args.engine is None and args.runtime_version is None:
        return runtime.current(), runtime.engine()
    config = RuntimeConfig(engine_name=args.engine, version=args.runtime_version)
    return VersionComparator.from_config(config), Engine.from_config(config)


def _run_check(comparator: VersionComparator, op: str, spec: str) -> dict[str, Any]:
    operation = Operation.parse(op)
    result = comparator.evaluate(operation, spec)
    if operation is Operation.COMPARE:
        passed = result == 0
    else:
        passed = bool(result)
    logger.info("%s %s %s -> %s", comparator.version, operation.symbol, spec, result)
    return {
        "operation": operation.value,
        "symbol": operation.symbol,
        "spec": spec,
        "result": result,
        "passed": passed,
    }


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
