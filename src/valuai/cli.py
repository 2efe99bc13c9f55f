"""CLI entry point for valuations."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from valuai.engine import ValuationEngine
from valuai.exceptions import NoApplicableMethodsError, ValidationError


def _load_payload(request_file: Path) -> dict[str, Any]:
    try:
        payload: dict[str, Any] = json.loads(request_file.read_text(encoding="utf-8"))
        return payload
    except FileNotFoundError as exc:
        raise ValidationError(f"Request file not found: {request_file}") from exc
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Request file is not valid JSON: {exc}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ValuAI CLI - multi-method valuation for early-stage companies."
    )
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument(
        "--request-file",
        help="Path to JSON valuation input.",
    )
    action.add_argument(
        "--list-methods",
        metavar="STAGE",
        help="List the valuation methods applicable to a business stage.",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    engine = ValuationEngine()
    indent = 2 if args.pretty else None

    try:
        if args.list_methods:
            methods = engine.get_applicable_methods(args.list_methods)
            output: Any = [m.to_dict() for m in methods]
        else:
            payload = _load_payload(Path(args.request_file))
            output = engine.calculate_from_dict(payload).to_dict()
        print(json.dumps(output, indent=indent))
        return 0
    except (ValidationError, NoApplicableMethodsError) as exc:
        print(json.dumps({"error": str(exc)}))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
