"""CLI entrypoint for unified_ai_platform."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from unified_ai_platform.assistant.explain import Explainer
from unified_ai_platform.config.settings import load_config
from unified_ai_platform.core.errors import InputValidationError, PlatformError
from unified_ai_platform.core.logging import configure_logging
from unified_ai_platform.history.store import PredictionLog
from unified_ai_platform.providers.gateway import GatewayClient, GatewayConfig
from unified_ai_platform.scoring.registry import list_modules
from unified_ai_platform.service import PredictionService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="unified-ai")
    parser.add_argument("--list-modules", action="store_true", help="List prediction modules and their fields.")
    parser.add_argument("--module", help="Module identifier, e.g. fraud_upi.")
    parser.add_argument("--input", help="Input fields as a JSON object.")
    parser.add_argument("--explain", action="store_true", help="Ask the gateway to explain the prediction.")
    parser.add_argument("--profile", help="Config profile to use for gateway settings.")
    return parser


def _parse_payload(raw: str | None) -> dict[str, Any]:
    if not raw:
        raise InputValidationError("--input is required with --module")
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InputValidationError(f"--input is not valid JSON: {exc.msg}") from exc
    if not isinstance(payload, dict):
        raise InputValidationError("--input must be a JSON object")
    return payload


def run_once(module: str, raw_input: str | None, *, explain: bool = False, profile: str | None = None) -> str:
    cfg, _ = load_config(profile_override=profile)
    configure_logging(cfg.log_level)
    explainer = Explainer(GatewayClient(GatewayConfig.from_app_config(cfg))) if explain else None
    service = PredictionService(PredictionLog(), explainer)
    outcome = service.run(module, _parse_payload(raw_input), explain=explain)
    return json.dumps(outcome.to_payload(), ensure_ascii=True)


def describe_modules() -> str:
    rows = [
        {"moduleType": item.module_type.value, "title": item.title, "fields": item.input_fields()}
        for item in list_modules()
    ]
    return json.dumps(rows, ensure_ascii=True, indent=2)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.list_modules:
        print(describe_modules())
        return 0
    if not args.module:
        parser.print_usage(sys.stderr)
        return 2
    try:
        print(run_once(args.module, args.input, explain=args.explain, profile=args.profile))
    except PlatformError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
