"""Command-line interface for evaluating a trade payload."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from tradefair.api import run_evaluation
from tradefair.api.schemas import EvaluateRequest
from tradefair.config import Thresholds
from tradefair.config_loader import ThresholdProfile
from tradefair.trade import TradePreconditionError


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate a fantasy hockey trade")
    parser.add_argument(
        "payload",
        type=Path,
        help="JSON file with league_settings, roster_a, roster_b, free_agents, send_a and send_b",
    )
    parser.add_argument("--loss-tolerance", type=float, default=None, help="Lowest acceptable impact per side")
    parser.add_argument("--gain-min", type=float, default=None, help="Impact at least one side must reach")
    parser.add_argument(
        "--imbalance-max",
        type=float,
        default=None,
        help="Largest allowed gap between the two impacts",
    )
    parser.add_argument("--load-profile", type=Path, help="Load threshold profile JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save threshold profile JSON", default=None)
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write the evaluation JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _format_lineup(label: str, lineup) -> str:
    names = ", ".join(
        f"{player.name}{'*' if player.free_agent else ''} ({player.value:+.2f})"
        for player in lineup
    )
    return f"{label} lineup: {names or '-'}"


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    thresholds = Thresholds.from_env()
    if args.load_profile:
        thresholds = ThresholdProfile.load(args.load_profile).apply(thresholds)
    thresholds = thresholds.merged(
        loss_tol=args.loss_tolerance,
        gain_min=args.gain_min,
        imbalance_max=args.imbalance_max,
    )
    if args.save_profile:
        ThresholdProfile(**thresholds.model_dump()).save(args.save_profile)
        print(f"Saved threshold profile to {args.save_profile}")

    try:
        request = EvaluateRequest.model_validate(json.loads(args.payload.read_text(encoding="utf-8")))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid payload JSON: {exc}") from exc
    except ValidationError as exc:
        raise SystemExit(f"Invalid payload: {exc}") from exc

    try:
        response = run_evaluation(request, thresholds)
    except TradePreconditionError as exc:
        raise SystemExit(str(exc)) from exc

    print(f"Impact A: {response.impact_a:+.3f}  Impact B: {response.impact_b:+.3f}")
    print(f"Verdict: {response.verdict.status} ({response.verdict.color})")
    print(_format_lineup("Team A", response.team_a.lineup))
    print(_format_lineup("Team B", response.team_b.lineup))

    if args.output:
        args.output.write_text(response.model_dump_json(indent=2), encoding="utf-8")
        print(f"Wrote evaluation to {args.output}")


if __name__ == "__main__":
    main()
