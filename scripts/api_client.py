"""Lightweight REST client for the tradefair API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the tradefair REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("payload", type=Path, nargs="?", help="Trade payload JSON")
    parser.add_argument("--send-a", nargs="*", default=None, help="Override player keys team A sends")
    parser.add_argument("--send-b", nargs="*", default=None, help="Override player keys team B sends")
    parser.add_argument("--show-config", action="store_true", help="Print the server thresholds and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        if args.show_config:
            resp = client.get("/api/config")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.payload is None:
            parser.error("payload is required unless --show-config is given")
        try:
            payload = json.loads(args.payload.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SystemExit(f"Invalid payload JSON: {exc}") from exc
        if args.send_a is not None:
            payload["send_a"] = args.send_a
        if args.send_b is not None:
            payload["send_b"] = args.send_b

        resp = client.post("/api/evaluate", json=payload)
        if resp.status_code == 400:
            raise SystemExit(f"Evaluation rejected: {resp.json().get('detail')}")
        resp.raise_for_status()
        body = resp.json()
        print(f"Impact A: {body['impact_a']:+.3f}  Impact B: {body['impact_b']:+.3f}")
        print(f"Verdict: {body['verdict']['status']} ({body['verdict']['color']})")


if __name__ == "__main__":
    main()
