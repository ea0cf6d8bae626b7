#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import random
import sys
from dataclasses import replace
from pathlib import Path


def _ensure_path():
    # Allow running from repo root without installation
    here = Path(__file__).resolve()
    pkg = here.parent.parent / "packages"
    if str(pkg) not in sys.path:
        sys.path.insert(0, str(pkg))


_ensure_path()

from baccarat_core.config import EngineConfig  # type: ignore  # noqa: E402
from baccarat_core.errors import InvalidInput  # type: ignore  # noqa: E402
from baccarat_core.session_flow import start_session, submit_hand  # type: ignore  # noqa: E402
from baccarat_core.session_view import snapshot_session  # type: ignore  # noqa: E402
from baccarat_core.stats import summarize_session  # type: ignore  # noqa: E402


def _parse_entry(raw: str) -> tuple[int, int]:
    raw = raw.strip()
    if len(raw) != 2 or any(c not in "0123456789" for c in raw):
        raise InvalidInput(f"entry must be two digits, got {raw!r}")
    return int(raw[0]), int(raw[1])


def cmd_replay(args) -> int:
    s = start_session()
    for raw in args.entries:
        try:
            p, b = _parse_entry(raw)
            s, _ = submit_hand(s, p, b, args.config)
        except InvalidInput as e:
            print(f"skip {raw}: {e}", file=sys.stderr)
            if args.strict:
                return 2
    snap = snapshot_session(s)
    if not args.full:
        snap.pop("hands")
    print(json.dumps(snap, ensure_ascii=False, indent=2))
    return 0


def cmd_sim(args) -> int:
    rnd = random.Random(args.seed)
    s = start_session()
    while s.ledger.count() < args.count:
        p, b = rnd.randint(0, 9), rnd.randint(0, 9)
        if p == b:
            continue
        s, _ = submit_hand(s, p, b, args.config)
    out = {"seed": args.seed, **summarize_session(s.ledger)}
    print(json.dumps(out, ensure_ascii=False, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Replay or simulate navigator sessions")
    ap_common = argparse.ArgumentParser(add_help=False)
    ap_common.add_argument(
        "--trend-margin",
        type=int,
        default=None,
        help="Override NAVIGATOR_TREND_MARGIN (default: env or 5)",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    sp1 = sub.add_parser("replay", parents=[ap_common], help="Replay two-digit entries, e.g. 82 36")
    sp1.add_argument("entries", nargs="+", help="Player digit then banker digit")
    sp1.add_argument("--strict", action="store_true", help="Stop on the first invalid entry")
    sp1.add_argument("--full", action="store_true", help="Include the ordered ledger")
    sp1.set_defaults(func=cmd_replay)

    sp2 = sub.add_parser("sim", parents=[ap_common], help="Simulate random non-tie hands")
    sp2.add_argument("--count", type=int, default=100, help="Number of hands (default: 100)")
    sp2.add_argument("--seed", type=int, default=42, help="RNG seed (default: 42)")
    sp2.set_defaults(func=cmd_sim)

    args = ap.parse_args(argv)
    # The flag overrides the env value for this run only
    args.config = EngineConfig.build()
    if args.trend_margin is not None:
        args.config = replace(args.config, trend_margin=int(args.trend_margin))
    return int(args.func(args) or 0)


if __name__ == "__main__":
    raise SystemExit(main())
