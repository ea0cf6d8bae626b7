# packages/baccarat_core/stats.py
from __future__ import annotations

from typing import Any

import numpy as np

from baccarat_core.ledger import Ledger
from baccarat_core.session_types import LOSS, PUSH, WIN


def _current_streak(results: list[str]) -> dict[str, Any]:
    # push 不打断也不延长连胜/连败
    decided = [r for r in results if r != PUSH]
    if not decided:
        return {"result": None, "length": 0}
    last = decided[-1]
    n = 0
    for r in reversed(decided):
        if r != last:
            break
        n += 1
    return {"result": last, "length": n}


def summarize_session(ledger: Ledger) -> dict[str, Any]:
    """Bankroll summary over the ledger, measured from the opening balance of 0."""
    results = [h.evaluation_result for h in ledger]
    res = np.asarray(results, dtype=object)
    wins = int(np.count_nonzero(res == WIN)) if res.size else 0
    losses = int(np.count_nonzero(res == LOSS)) if res.size else 0
    pushes = int(np.count_nonzero(res == PUSH)) if res.size else 0

    path = np.concatenate(([0], np.fromiter((h.running_total for h in ledger), dtype=np.int64)))
    drawdown = np.maximum.accumulate(path) - path

    decided = wins + losses
    return {
        "hands": len(results),
        "wins": wins,
        "losses": losses,
        "pushes": pushes,
        "win_rate": (wins / decided) if decided else None,
        "running_total": int(path[-1]),
        "peak": int(path.max()),
        "trough": int(path.min()),
        "max_drawdown": int(drawdown.max()),
        "streak": _current_streak(results),
    }


__all__ = ["summarize_session"]
