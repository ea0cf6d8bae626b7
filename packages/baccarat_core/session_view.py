# packages/baccarat_core/session_view.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict
from typing import Any

from baccarat_core.ledger import Ledger
from baccarat_core.session_types import BANKER, PLAYER, Hand, Prediction, SessionState
from baccarat_core.stats import summarize_session


def fold_session(hands: Iterable[Hand], current_prediction: Prediction | None) -> SessionState:
    """Rebuild a session value from stored hands (ordered by sequence number).

    Every hand goes back through `Ledger.append`, so stored rows that break
    the ledger invariants raise LedgerError instead of loading silently.
    """
    ledger = Ledger()
    for h in hands:
        ledger = ledger.append(h)
    return SessionState(ledger=ledger, current_prediction=current_prediction)


def bet_label(prediction: Prediction | None) -> str:
    if prediction == PLAYER:
        return "P"
    if prediction == BANKER:
        return "B"
    return "-"


def format_total(total: int) -> str:
    return f"{total:+d}" if total else "0"


def hand_to_dict(h: Hand) -> dict[str, Any]:
    return asdict(h)


def history_rows(ledger: Ledger) -> list[dict[str, Any]]:
    # 最新的一手排在最前
    return [
        {
            **hand_to_dict(h),
            "bet": bet_label(h.prior_prediction),
            "total_fmt": format_total(h.running_total),
        }
        for h in reversed(ledger.hands)
    ]


def snapshot_session(session: SessionState) -> dict[str, Any]:
    return {
        "status": session.status,
        "current_prediction": session.current_prediction,
        "next_bet": bet_label(session.current_prediction),
        "count": session.ledger.count(),
        "running_total": session.running_total,
        "hands": [hand_to_dict(h) for h in session.ledger],
        "history": history_rows(session.ledger),
        "summary": summarize_session(session.ledger),
    }


__all__ = [
    "bet_label",
    "fold_session",
    "format_total",
    "hand_to_dict",
    "history_rows",
    "snapshot_session",
]
