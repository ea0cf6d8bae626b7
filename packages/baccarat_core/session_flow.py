# packages/baccarat_core/session_flow.py
from __future__ import annotations

import logging

from baccarat_core.config import EngineConfig
from baccarat_core.errors import InvalidInput
from baccarat_core.evaluator import evaluate_hand
from baccarat_core.ledger import Ledger
from baccarat_core.session_types import Hand, SessionState

log = logging.getLogger(__name__)


def start_session() -> SessionState:
    """Empty session: no hands, no prediction."""
    return SessionState(ledger=Ledger(), current_prediction=None)


def _check_scores(player_score, banker_score) -> None:
    for name, v in (("player_score", player_score), ("banker_score", banker_score)):
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidInput(f"{name} must be an integer, got {v!r}")
    if player_score == banker_score:
        raise InvalidInput("tie not permitted")


def submit_hand(
    session: SessionState,
    player_score: int,
    banker_score: int,
    config: EngineConfig | None = None,
) -> tuple[SessionState, Hand]:
    """
    基于当前会话值结算一手并返回 (新会话值, 新 Hand)：
    - 用会话里的 current_prediction 评估本手
    - running_total 接在 ledger 最后一条之后
    - 按 margin 策略更新 current_prediction
    输入的 session 不会被修改；平局比分直接拒绝（InvalidInput）。
    """
    _check_scores(player_score, banker_score)
    ledger = session.ledger
    prior = session.current_prediction
    ev = evaluate_hand(player_score, banker_score, prior, ledger.total, config)
    hand = Hand(
        sequence_number=ledger.next_sequence_number,
        player_score=player_score,
        banker_score=banker_score,
        outcome=ev.outcome,
        prior_prediction=prior,
        evaluation_result=ev.evaluation_result,
        unit_delta=ev.unit_delta,
        running_total=ev.running_total,
        margin=ev.margin,
    )
    new_session = SessionState(ledger=ledger.append(hand), current_prediction=ev.next_prediction)
    return new_session, hand


def reset_session(session: SessionState | None = None) -> SessionState:
    """Clear ledger and prediction. Resetting an empty session is a no-op."""
    if session is not None and session.status == "active":
        log.info(
            "session_reset",
            extra={
                "event": "session_reset",
                "hands_cleared": session.ledger.count(),
                "running_total": session.running_total,
            },
        )
    return start_session()


__all__ = ["reset_session", "start_session", "submit_hand"]
