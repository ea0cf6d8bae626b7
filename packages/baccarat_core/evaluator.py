"""
Hand evaluator: scores the live prediction against a new hand and derives the
prediction for the next one.

Both steps are pure; all state they need (prior prediction, prior running
total) comes in through the arguments.

Prediction rule ("margin strategy"):
- tie            -> keep the prior prediction
- margin >= N    -> follow the winner (trend)
- margin <  N    -> back the other side (chop)
N defaults to 5 (see `EngineConfig.trend_margin`).
"""

from __future__ import annotations

import logging

from baccarat_core.classify import classify_outcome, hand_margin, opposite
from baccarat_core.config import EngineConfig
from baccarat_core.session_types import (
    LOSS,
    PUSH,
    TIE,
    WIN,
    EvalResult,
    HandEvaluation,
    Outcome,
    Prediction,
)

log = logging.getLogger(__name__)


def score_prediction(outcome: Outcome, prior_prediction: Prediction | None) -> tuple[EvalResult, int]:
    """Return (evaluation_result, unit_delta) for the prediction live on this hand."""
    if prior_prediction is None:
        return PUSH, 0
    if outcome == TIE:
        return PUSH, 0
    if outcome == prior_prediction:
        return WIN, 1
    return LOSS, -1


def derive_next_prediction(
    outcome: Outcome,
    margin: int,
    prior_prediction: Prediction | None,
    *,
    trend_margin: int = 5,
) -> Prediction | None:
    if outcome == TIE:
        return prior_prediction
    if margin >= trend_margin:
        return outcome
    return opposite(outcome)


def evaluate_hand(
    player_score: int,
    banker_score: int,
    prior_prediction: Prediction | None,
    prior_running_total: int,
    config: EngineConfig | None = None,
) -> HandEvaluation:
    cfg = config or EngineConfig.build()
    outcome = classify_outcome(player_score, banker_score)
    margin = hand_margin(player_score, banker_score)
    result, delta = score_prediction(outcome, prior_prediction)
    nxt = derive_next_prediction(
        outcome, margin, prior_prediction, trend_margin=cfg.trend_margin
    )
    ev = HandEvaluation(
        outcome=outcome,
        evaluation_result=result,
        unit_delta=delta,
        next_prediction=nxt,
        running_total=int(prior_running_total) + delta,
        margin=margin,
    )
    log.debug(
        "hand_evaluated",
        extra={
            "event": "hand_evaluated",
            "player_score": player_score,
            "banker_score": banker_score,
            "outcome": ev.outcome,
            "prior_prediction": prior_prediction,
            "evaluation_result": ev.evaluation_result,
            "unit_delta": ev.unit_delta,
            "running_total": ev.running_total,
            "next_prediction": ev.next_prediction,
        },
    )
    return ev


__all__ = ["derive_next_prediction", "evaluate_hand", "score_prediction"]
