# packages/baccarat_core/session_types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from baccarat_core.ledger import Ledger

PLAYER = "Player"
BANKER = "Banker"
TIE = "Tie"

WIN = "Win"
LOSS = "Loss"
PUSH = "Push"

Outcome = Literal["Player", "Banker", "Tie"]
Prediction = Literal["Player", "Banker"]
EvalResult = Literal["Win", "Loss", "Push"]
SessionStatus = Literal["empty", "active"]


@dataclass(frozen=True)
class HandEvaluation:
    outcome: Outcome
    evaluation_result: EvalResult
    unit_delta: int  # +1 / -1 / 0
    next_prediction: Prediction | None
    running_total: int
    margin: int


@dataclass(frozen=True)
class Hand:
    sequence_number: int  # 从 1 开始，连续无空洞
    player_score: int
    banker_score: int
    outcome: Outcome
    prior_prediction: Prediction | None  # 本手开始前有效的预测
    evaluation_result: EvalResult
    unit_delta: int
    running_total: int
    margin: int


@dataclass(frozen=True)
class SessionState:
    ledger: Ledger
    current_prediction: Prediction | None = None

    @property
    def status(self) -> SessionStatus:
        return "active" if self.ledger.count() else "empty"

    @property
    def running_total(self) -> int:
        last = self.ledger.latest()
        return last.running_total if last is not None else 0


__all__ = [
    "BANKER",
    "LOSS",
    "PLAYER",
    "PUSH",
    "TIE",
    "WIN",
    "EvalResult",
    "Hand",
    "HandEvaluation",
    "Outcome",
    "Prediction",
    "SessionState",
    "SessionStatus",
]
