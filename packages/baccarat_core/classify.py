# packages/baccarat_core/classify.py
from __future__ import annotations

from baccarat_core.session_types import BANKER, PLAYER, TIE, Outcome, Prediction


def classify_outcome(player_score: int, banker_score: int) -> Outcome:
    """Winner of a score pair. Total over all integers; range checks live upstream."""
    if player_score > banker_score:
        return PLAYER
    if banker_score > player_score:
        return BANKER
    return TIE


def hand_margin(player_score: int, banker_score: int) -> int:
    return abs(int(player_score) - int(banker_score))


def opposite(side: Prediction) -> Prediction:
    if side == PLAYER:
        return BANKER
    if side == BANKER:
        return PLAYER
    raise ValueError(f"no opposite side for: {side}")


__all__ = ["classify_outcome", "hand_margin", "opposite"]
