import pytest
from baccarat_core.config import EngineConfig
from baccarat_core.evaluator import derive_next_prediction, evaluate_hand, score_prediction


@pytest.mark.parametrize(
    "outcome,prior,expected",
    [
        ("Player", None, ("Push", 0)),
        ("Banker", None, ("Push", 0)),
        ("Tie", None, ("Push", 0)),
        ("Tie", "Player", ("Push", 0)),
        ("Tie", "Banker", ("Push", 0)),
        ("Player", "Player", ("Win", 1)),
        ("Banker", "Banker", ("Win", 1)),
        ("Player", "Banker", ("Loss", -1)),
        ("Banker", "Player", ("Loss", -1)),
    ],
)
def test_score_prediction_rule_table(outcome, prior, expected):
    assert score_prediction(outcome, prior) == expected


@pytest.mark.parametrize(
    "outcome,margin,prior,expected",
    [
        ("Player", 6, None, "Player"),  # trend-follow
        ("Player", 5, "Banker", "Player"),  # 边界：>= 5 跟随
        ("Banker", 9, "Player", "Banker"),
        ("Banker", 2, None, "Player"),  # chop
        ("Player", 4, "Player", "Banker"),
        ("Player", 1, None, "Banker"),
        ("Tie", 0, "Banker", "Banker"),  # 平局保持
        ("Tie", 0, None, None),
    ],
)
def test_derive_next_prediction(outcome, margin, prior, expected):
    assert derive_next_prediction(outcome, margin, prior) == expected


def test_evaluate_hand_first_hand_is_push():
    ev = evaluate_hand(8, 2, None, 0, EngineConfig())
    assert ev.outcome == "Player"
    assert ev.evaluation_result == "Push"
    assert ev.unit_delta == 0
    assert ev.running_total == 0
    assert ev.margin == 6
    assert ev.next_prediction == "Player"


def test_evaluate_hand_loss_and_chop():
    ev = evaluate_hand(3, 6, "Player", 0, EngineConfig())
    assert ev.outcome == "Banker"
    assert ev.evaluation_result == "Loss"
    assert ev.unit_delta == -1
    assert ev.running_total == -1
    assert ev.next_prediction == "Player"


def test_evaluate_hand_tie_holds_prediction_and_pushes():
    ev = evaluate_hand(4, 4, "Banker", 3, EngineConfig())
    assert ev.outcome == "Tie"
    assert ev.evaluation_result == "Push"
    assert ev.unit_delta == 0
    assert ev.running_total == 3
    assert ev.next_prediction == "Banker"


def test_evaluate_hand_is_deterministic():
    cfg = EngineConfig()
    assert evaluate_hand(7, 1, "Banker", -2, cfg) == evaluate_hand(7, 1, "Banker", -2, cfg)


def test_trend_margin_from_config():
    # margin 4 在默认阈值下是 chop，阈值调到 4 后变成 trend
    assert evaluate_hand(6, 2, None, 0, EngineConfig()).next_prediction == "Banker"
    assert evaluate_hand(6, 2, None, 0, EngineConfig(trend_margin=4)).next_prediction == "Player"


def test_evaluate_hand_reads_env_when_config_omitted(monkeypatch):
    monkeypatch.setenv("NAVIGATOR_TREND_MARGIN", "3")
    assert evaluate_hand(5, 2, None, 0).next_prediction == "Player"
    monkeypatch.delenv("NAVIGATOR_TREND_MARGIN")
    assert evaluate_hand(5, 2, None, 0).next_prediction == "Banker"
