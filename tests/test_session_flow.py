import random

import pytest
from baccarat_core.config import EngineConfig
from baccarat_core.errors import InvalidInput
from baccarat_core.session_flow import reset_session, start_session, submit_hand

CFG = EngineConfig()


def test_documented_scenario():
    s0 = start_session()
    assert s0.status == "empty"
    assert s0.current_prediction is None

    s1, h1 = submit_hand(s0, 8, 2, CFG)
    assert (h1.sequence_number, h1.outcome, h1.margin) == (1, "Player", 6)
    assert h1.prior_prediction is None
    assert h1.evaluation_result == "Push"
    assert h1.running_total == 0
    assert s1.current_prediction == "Player"
    assert s1.status == "active"

    s2, h2 = submit_hand(s1, 3, 6, CFG)
    assert h2.outcome == "Banker"
    assert h2.prior_prediction == "Player"
    assert h2.evaluation_result == "Loss"
    assert h2.unit_delta == -1
    assert h2.running_total == -1
    assert s2.current_prediction == "Player"  # margin 3 -> chop

    with pytest.raises(InvalidInput, match="tie not permitted"):
        submit_hand(s2, 5, 5, CFG)
    # 被拒绝的输入不改变会话
    assert s2.ledger.count() == 2
    assert s2.current_prediction == "Player"


def test_submit_does_not_mutate_input_session():
    s0 = start_session()
    s1, _ = submit_hand(s0, 9, 1, CFG)
    assert s0.ledger.count() == 0
    assert s0.current_prediction is None
    assert s1.ledger.count() == 1


def test_win_after_trend_follow():
    s, _ = submit_hand(start_session(), 9, 2, CFG)  # next Player
    s, h = submit_hand(s, 7, 6, CFG)
    assert h.evaluation_result == "Win"
    assert h.running_total == 1
    assert s.current_prediction == "Banker"  # margin 1 -> chop


@pytest.mark.parametrize("bad", [(1.5, 2), ("8", 2), (True, 0), (None, 3)])
def test_non_integer_scores_rejected(bad):
    with pytest.raises(InvalidInput):
        submit_hand(start_session(), *bad)


def test_out_of_range_scores_still_evaluate():
    s, h = submit_hand(start_session(), 12, -1, CFG)
    assert h.outcome == "Player"
    assert h.margin == 13
    assert s.current_prediction == "Player"


def test_ledger_invariants_hold_over_random_sequences():
    rnd = random.Random(7)
    s = start_session()
    deltas = []
    for k in range(1, 201):
        p = rnd.randint(0, 9)
        b = rnd.randint(0, 9)
        if p == b:
            b = (b + 1) % 10
        before = s.current_prediction
        s, h = submit_hand(s, p, b, CFG)
        deltas.append(h.unit_delta)
        assert h.sequence_number == k
        assert h.prior_prediction == before
        assert h.running_total == sum(deltas)
        assert s.ledger.running_total_at(k) == sum(deltas)
    assert [h.sequence_number for h in s.ledger] == list(range(1, 201))


def test_reset_restores_fresh_session():
    s = start_session()
    for p, b in [(8, 2), (3, 6), (1, 0)]:
        s, _ = submit_hand(s, p, b, CFG)
    r = reset_session(s)
    assert r == start_session()
    assert r.status == "empty"
    assert reset_session(r) == r  # 空会话重置是 no-op

    fresh, h_fresh = submit_hand(start_session(), 8, 2, CFG)
    again, h_again = submit_hand(r, 8, 2, CFG)
    assert h_fresh == h_again
    assert fresh == again


def test_reset_logs_when_clearing(caplog):
    import logging

    caplog.set_level(logging.INFO, logger="baccarat_core.session_flow")
    s, _ = submit_hand(start_session(), 8, 2, CFG)
    reset_session(s)
    rec = [r for r in caplog.records if r.getMessage() == "session_reset"]
    assert rec and rec[0].hands_cleared == 1

    caplog.clear()
    reset_session(start_session())
    assert not [r for r in caplog.records if r.getMessage() == "session_reset"]
