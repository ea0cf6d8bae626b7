import pytest
from baccarat_core.errors import LedgerError
from baccarat_core.ledger import Ledger
from baccarat_core.session_types import Hand


def _hand(seq: int, delta: int, total: int, **kw) -> Hand:
    base = dict(
        sequence_number=seq,
        player_score=8,
        banker_score=2,
        outcome="Player",
        prior_prediction="Player" if delta else None,
        evaluation_result={1: "Win", -1: "Loss", 0: "Push"}[delta],
        unit_delta=delta,
        running_total=total,
        margin=6,
    )
    base.update(kw)
    return Hand(**base)


def test_empty_ledger():
    ledger = Ledger()
    assert ledger.count() == 0
    assert ledger.latest() is None
    assert ledger.total == 0
    assert ledger.next_sequence_number == 1
    assert ledger.running_total_at(0) == 0


def test_append_returns_new_ledger_and_keeps_original():
    a = Ledger()
    b = a.append(_hand(1, 0, 0))
    c = b.append(_hand(2, 1, 1))
    assert a.count() == 0
    assert b.count() == 1
    assert c.count() == 2
    assert c.latest().sequence_number == 2
    assert [h.sequence_number for h in c] == [1, 2]
    assert c.running_total_at(1) == 0
    assert c.running_total_at(2) == 1


@pytest.mark.parametrize("seq", [0, 2, 3])
def test_append_rejects_out_of_order(seq):
    with pytest.raises(LedgerError):
        Ledger().append(_hand(seq, 0, 0))


def test_append_rejects_retroactive_entry():
    ledger = Ledger().append(_hand(1, 0, 0)).append(_hand(2, 1, 1))
    with pytest.raises(LedgerError):
        ledger.append(_hand(1, 0, 0))


def test_append_rejects_running_total_discontinuity():
    ledger = Ledger().append(_hand(1, 0, 0))
    with pytest.raises(LedgerError):
        ledger.append(_hand(2, -1, 5))


def test_running_total_at_unknown_sequence():
    ledger = Ledger().append(_hand(1, 0, 0))
    with pytest.raises(LedgerError):
        ledger.running_total_at(2)
    with pytest.raises(LedgerError):
        ledger.running_total_at(-1)


def test_hands_are_immutable():
    h = _hand(1, 0, 0)
    with pytest.raises(AttributeError):
        h.running_total = 10  # type: ignore[misc]


def test_reset_clears_everything():
    ledger = Ledger().append(_hand(1, 0, 0))
    assert ledger.reset().count() == 0
    assert Ledger().reset() == Ledger()
