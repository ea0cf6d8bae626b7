import pytest


@pytest.mark.parametrize(
    "player,banker,expected",
    [
        (8, 2, "Player"),
        (3, 6, "Banker"),
        (5, 5, "Tie"),
        (0, 9, "Banker"),
        (9, 0, "Player"),
        (0, 0, "Tie"),
        # 超出 0..9 也不能崩
        (-3, 12, "Banker"),
        (100, -100, "Player"),
    ],
)
def test_classify_outcome(player, banker, expected):
    from baccarat_core.classify import classify_outcome

    assert classify_outcome(player, banker) == expected


def test_hand_margin_is_absolute():
    from baccarat_core.classify import hand_margin

    assert hand_margin(8, 2) == 6
    assert hand_margin(2, 8) == 6
    assert hand_margin(4, 4) == 0


def test_opposite_swaps_sides_and_rejects_tie():
    from baccarat_core.classify import opposite

    assert opposite("Player") == "Banker"
    assert opposite("Banker") == "Player"
    with pytest.raises(ValueError):
        opposite("Tie")
