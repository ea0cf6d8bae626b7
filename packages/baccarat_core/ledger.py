# packages/baccarat_core/ledger.py
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from baccarat_core.errors import LedgerError
from baccarat_core.session_types import Hand


@dataclass(frozen=True)
class Ledger:
    """Append-only, ordered record of finalized hands.

    Instances are immutable: `append` and `reset` return a new ledger.
    Entry k always carries sequence_number == k and
    running_total == running_total[k-1] + unit_delta.
    """

    hands: tuple[Hand, ...] = ()

    def __iter__(self) -> Iterator[Hand]:
        return iter(self.hands)

    def __len__(self) -> int:
        return len(self.hands)

    def count(self) -> int:
        return len(self.hands)

    def latest(self) -> Hand | None:
        return self.hands[-1] if self.hands else None

    @property
    def next_sequence_number(self) -> int:
        return len(self.hands) + 1

    @property
    def total(self) -> int:
        last = self.latest()
        return last.running_total if last is not None else 0

    def running_total_at(self, sequence_number: int) -> int:
        """Running total through `sequence_number` inclusive (0 is the opening balance)."""
        if sequence_number == 0:
            return 0
        if not 1 <= sequence_number <= len(self.hands):
            raise LedgerError(f"unknown sequence number: {sequence_number}")
        return self.hands[sequence_number - 1].running_total

    def append(self, hand: Hand) -> Ledger:
        expected = self.next_sequence_number
        if hand.sequence_number != expected:
            raise LedgerError(
                f"out-of-order append: got #{hand.sequence_number}, expected #{expected}"
            )
        if hand.running_total != self.total + hand.unit_delta:
            raise LedgerError(
                f"running total mismatch at #{hand.sequence_number}: "
                f"{self.total} + {hand.unit_delta} != {hand.running_total}"
            )
        return Ledger(hands=self.hands + (hand,))

    def reset(self) -> Ledger:
        return Ledger()


__all__ = ["Ledger"]
