"""Hand evaluation and prediction engine for the baccarat navigator."""

from baccarat_core.errors import InvalidInput, LedgerError, NavigatorError
from baccarat_core.ledger import Ledger
from baccarat_core.session_flow import reset_session, start_session, submit_hand
from baccarat_core.session_types import Hand, SessionState

__all__ = [
    "Hand",
    "InvalidInput",
    "Ledger",
    "LedgerError",
    "NavigatorError",
    "SessionState",
    "reset_session",
    "start_session",
    "submit_hand",
]
