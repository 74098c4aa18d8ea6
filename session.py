"""
Edit-then-confirm state for one bill
"""
from __future__ import annotations
import logging
from typing import Optional

from models import ConfirmState, SplitOutcome
from computations import summarize_outcome
from store import ParticipantStore
from utils import parse_shared_cost, parse_total

logger = logging.getLogger(__name__)


class SplitSession:
    """
    Holds the shared item and total text fields and whether the total was confirmed.
    A result exists only once confirmed and while the total parses to a positive number.
    """

    def __init__(self, store: ParticipantStore):
        self.store = store
        self.shared_item_text = ""
        self.total_text = ""
        self.state = ConfirmState.UNCONFIRMED

    @property
    def confirmed(self) -> bool:
        return self.state is ConfirmState.CONFIRMED

    def set_shared_item_text(self, text: str) -> None:
        self.shared_item_text = text

    def set_total_text(self, text: str) -> None:
        """Editing the total needs a new confirmation"""
        if text != self.total_text:
            self.total_text = text
            self.state = ConfirmState.UNCONFIRMED

    def confirm(self) -> Optional[SplitOutcome]:
        self.state = ConfirmState.CONFIRMED
        return self.outcome()

    def outcome(self) -> Optional[SplitOutcome]:
        if not self.confirmed:
            return None
        total = parse_total(self.total_text)
        if total is None:
            logger.debug("Total %r is not a positive number", self.total_text)
            return None
        shared = parse_shared_cost(self.shared_item_text)
        return summarize_outcome(self.store.snapshot(), shared, total)
