"""
Data models for SpillPay
"""
from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

UNNAMED = "Unnamed"
NO_DISTRIBUTION_MESSAGE = "Enter at least one non-zero order."


def new_participant_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Participant:
    """One person at the table"""
    name: str = ""
    order: float = 0.0  # relative consumption weight
    id: str = field(default_factory=new_participant_id)

    @property
    def display_name(self) -> str:
        return self.name if self.name else UNNAMED


@dataclass
class Share:
    """Amount owed by one participant"""
    participant: Participant
    amount: float
    shared_portion: float = 0.0  # shared item cost carried by this participant

    @property
    def label(self) -> str:
        return self.participant.display_name


class ConfirmState(Enum):
    UNCONFIRMED = "unconfirmed"
    CONFIRMED = "confirmed"


@dataclass
class SplitOutcome:
    """Result of a confirmed split. shares is None when no valid distribution exists."""
    total: float
    shared_item_cost: float
    shares: Optional[List[Share]]
    participant_count: int = 0  # everyone in the split, including omitted zero shares

    @property
    def has_distribution(self) -> bool:
        return self.shares is not None

    @property
    def message(self) -> Optional[str]:
        return None if self.has_distribution else NO_DISTRIBUTION_MESSAGE
