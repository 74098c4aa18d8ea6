"""
Participant store for SpillPay: the editable list plus its cached names
"""
from __future__ import annotations
import copy
import logging
from typing import Iterable, List, Optional, Union

from models import Participant
from config import CACHED_NAMES_KEY, encode_cached_names, participants_from_cache
from utils import parse_amount

logger = logging.getLogger(__name__)


class UnknownParticipantError(KeyError):
    """No participant with the given id"""


class ParticipantStore:
    """
    Ordered, mutable list of participants.
    Structural changes and name edits rewrite the cached names slot.
    storage needs read(key) -> bytes and write(key, bytes).
    """

    def __init__(self, storage, key: str = CACHED_NAMES_KEY):
        self.storage = storage
        self.key = key
        self.participants: List[Participant] = []
        self.load_names()

    def __len__(self) -> int:
        return len(self.participants)

    def __iter__(self):
        return iter(self.participants)

    def get(self, pid: str) -> Participant:
        for p in self.participants:
            if p.id == pid:
                return p
        raise UnknownParticipantError(pid)

    def snapshot(self) -> List[Participant]:
        """Copy of the current list for the calculator"""
        return copy.deepcopy(self.participants)

    # ---------- Mutations ----------
    def add_participant(self) -> Participant:
        """Append a blank participant (not persisted until a name changes)"""
        p = Participant(name="", order=0.0)
        self.participants.append(p)
        logger.debug("Added participant %s", p.id)
        return p

    def update_name(self, pid: str, name: str) -> None:
        self.get(pid).name = name
        self.persist_names()

    def update_order(self, pid: str, value: Union[str, float, int, None]) -> bool:
        """
        Set order from a number or typed text.
        Text that does not parse yet leaves the order unchanged (returns False).
        Negative values are clamped to 0.0.
        """
        p = self.get(pid)
        v = parse_amount(value)
        if v is None:
            return False
        p.order = max(0.0, v)
        return True

    def remove_participant(self, pid: str) -> None:
        """Remove by id; removing the last one leaves an empty list"""
        p = self.get(pid)
        self.participants = [x for x in self.participants if x.id != p.id]
        logger.debug("Removed participant %s", pid)
        self.persist_names()

    def replace_names(self, names: Iterable[str]) -> None:
        """Start over with one fresh participant per name"""
        self.participants = [Participant(name=n, order=0.0) for n in names]
        self.persist_names()

    # ---------- Persistence ----------
    def persist_names(self) -> bool:
        """Overwrite the cached names; on failure the previous value is kept"""
        try:
            data = encode_cached_names(self.participants)
            self.storage.write(self.key, data)
        except (TypeError, ValueError, OSError) as ex:
            logger.warning("Could not cache participant names: %s", ex)
            return False
        return True

    def load_names(self) -> List[Participant]:
        """Rebuild the list from cached names, or one blank participant"""
        data: Optional[bytes] = self.storage.read(self.key)
        self.participants = participants_from_cache(data or b"")
        logger.debug("Loaded %d participant(s)", len(self.participants))
        return self.participants
