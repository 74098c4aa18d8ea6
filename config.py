"""
Persistence of cached participant names for SpillPay
"""
from __future__ import annotations
import json
import logging
import os
import tempfile
from typing import Dict, List, Optional, Sequence

from models import Participant
from utils import app_dir

logger = logging.getLogger(__name__)

CACHED_NAMES_KEY = "cachedNames"


class CacheDecodeError(ValueError):
    """Cached names could not be decoded"""


def default_participants() -> List[Participant]:
    """Initial state when nothing usable is cached: one blank participant"""
    return [Participant(name="", order=0.0)]


def encode_cached_names(participants: Sequence[Participant]) -> bytes:
    """
    Serialize participants as name-only records.
    order is always written as 0.0, it is never persisted.
    """
    records = [{"name": p.name, "order": 0.0} for p in participants]
    return json.dumps(records, ensure_ascii=False).encode("utf-8")


def decode_cached_names(data: bytes) -> List[str]:
    """
    Decode cached bytes into a list of names.
    Every record needs a string 'name' and a numeric 'order'; extra keys are ignored.
    Raises CacheDecodeError on anything else.
    """
    if not data:
        raise CacheDecodeError("cache is empty")
    try:
        records = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as ex:
        raise CacheDecodeError(str(ex)) from ex
    if not isinstance(records, list):
        raise CacheDecodeError("cached value is not a list")

    names = []
    for r in records:
        if not isinstance(r, dict):
            raise CacheDecodeError("cached record is not an object")
        name = r.get("name")
        order = r.get("order")
        if not isinstance(name, str):
            raise CacheDecodeError("cached record has no string 'name'")
        if isinstance(order, bool) or not isinstance(order, (int, float)):
            raise CacheDecodeError("cached record has no numeric 'order'")
        names.append(name)
    return names


def participants_from_cache(data: bytes) -> List[Participant]:
    """Fresh participants (new ids, order 0.0) for each cached name, or the default list"""
    try:
        names = decode_cached_names(data)
    except CacheDecodeError as ex:
        logger.info("Using default participants: %s", ex)
        return default_participants()
    if not names:
        return default_participants()
    return [Participant(name=n, order=0.0) for n in names]


class MemorySlotStorage:
    """Named byte slots kept in memory only (nothing survives the process)"""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._slots: Dict[str, bytes] = dict(initial or {})

    def read(self, key: str) -> bytes:
        return self._slots.get(key, b"")

    def write(self, key: str, data: bytes) -> None:
        self._slots[key] = bytes(data)


class SlotStorage:
    """
    Named byte slots stored as <base>/<key>.json.
    A missing slot reads as empty bytes. The directory is created on first write.
    """

    def __init__(self, base: Optional[str] = None):
        self.base = app_dir(base, create=False)

    def path_for(self, key: str) -> str:
        return os.path.join(self.base, f"{key}.json")

    def read(self, key: str) -> bytes:
        try:
            with open(self.path_for(key), "rb") as f:
                return f.read()
        except FileNotFoundError:
            return b""
        except OSError as ex:
            logger.warning("Could not read slot %s: %s", key, ex)
            return b""

    def write(self, key: str, data: bytes) -> None:
        """Write via a temp file and os.replace so the old value survives a failed write"""
        os.makedirs(self.base, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=f".{key}.", dir=self.base)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp, self.path_for(key))
        except OSError:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise
