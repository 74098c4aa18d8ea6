import json

import pytest

from config import (
    CACHED_NAMES_KEY,
    CacheDecodeError,
    MemorySlotStorage,
    SlotStorage,
    decode_cached_names,
    default_participants,
    encode_cached_names,
    participants_from_cache,
)
from models import Participant
from store import ParticipantStore


def test_encode_writes_names_with_zero_order():
    data = encode_cached_names([Participant("Alice", 3.0), Participant("Bob", 1.5)])
    assert json.loads(data.decode("utf-8")) == [
        {"name": "Alice", "order": 0.0},
        {"name": "Bob", "order": 0.0},
    ]


def test_encode_keeps_non_ascii_names():
    data = encode_cached_names([Participant("Zoë", 1.0)])
    assert "Zoë" in data.decode("utf-8")
    assert decode_cached_names(data) == ["Zoë"]


def test_decode_ignores_unknown_fields():
    data = b'[{"name": "A", "order": 2, "id": "x", "color": "red"}]'
    assert decode_cached_names(data) == ["A"]


@pytest.mark.parametrize("data", [
    b"",
    b"not json",
    b"\xff\xfe",
    b'{"name": "A", "order": 0}',
    b'["A"]',
    b'[{"name": "A"}]',
    b'[{"order": 0.0}]',
    b'[{"name": 5, "order": 0.0}]',
    b'[{"name": "A", "order": "0"}]',
    b'[{"name": "A", "order": true}]',
])
def test_decode_rejects_malformed_cache(data):
    with pytest.raises(CacheDecodeError):
        decode_cached_names(data)


def test_malformed_cache_falls_back_to_one_blank_participant():
    participants = participants_from_cache(b"{broken")
    assert len(participants) == 1
    assert participants[0].name == ""
    assert participants[0].order == 0.0


def test_empty_array_falls_back_to_one_blank_participant():
    participants = participants_from_cache(b"[]")
    assert [(p.name, p.order) for p in participants] == [("", 0.0)]


def test_cached_names_get_fresh_ids_and_zero_orders():
    data = encode_cached_names([Participant("Alice", 4.0), Participant("Bob", 2.0)])
    first = participants_from_cache(data)
    second = participants_from_cache(data)
    assert [p.name for p in first] == ["Alice", "Bob"]
    assert all(p.order == 0.0 for p in first)
    assert {p.id for p in first}.isdisjoint({p.id for p in second})


def test_default_participants_is_single_blank():
    (p,) = default_participants()
    assert p.name == "" and p.order == 0.0


def test_memory_slot_reads_empty_when_missing():
    storage = MemorySlotStorage()
    assert storage.read(CACHED_NAMES_KEY) == b""
    storage.write(CACHED_NAMES_KEY, b"[]")
    assert storage.read(CACHED_NAMES_KEY) == b"[]"


def test_file_slot_round_trip(tmp_path):
    storage = SlotStorage(str(tmp_path / "data"))
    assert storage.read(CACHED_NAMES_KEY) == b""

    storage.write(CACHED_NAMES_KEY, b'[{"name": "A", "order": 0.0}]')
    assert (tmp_path / "data" / "cachedNames.json").exists()
    assert SlotStorage(str(tmp_path / "data")).read(CACHED_NAMES_KEY) == b'[{"name": "A", "order": 0.0}]'


def test_file_slot_keeps_old_value_when_replace_fails(tmp_path, monkeypatch):
    storage = SlotStorage(str(tmp_path))
    storage.write(CACHED_NAMES_KEY, b"old")

    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("config.os.replace", boom)
    with pytest.raises(OSError):
        storage.write(CACHED_NAMES_KEY, b"new")
    monkeypatch.undo()

    assert storage.read(CACHED_NAMES_KEY) == b"old"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["cachedNames.json"]


def test_unusable_data_dir_falls_back_to_default(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory", encoding="utf-8")
    storage = SlotStorage(str(blocker / "SpillPay"))

    store = ParticipantStore(storage)
    assert [(p.name, p.order) for p in store] == [("", 0.0)]
    store.update_name(store.participants[0].id, "Alice")
    assert store.persist_names() is False
    assert store.participants[0].name == "Alice"


def test_file_slot_creates_directory_on_first_write(tmp_path):
    base = tmp_path / "later"
    storage = SlotStorage(str(base))
    assert not base.exists()
    storage.write(CACHED_NAMES_KEY, b"[]")
    assert (base / "cachedNames.json").read_bytes() == b"[]"
