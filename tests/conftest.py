import pytest

from config import MemorySlotStorage
from models import Participant
from store import ParticipantStore


@pytest.fixture
def storage():
    return MemorySlotStorage()


@pytest.fixture
def store(storage):
    return ParticipantStore(storage)


def people(*orders, names=None):
    names = names or [chr(ord("A") + i) for i in range(len(orders))]
    return [Participant(name=n, order=float(o)) for n, o in zip(names, orders)]


@pytest.fixture
def make_people():
    return people
