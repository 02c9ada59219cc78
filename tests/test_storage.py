from dataclasses import dataclass

import pytest

from quadkit.storage import Storage


@dataclass
class WorldBoundaries:
    value: int


@dataclass
class Score:
    points: int


def test_store_and_get():
    storage = Storage()
    storage.store(WorldBoundaries(23))
    assert storage.get(WorldBoundaries).value == 23


def test_store_overwrites():
    storage = Storage()
    storage.store(WorldBoundaries(1))
    storage.store(WorldBoundaries(2))
    assert storage.get(WorldBoundaries) == WorldBoundaries(2)


def test_try_get_missing_is_none():
    storage = Storage()
    storage.store(WorldBoundaries(5))
    assert storage.try_get(Score) is None
    assert storage.try_get(WorldBoundaries) == WorldBoundaries(5)


def test_get_missing_raises():
    storage = Storage()
    with pytest.raises(KeyError):
        storage.get(Score)


def test_mutation_visible_through_storage():
    storage = Storage()
    storage.store(Score(0))
    storage.get(Score).points += 10
    assert storage.get(Score).points == 10


def test_types_are_kept_apart():
    storage = Storage()
    storage.store(Score(3))
    storage.store(WorldBoundaries(4))
    assert Score in storage
    assert storage.get(Score) == Score(3)
    assert storage.get(WorldBoundaries) == WorldBoundaries(4)