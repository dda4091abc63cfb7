import math

import pytest

from dominion.rngs import (
    A256,
    CHECK,
    DEFAULT,
    MODULUS,
    MULTIPLIER,
    RandomStreams,
    find_value,
    self_test,
)


def test_self_test_passes():
    assert self_test() is True


def test_reference_state_after_ten_thousand_draws():
    streams = RandomStreams()
    streams.put_seed(1)
    for _ in range(10000):
        streams.random()
    assert streams.get_seed() == CHECK


def test_planted_stream_one_is_jump_multiplier():
    streams = RandomStreams()
    streams.select_stream(1)
    streams.plant_seeds(1)
    assert streams.get_seed() == A256


def test_first_draw_from_seed_one():
    streams = RandomStreams()
    streams.put_seed(1)
    assert streams.random() == MULTIPLIER / MODULUS
    assert streams.get_seed() == MULTIPLIER


def test_values_strictly_between_zero_and_one():
    streams = RandomStreams()
    streams.put_seed(42)
    values = [streams.random() for _ in range(2000)]
    assert all(0.0 < v < 1.0 for v in values)


def test_same_seed_same_sequence():
    a, b = RandomStreams(), RandomStreams()
    a.put_seed(99)
    b.put_seed(99)
    assert [a.random() for _ in range(50)] == [b.random() for _ in range(50)]


def test_large_seed_is_reduced():
    streams = RandomStreams()
    streams.put_seed(MODULUS + 5)
    assert streams.get_seed() == 5


def test_default_seed_of_stream_zero():
    assert RandomStreams().get_seed() == DEFAULT


def test_uninitialized_selection_plants_default():
    fresh = RandomStreams()
    fresh.select_stream(1)
    planted = RandomStreams()
    planted.plant_seeds(DEFAULT)
    planted.select_stream(1)
    assert fresh.get_seed() == planted.get_seed()


def test_select_stream_wraps():
    streams = RandomStreams()
    streams.plant_seeds(7)
    streams.select_stream(3)
    seed3 = streams.get_seed()
    streams.select_stream(256 + 3)
    assert streams.stream == 3
    assert streams.get_seed() == seed3


def test_streams_are_independent():
    streams = RandomStreams()
    streams.plant_seeds(11)
    streams.select_stream(2)
    before = streams.get_seed()
    streams.select_stream(5)
    for _ in range(10):
        streams.random()
    streams.select_stream(2)
    assert streams.get_seed() == before


def test_zero_seed_prompts_until_valid(monkeypatch):
    replies = iter(["0", "abc", "7"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
    streams = RandomStreams()
    streams.put_seed(0)
    assert streams.get_seed() == 7


def test_negative_seed_uses_clock():
    streams = RandomStreams()
    streams.put_seed(-1)
    assert 0 <= streams.get_seed() < MODULUS


def test_find_value_first_draw():
    streams = RandomStreams()
    streams.select_stream(1)
    streams.put_seed(5)
    first = math.floor(streams.random() * 1_000_000_000)
    second = math.floor(streams.random() * 1_000_000_000)
    assert find_value(5, first) == 1
    assert find_value(5, second) == 2


def test_find_value_rejects_out_of_range():
    with pytest.raises(ValueError):
        find_value(5, 1_000_000_000)
    with pytest.raises(ValueError):
        find_value(5, -1)