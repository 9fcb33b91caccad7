import threading

import pytest

from gamekit.rng import Random


def test_same_seed_same_sequence():
    a = Random(1234)
    b = Random(1234)
    assert [a.get_int(0, 1000) for _ in range(20)] == [b.get_int(0, 1000) for _ in range(20)]
    assert [a.get_float(0.0, 1.0) for _ in range(5)] == [b.get_float(0.0, 1.0) for _ in range(5)]


def test_get_int_is_inclusive_and_in_range():
    rng = Random(7)
    values = {rng.get_int(-2, 2) for _ in range(500)}
    assert values == {-2, -1, 0, 1, 2}


def test_get_int_single_value():
    rng = Random(3)
    assert rng.get_int(5, 5) == 5


def test_get_float_in_half_open_range():
    rng = Random(11)
    for _ in range(500):
        v = rng.get_float(-1.5, 2.5)
        assert -1.5 <= v < 2.5


def test_get_float_degenerate_range():
    assert Random(0).get_float(3.0, 3.0) == 3.0


def test_empty_ranges_raise():
    rng = Random(0)
    with pytest.raises(ValueError):
        rng.get_int(3, 2)
    with pytest.raises(ValueError):
        rng.get_float(1.0, 0.0)


def test_instance_is_shared():
    first = Random.instance()
    second = Random.instance()
    assert first is second
    value = first.get_int(4, 4)
    assert value == 4


def test_concurrent_use_stays_in_range():
    rng = Random(99)
    results = []
    lock = threading.Lock()

    def worker():
        local = [rng.get_int(0, 9) for _ in range(200)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 800
    assert set(results) <= set(range(10))
    final = rng.get_int(0, 9)
    assert 0 <= final <= 9