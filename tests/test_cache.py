# tests/test_cache.py

import threading

from nongli.cache import MonthCache


def test_get_or_compute_memoizes():
    cache = MonthCache()
    calls = []

    def compute():
        calls.append(1)
        return (30, 0, 2460000.0)

    assert cache.get_or_compute((2024, 1), compute) == (30, 0, 2460000.0)
    assert cache.get_or_compute((2024, 1), compute) == (30, 0, 2460000.0)
    assert len(calls) == 1
    assert (2024, 1) in cache
    assert len(cache) == 1


def test_clear():
    cache = MonthCache()
    cache.put((2023, -2), (29, 2, 2460026.0))
    assert cache.get((2023, -2)) == (29, 2, 2460026.0)
    cache.clear()
    assert cache.get((2023, -2)) is None
    assert len(cache) == 0


def test_concurrent_misses_agree():
    cache = MonthCache()
    results = []

    def worker():
        results.append(cache.get_or_compute((2030, 5), lambda: (29, 4, 2462650.0)))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert set(results) == {(29, 4, 2462650.0)}
    assert len(cache) == 1


def test_entry_computed_across_a_clear_is_not_stored():
    cache = MonthCache()

    def compute():
        # a kernel switch lands while this month is being built
        cache.clear()
        return (29, 4, 2462650.0)

    assert cache.get_or_compute((2030, 5), compute) == (29, 4, 2462650.0)
    assert (2030, 5) not in cache
    assert cache.get_or_compute((2030, 5), lambda: (30, 4, 2462651.0)) == (30, 4, 2462651.0)
    assert (2030, 5) in cache
