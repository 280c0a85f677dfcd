from fairylink.components.position import Position as P
from fairylink.pathing.path_cache import PathCache, pair_key


def test_pair_key_is_order_independent():
    assert pair_key(P(2, 1), P(1, 5)) == pair_key(P(1, 5), P(2, 1))


def test_get_orients_path_to_requested_start():
    cache = PathCache()
    path = [P(1, 1), P(1, 2), P(2, 2)]
    cache.put(P(1, 1), P(2, 2), path, generation=0)
    assert cache.get(P(1, 1), P(2, 2), generation=0) == path
    assert cache.get(P(2, 2), P(1, 1), generation=0) == list(reversed(path))
    assert cache.hits == 2


def test_returned_paths_are_copies():
    cache = PathCache()
    cache.put(P(1, 1), P(1, 2), [P(1, 1), P(1, 2)], generation=0)
    cache.get(P(1, 1), P(1, 2), generation=0).append(P(9, 9))
    assert cache.get(P(1, 1), P(1, 2), generation=0) == [P(1, 1), P(1, 2)]


def test_generation_change_empties_cache():
    cache = PathCache()
    cache.put(P(1, 1), P(1, 2), [P(1, 1), P(1, 2)], generation=3)
    assert len(cache) == 1
    assert cache.get(P(1, 1), P(1, 2), generation=4) is None
    assert len(cache) == 0
    assert cache.misses == 1


def test_cache_is_bounded_and_evicts_least_recently_used():
    cache = PathCache(max_entries=2)
    a = [P(1, 1), P(1, 2)]
    b = [P(2, 1), P(2, 2)]
    c = [P(3, 1), P(3, 2)]
    cache.put(a[0], a[-1], a, generation=0)
    cache.put(b[0], b[-1], b, generation=0)
    cache.get(a[0], a[-1], generation=0)
    cache.put(c[0], c[-1], c, generation=0)
    assert len(cache) == 2
    assert cache.get(b[0], b[-1], generation=0) is None
    assert cache.get(a[0], a[-1], generation=0) == a

