import pytest

from flmeters.lru_cache import LRUCache, make_hash_key


def test_get_missing_returns_none():
    cache = LRUCache(2)
    assert cache.get("absent") is None
    assert len(cache) == 0


def test_put_returns_stored_value():
    cache = LRUCache(2)
    value = object()
    assert cache.put("k", value) is value
    assert cache.get("k") is value


def test_evicts_least_recently_put():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    assert cache.get("a") is None
    assert cache.get("b") == 2
    assert cache.get("c") == 3
    assert len(cache) == 2


def test_get_refreshes_recency():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    assert cache.get("a") == 1
    cache.put("c", 3)
    assert "b" not in cache
    assert cache.get("a") == 1
    assert cache.get("c") == 3


def test_put_existing_key_replaces_without_eviction():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 10)
    assert len(cache) == 2
    assert cache.get("a") == 10
    assert cache.get("b") == 2


def test_put_existing_key_refreshes_recency():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 11)
    cache.put("c", 3)
    assert "b" not in cache
    assert "a" in cache and "c" in cache


@pytest.mark.parametrize("capacity", [1, 3, 10])
def test_size_never_exceeds_capacity(capacity):
    cache = LRUCache(capacity)
    for i in range(25):
        cache.put(i, i)
        assert len(cache) <= capacity
    assert len(cache) == capacity
    assert cache.get(24) == 24


def test_make_hash_key_is_stable_for_same_object():
    buf = bytearray(8)
    expected = f"bytearray {id(buf)} 8 allreduceCpu"
    assert make_hash_key(buf, 8, "allreduceCpu") == expected
    assert make_hash_key(buf, 8, "allreduceCpu") == expected


def test_make_hash_key_distinguishes_objects_and_args():
    first, second = bytearray(8), bytearray(8)
    assert make_hash_key(first, 8) != make_hash_key(second, 8)
    assert make_hash_key(first, 8) != make_hash_key(first, 9)


def test_make_hash_key_layout():
    buf = bytearray(4)
    key = make_hash_key(buf, 4, "allreduceCpu")
    assert key.startswith("bytearray ")
    assert key.endswith(" 4 allreduceCpu")
    assert key.split(" ")[1] == str(id(buf))


def test_make_hash_key_works_as_cache_key():
    cache = LRUCache(10)
    buf = bytearray(4)
    cache.put(make_hash_key(buf, 4, "allreduceCpu"), "algorithm")
    assert cache.get(make_hash_key(buf, 4, "allreduceCpu")) == "algorithm"
    assert cache.get(make_hash_key(buf, 5, "allreduceCpu")) is None