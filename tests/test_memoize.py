from __future__ import annotations

import threading

import pytest
from pydantic import BaseModel

from fnkit import Env, SerializationError, Trace, memoize
from fnkit.caching import argument_key

from fakes import Recorder


class Point(BaseModel):
    x: int
    y: int


def test_same_arguments_invoke_once() -> None:
    func = Recorder(result=3)
    cached = memoize(func)

    assert cached(1, 2) == 3
    assert cached(1, 2) == 3
    assert func.args == [(1, 2)]


def test_argument_order_matters() -> None:
    func = Recorder()
    cached = memoize(func)

    cached(1, 2)
    cached(2, 1)

    assert func.args == [(1, 2), (2, 1)]


def test_argument_type_matters() -> None:
    func = Recorder()
    cached = memoize(func)

    cached(1)
    cached("1")
    cached(1.0)
    cached(True)

    assert len(func.calls) == 4


def test_values_with_same_serialization_share_a_key() -> None:
    func = Recorder()
    cached = memoize(func)

    cached((1, 2))
    cached([1, 2])

    assert len(func.calls) == 1


def test_keyword_order_does_not_matter() -> None:
    func = Recorder()
    cached = memoize(func)

    cached(a=1, b=2)
    cached(b=2, a=1)
    cached(1, b=2)

    assert func.calls == [((), {"a": 1, "b": 2}), ((1,), {"b": 2})]


def test_cyclic_argument_raises_serialization_error() -> None:
    func = Recorder()
    cached = memoize(func)
    cyclic: dict[str, object] = {}
    cyclic["self"] = cyclic

    with pytest.raises(SerializationError) as excinfo:
        cached(cyclic)

    assert func.calls == []
    assert excinfo.value.raw_value == ((cyclic,), {})


def test_unserializable_argument_raises_serialization_error() -> None:
    cached = memoize(Recorder())

    with pytest.raises(SerializationError):
        cached(object())


def test_errors_are_not_cached() -> None:
    attempts = 0

    def flaky(n: int) -> int:
        nonlocal attempts
        attempts += 1
        if attempts == 1:
            raise ValueError("first")
        return n

    cached = memoize(flaky)

    with pytest.raises(ValueError):
        cached(5)
    assert cached(5) == 5
    assert cached(5) == 5
    assert attempts == 2


def test_pydantic_models_are_keyed_by_value() -> None:
    func = Recorder()
    cached = memoize(func)

    cached(Point(x=1, y=2))
    cached(Point(x=1, y=2))
    cached(Point(x=2, y=1))

    assert len(func.calls) == 2


def test_custom_key_function() -> None:
    func = Recorder()
    cached = memoize(func, key=lambda user, **_: user["id"])

    cached({"id": 1, "name": "a"})
    cached({"id": 1, "name": "b"})
    cached({"id": 2, "name": "a"})

    assert len(func.calls) == 2
    assert set(cached.cache) == {1, 2}


def test_cache_clear() -> None:
    func = Recorder()
    cached = memoize(func)

    cached(1)
    cached.cache_clear()
    cached(1)

    assert len(func.calls) == 2
    assert len(cached.cache) == 1


def test_recursive_calls_nest_in_trace() -> None:
    trace = Trace()

    @memoize
    def fib(n: int) -> int:
        return n if n < 2 else fib(n - 1) + fib(n - 2)

    fib.env = Env(trace=trace)

    assert fib(10) == 55
    misses = trace.find_all("memoize.miss")
    hits = trace.find_all("memoize.hit")
    assert len(misses) == 11
    assert hits
    # fib(10) is the root; every other miss hangs below it
    assert misses[0].parent_id is None
    assert all(ev.parent_id is not None for ev in misses[1:])


def test_argument_key_is_stable_text() -> None:
    assert argument_key((1, "a"), {"z": 1, "b": [None]}) == argument_key((1, "a"), {"b": [None], "z": 1})
    assert argument_key((1,), {}) != argument_key(("1",), {})


def test_bytes_are_keyed_by_content() -> None:
    func = Recorder()
    cached = memoize(func)

    cached(b"\xff")
    cached(b"\xff")
    cached(b"\x00")

    assert func.args == [(b"\xff",), (b"\x00",)]


def test_bytes_and_text_do_not_share_a_key() -> None:
    func = Recorder()
    cached = memoize(func)

    cached(b"a")
    cached("a")

    assert func.args == [(b"a",), ("a",)]


def test_concurrent_callers_compute_each_key_once() -> None:
    start = threading.Barrier(8)
    computed: list[int] = []

    def square(n: int) -> int:
        computed.append(n)
        return n * n

    cached = memoize(square)
    results: list[int] = []

    def worker(i: int) -> None:
        start.wait()
        results.append(cached(i % 2))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(computed) == [0, 1]
    assert sorted(results) == [0, 0, 0, 0, 1, 1, 1, 1]
