"""Tests for memoize, memoize_async and the cells behind them."""

import asyncio
import threading
import time

import pytest

from fun_core import FunConfig, init, memoize, memoize_async
from fun_core._internal import KeyedOnceCache, Lazy, OnceCell


class TestOnceCell:
    """Tests for OnceCell and Lazy."""

    def test_once_cell_initializes_once(self):
        """The first initializer wins."""
        cell: OnceCell[int] = OnceCell()
        assert not cell.is_set()
        assert cell.get_or_init(lambda: 1) == 1
        assert cell.get_or_init(lambda: 2) == 1
        assert cell.is_set()

    def test_failed_init_leaves_cell_unset(self):
        """An initializer that raises can be retried."""

        def fail() -> int:
            raise RuntimeError('boom')

        cell: OnceCell[int] = OnceCell()
        with pytest.raises(RuntimeError):
            cell.get_or_init(fail)
        assert not cell.is_set()
        assert cell.get_or_init(lambda: 3) == 3

    def test_lazy(self, calls):
        """Lazy calls its initializer on first access only."""
        lazy = Lazy(lambda: calls.append(1) or 42)
        assert not lazy.is_initialized()
        assert lazy.get() == 42
        assert lazy.get() == 42
        assert calls == [1]


class TestKeyedOnceCache:
    """Tests for the bounded keyed cache."""

    def test_evicts_least_recently_used(self):
        """The oldest untouched key is evicted first."""
        cache: KeyedOnceCache[str, str] = KeyedOnceCache(maxsize=2)
        cache.get_or_compute('a', str.upper)
        cache.get_or_compute('b', str.upper)
        cache.get_or_compute('a', str.upper)
        cache.get_or_compute('c', str.upper)
        assert 'a' in cache
        assert 'b' not in cache
        assert 'c' in cache
        assert len(cache) == 2

    def test_rejects_non_positive_maxsize(self):
        """maxsize must be positive or None."""
        with pytest.raises(ValueError):
            KeyedOnceCache(maxsize=0)

    def test_clear(self):
        """clear drops every key."""
        cache: KeyedOnceCache[int, int] = KeyedOnceCache()
        cache.get_or_compute(1, lambda k: k)
        cache.clear()
        assert len(cache) == 0


class TestMemoize:
    """Tests for the memoize decorator."""

    def test_nullary_evaluated_once(self, calls):
        """A zero-argument function runs once."""

        @memoize
        def load() -> int:
            calls.append('load')
            return 7

        assert load() == 7
        assert load() == 7
        assert calls == ['load']

    def test_unary_caches_per_key(self, calls):
        """A one-argument function runs once per key."""

        @memoize
        def square(x: int) -> int:
            calls.append(x)
            return x * x

        assert [square(2), square(3), square(2)] == [4, 9, 4]
        assert calls == [2, 3]

    def test_maxsize_bounds_cache(self, calls):
        """Keys beyond maxsize are evicted and recomputed."""

        @memoize(maxsize=1)
        def echo(x: str) -> str:
            calls.append(x)
            return x

        echo('a')
        echo('b')
        echo('a')
        assert calls == ['a', 'b', 'a']
        assert len(echo.cache) == 1

    def test_default_maxsize_from_config(self, fresh_config):
        """Without an explicit maxsize the configured one is used."""
        init(FunConfig(memoize_maxsize=3))

        @memoize
        def ident(x: int) -> int:
            return x

        assert ident.cache.maxsize == 3

    def test_exceptions_not_cached(self, calls):
        """A raising call is retried next time."""

        @memoize
        def flaky(x: int) -> int:
            calls.append(x)
            if len(calls) == 1:
                raise RuntimeError('first call fails')
            return x

        with pytest.raises(RuntimeError):
            flaky(1)
        assert flaky(1) == 1
        assert calls == [1, 1]

    def test_rejects_multiple_arguments(self):
        """Functions of two or more required arguments are rejected."""
        with pytest.raises(TypeError):
            memoize(lambda a, b: a + b)

    def test_preserves_metadata(self):
        """The wrapper keeps the function's name."""

        @memoize
        def named(x: int) -> int:
            return x

        assert named.__name__ == 'named'

    def test_concurrent_callers_compute_once(self):
        """Concurrent misses on one key evaluate the function once."""
        counter = {'n': 0}
        lock = threading.Lock()

        @memoize
        def slow(x: int) -> int:
            with lock:
                counter['n'] += 1
            time.sleep(0.05)
            return x * 2

        barrier = threading.Barrier(8)
        results: list[int] = []

        def worker() -> None:
            barrier.wait()
            results.append(slow(21))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == [42] * 8
        assert counter['n'] == 1


class TestMemoizeAsync:
    """Tests for memoize_async."""

    @pytest.mark.asyncio
    async def test_caches_results(self, calls):
        """Repeated awaits of one key call the function once."""

        @memoize_async
        async def fetch(x: int) -> int:
            calls.append(x)
            await asyncio.sleep(0)
            return x + 1

        assert await fetch(1) == 2
        assert await fetch(1) == 2
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_concurrent_awaits_share_call(self, calls):
        """Concurrent awaits of an uncached key share one call."""

        @memoize_async(maxsize=16)
        async def fetch(x: int) -> int:
            calls.append(x)
            await asyncio.sleep(0.01)
            return x

        assert await asyncio.gather(fetch(5), fetch(5), fetch(5)) == [5, 5, 5]
        assert calls == [5]
