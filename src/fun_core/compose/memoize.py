"""Memoization for zero- and one-argument functions.

Example:
    ```python
    @memoize
    def load_settings() -> dict:
        return read_settings_file()

    @memoize(maxsize=1024)
    def slugify(title: str) -> str:
        return expensive_slug(title)

    @memoize_async(maxsize=128, ttl=60.0)
    async def fetch_user(user_id: int) -> User:
        return await client.get_user(user_id)
    ```
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable, Hashable
from typing import Any, overload

from async_lru import alru_cache

from fun_core._config import get_config
from fun_core._internal.sync import KeyedOnceCache, Lazy
from fun_core._logging import get_logger

__all__ = ['memoize', 'memoize_async']

logger = get_logger(__name__)

_UNSET: Any = object()


def _memoize_nullary[T](f: Callable[[], T]) -> Callable[[], T]:
    lazy = Lazy(f)

    @functools.wraps(f)
    def _memoized() -> T:
        if not lazy.is_initialized():
            logger.debug('memoize.miss', function=f.__qualname__)
        return lazy.get()

    _memoized.is_initialized = lazy.is_initialized  # type: ignore[attr-defined]
    return _memoized


def _memoize_unary[K: Hashable, T](f: Callable[[K], T], maxsize: int | None) -> Callable[[K], T]:
    cache: KeyedOnceCache[K, T] = KeyedOnceCache(maxsize)

    def _compute(key: K) -> T:
        logger.debug('memoize.miss', function=f.__qualname__, key=repr(key))
        return f(key)

    @functools.wraps(f)
    def _memoized(key: K) -> T:
        return cache.get_or_compute(key, _compute)

    _memoized.cache = cache  # type: ignore[attr-defined]
    _memoized.cache_clear = cache.clear  # type: ignore[attr-defined]
    return _memoized


@overload
def memoize[T](f: Callable[[], T], /) -> Callable[[], T]: ...
@overload
def memoize[K, T](f: Callable[[K], T], /) -> Callable[[K], T]: ...
@overload
def memoize[K, T](
    *, maxsize: int | None = ...
) -> Callable[[Callable[[K], T]], Callable[[K], T]]: ...


def memoize(f: Callable[..., Any] | None = None, /, *, maxsize: int | None = _UNSET) -> Any:
    """Cache the results of a zero- or one-argument function.

    A zero-argument function is evaluated once, on first call. A
    one-argument function gets a bounded LRU cache keyed on its argument;
    each key is computed at most once while cached, even when many threads
    or tasks ask for it at the same time. Exceptions are not cached.

    Can be used with or without arguments:
        @memoize
        def load(): ...

        @memoize(maxsize=None)
        def lookup(key): ...

    Args:
        f: The function to memoize (when used without parentheses).
        maxsize: Maximum cached keys for one-argument functions. None means
            unbounded. Defaults to the configured `memoize_maxsize`.

    Returns:
        The memoized function, or a decorator when f is omitted.

    Raises:
        TypeError: If f takes more than one required argument.
    """

    def decorate(fn: Callable[..., Any]) -> Callable[..., Any]:
        params = [
            p
            for p in inspect.signature(fn).parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
        ]
        if not params:
            return _memoize_nullary(fn)
        if len(params) == 1:
            size = get_config().memoize_maxsize if maxsize is _UNSET else maxsize
            return _memoize_unary(fn, size)
        raise TypeError(f'memoize supports functions of at most one argument, got {len(params)}')

    if f is not None:
        return decorate(f)
    return decorate


@overload
def memoize_async[**P, T](fn: Callable[P, Awaitable[T]], /) -> Callable[P, Awaitable[T]]: ...
@overload
def memoize_async[**P, T](
    *,
    maxsize: int | None = 128,
    ttl: float | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]: ...


def memoize_async(
    fn: Callable[..., Awaitable[Any]] | None = None,
    /,
    *,
    maxsize: int | None = 128,
    ttl: float | None = None,
) -> Any:
    """Cache the results of an async function with async-lru.

    Concurrent awaits of the same uncached key share one call.

    Args:
        fn: The async function to memoize (when used without parentheses).
        maxsize: Maximum cache size. None means unlimited.
        ttl: Seconds before a cached entry expires. None means never.

    Returns:
        The cached async function, or a decorator when fn is omitted.
    """

    def decorate(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        return alru_cache(maxsize=maxsize, ttl=ttl)(func)

    if fn is not None:
        return decorate(fn)
    return decorate
