"""Pipeline helpers over plain values and awaitables.

The async variants accept a value or an awaitable, and callbacks that are
either sync or async. Each step is awaited before the next one starts.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

from fun_core._internal.awaitables import resolve

__all__ = [
    'if_',
    'if_async',
    'lift_async',
    'pipe',
    'pipe_async',
    'tee',
    'tee_async',
    'tee_ignore',
]


@overload
def pipe[T](value: T, /) -> T: ...
@overload
def pipe[T, T1](value: T, fn1: Callable[[T], T1], /) -> T1: ...
@overload
def pipe[T, T1, T2](value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> T2: ...
@overload
def pipe[T, T1, T2, T3](
    value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /
) -> T3: ...
@overload
def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any: ...


def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any:
    """Thread a value through functions left to right.

    Example:
        ```python
        assert pipe(5, lambda x: x + 1, lambda x: x * 2) == 12
        ```
    """
    for fn in fns:
        value = fn(value)
    return value


async def pipe_async(value: Any, /, *fns: Callable[[Any], Any]) -> Any:
    """Thread a value or awaitable through sync or async functions.

    Example:
        ```python
        async def fetch(x: int) -> int:
            return x + 1

        assert await pipe_async(5, fetch, lambda x: x * 2) == 12
        ```
    """
    value = await resolve(value)
    for fn in fns:
        value = await resolve(fn(value))
    return value


def if_[T, R](
    value: T,
    predicate: Callable[[T], bool],
    then: Callable[[T], R],
    else_: Callable[[T], R],
) -> R:
    """Branch on predicate(value), calling exactly one of then/else_."""
    if predicate(value):
        return then(value)
    return else_(value)


async def if_async[T, R](
    value: T | Awaitable[T],
    predicate: Callable[[T], bool | Awaitable[bool]],
    then: Callable[[T], R | Awaitable[R]],
    else_: Callable[[T], R | Awaitable[R]],
) -> R:
    """Async version of if_; any of the arguments may be async."""
    resolved = await resolve(value)
    if await resolve(predicate(resolved)):
        return await resolve(then(resolved))
    return await resolve(else_(resolved))


def tee[T](value: T, action: Callable[[T], Any]) -> T:
    """Run action for its side effect and return value unchanged.

    Whatever action returns is discarded, so value-returning functions
    work too; `tee_ignore` is the same function under that name.
    """
    action(value)
    return value


async def tee_async[T](
    value: T | Awaitable[T],
    action: Callable[[T], Any],
) -> T:
    """Await value, then run a sync or async side effect, then return value.

    The side effect never starts before value has completed.
    """
    resolved = await resolve(value)
    await resolve(action(resolved))
    return resolved


tee_ignore = tee


async def lift_async[T](value: T) -> T:
    """Return value from an already completed coroutine."""
    return value
