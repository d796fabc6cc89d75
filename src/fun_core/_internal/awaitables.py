"""Helpers for code paths that accept either values or awaitables."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable

__all__ = ['resolve']


async def resolve[T](value: T | Awaitable[T]) -> T:
    """Await value if it is awaitable, otherwise return it unchanged.

    Lets a single async combinator accept sync and async callbacks alike.
    """
    if inspect.isawaitable(value):
        return await value
    return value  # type: ignore[return-value]
