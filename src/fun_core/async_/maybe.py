"""AsyncMaybe: chain Maybe combinators over a pending computation."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import TYPE_CHECKING, Any

from fun_core.maybe import Maybe

if TYPE_CHECKING:
    from fun_core.result import Result

__all__ = ['AsyncMaybe']


class AsyncMaybe[T]:
    """Awaitable wrapper for composing async Maybe operations.

    Every combinator returns a new AsyncMaybe and accepts sync or async
    callbacks. Like AsyncResult, it is single-shot around a coroutine.

    Example:
        ```python
        async def find_user(user_id: int) -> Maybe[User]:
            ...

        email = await AsyncMaybe(find_user(1)).map(lambda user: user.email)
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Maybe[T]]) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Maybe[T]]:
        return self._awaitable.__await__()

    @classmethod
    def from_value(cls, value: T | None) -> AsyncMaybe[T]:
        """Create an AsyncMaybe producing Maybe(value)."""
        return cls.from_maybe(Maybe(value))

    @classmethod
    def empty(cls) -> AsyncMaybe[T]:
        """Create an AsyncMaybe producing an empty Maybe."""
        return cls.from_maybe(Maybe())

    @classmethod
    def from_maybe(cls, maybe: Maybe[T]) -> AsyncMaybe[T]:
        """Create an AsyncMaybe from a synchronous Maybe."""

        async def _maybe() -> Maybe[T]:
            return maybe

        return cls(_maybe())

    @classmethod
    def from_awaitable(cls, value: Awaitable[T | None]) -> AsyncMaybe[T]:
        """Wrap an awaitable bare value; None gives the empty Maybe."""

        async def _wrapped() -> Maybe[T]:
            return Maybe(await value)

        return cls(_wrapped())

    def map[R](self, mapper: Callable[[T], R | Awaitable[R]]) -> AsyncMaybe[R]:
        """Transform the payload with a sync or async mapper."""

        async def _mapped() -> Maybe[R]:
            maybe = await self._awaitable
            return await maybe.map_async(mapper)

        return AsyncMaybe(_mapped())

    def bind[R](
        self,
        binder: Callable[[T], Maybe[R] | Awaitable[Maybe[R]]],
        none: Callable[[], Maybe[R] | Awaitable[Maybe[R]]] | None = None,
    ) -> AsyncMaybe[R]:
        """Chain a sync or async Maybe-returning function.

        When the Maybe is empty and a `none` fallback is given, its Maybe
        is used instead.
        """

        async def _bound() -> Maybe[R]:
            maybe = await self._awaitable
            return await maybe.bind_async(binder, none)

        return AsyncMaybe(_bound())

    def tee_map(self, action: Callable[[T], Any]) -> AsyncMaybe[T]:
        """Run a sync or async action on the payload when present."""

        async def _teed() -> Maybe[T]:
            maybe = await self._awaitable
            return await maybe.tee_map_async(action)

        return AsyncMaybe(_teed())

    async def match[R](
        self,
        some: Callable[[T], R | Awaitable[R]],
        none: Callable[[], R | Awaitable[R]],
    ) -> R:
        """Await the Maybe and dispatch to a sync or async handler."""
        maybe = await self._awaitable
        return await maybe.match_async(some, none)

    async def to_result[F](self, if_empty: Callable[[], F]) -> Result[T, F]:
        """Await the Maybe and convert it to a Result."""
        maybe = await self._awaitable
        return maybe.to_result(if_empty)
