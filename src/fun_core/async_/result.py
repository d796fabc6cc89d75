"""AsyncResult: chain Result combinators over a pending computation.

AsyncResult wraps an Awaitable[Result[S, F]] and offers the Result
combinators, each returning a new AsyncResult. Nothing runs until the
chain is awaited, and every step waits for the previous one to finish.

Example:
    ```python
    async def fetch_user(user_id: int) -> Result[User, str]:
        ...

    name = await (
        AsyncResult(fetch_user(1))
        .tee_bind(validate_user)
        .map(lambda user: user.name)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import TYPE_CHECKING, Any

from fun_core._internal.awaitables import resolve
from fun_core.errors import require
from fun_core.result import ExceptionTypes, Result

if TYPE_CHECKING:
    from fun_core.maybe import Maybe

__all__ = ['AsyncResult']


class AsyncResult[S, F]:
    """Awaitable wrapper for composing async Result operations.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Awaiting the same AsyncResult twice raises RuntimeError. Use
        from_success/from_failure/from_result for reusable values, or wrap
        a Task/Future for multi-await scenarios.

    Attributes:
        _awaitable: The underlying awaitable that produces a Result.
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[S, F]]) -> None:
        """Create an AsyncResult from an awaitable.

        Args:
            awaitable: An awaitable that produces a Result[S, F].
        """
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[S, F]]:
        return self._awaitable.__await__()

    @classmethod
    def from_success(cls, value: S) -> AsyncResult[S, F]:
        """Create an AsyncResult producing Result.succeed(value)."""
        return cls.from_result(Result.succeed(value))

    @classmethod
    def from_failure(cls, error: F) -> AsyncResult[S, F]:
        """Create an AsyncResult producing Result.fail(error)."""
        return cls.from_result(Result.fail(error))

    @classmethod
    def from_result(cls, result: Result[S, F]) -> AsyncResult[S, F]:
        """Create an AsyncResult from a synchronous Result."""

        async def _result() -> Result[S, F]:
            return result

        return cls(_result())

    def map[R](self, mapper: Callable[[S], R | Awaitable[R]]) -> AsyncResult[R, F]:
        """Transform the success payload with a sync or async mapper.

        Example:
            ```python
            async def example():
                result = await AsyncResult.from_success(5).map(lambda x: x * 2)
                assert result == Result.succeed(10)
            ```
        """

        async def _mapped() -> Result[R, F]:
            result = await self._awaitable
            return await result.map_success_async(mapper)

        return AsyncResult(_mapped())

    def map_failure[G](self, mapper: Callable[[F], G | Awaitable[G]]) -> AsyncResult[S, G]:
        """Transform the failure payload with a sync or async mapper."""

        async def _mapped() -> Result[S, G]:
            result = await self._awaitable
            return await result.map_failure_async(mapper)

        return AsyncResult(_mapped())

    def bind[R, G](
        self,
        binder: Callable[[S], Result[R, G] | Awaitable[Result[R, G]]],
        map_failure: Callable[[F], G | Awaitable[G]] | None = None,
    ) -> AsyncResult[R, G]:
        """Chain a sync or async Result-returning function.

        The binder never runs on a failure; the failure passes through,
        remapped by map_failure when one is given.
        """

        async def _bound() -> Result[R, G]:
            result = await self._awaitable
            return await result.bind_async(binder, map_failure)

        return AsyncResult(_bound())

    def bind_try[R](
        self,
        f: Callable[[S], R | Awaitable[R]],
        catch: ExceptionTypes,
        fail_with: Callable[[BaseException], F | Awaitable[F]],
    ) -> AsyncResult[R, F]:
        """Bind through try_async; f may be sync or async."""
        require(f, 'f')

        async def _bound() -> Result[R, F]:
            result = await self._awaitable
            return await result.bind_try_async(lambda value: resolve(f(value)), catch, fail_with)

        return AsyncResult(_bound())

    def bind_try_nullable[R](
        self,
        f: Callable[[S], R | None | Awaitable[R | None]],
        catch: ExceptionTypes,
        fail_with: Callable[[BaseException], F | Awaitable[F]],
        if_null: Callable[[], F | Awaitable[F]],
    ) -> AsyncResult[R, F]:
        """Bind through try_nullable_async; f may be sync or async."""
        require(f, 'f')

        async def _bound() -> Result[R, F]:
            result = await self._awaitable
            return await result.bind_try_nullable_async(
                lambda value: resolve(f(value)), catch, fail_with, if_null
            )

        return AsyncResult(_bound())

    def tee_bind[R](
        self, validator: Callable[[S], Result[R, F] | Awaitable[Result[R, F]]]
    ) -> AsyncResult[S, F]:
        """Validate the success payload without transforming it."""

        async def _checked() -> Result[S, F]:
            result = await self._awaitable
            return await result.tee_bind_async(validator)

        return AsyncResult(_checked())

    def select_many[U, R](
        self,
        binder: Callable[[S], Result[U, F]],
        select: Callable[[S, U], R],
    ) -> AsyncResult[R, F]:
        """Bind then combine both payloads."""

        async def _selected() -> Result[R, F]:
            result = await self._awaitable
            return result.select_many(binder, select)

        return AsyncResult(_selected())

    async def match[R](
        self,
        success: Callable[[S], R | Awaitable[R]],
        failure: Callable[[F], R | Awaitable[R]],
    ) -> R:
        """Await the Result and dispatch to a sync or async handler."""
        result = await self._awaitable
        return await result.match_async(success, failure)

    async def to_maybe(self) -> Maybe[S]:
        """Await the Result and convert it to a Maybe."""
        result = await self._awaitable
        return result.to_maybe()
