"""Result: a completed computation that either succeeded or failed.

A Result holds exactly one of a success payload or a failure payload;
neither may be None. Reading the inactive branch raises ResultAccessError.

Exceptions are only turned into failures by the `try_` family (and the
`bind_try` family built on it), and only for the exception classes the
caller names. Everything else, including exceptions raised by callbacks
passed to `map` or `bind`, propagates unchanged.

Example:
    ```python
    parsed = Result.try_(lambda: int(raw), ValueError, str)
    message = parsed.map(lambda n: n * 2).match(
        success=lambda n: f'doubled: {n}',
        failure=lambda error: f'bad input: {error}',
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fun_core._internal.awaitables import resolve
from fun_core._logging import get_logger
from fun_core.errors import ResultAccessError, require
from fun_core.unit import or_unit

if TYPE_CHECKING:
    from fun_core.maybe import Maybe

__all__ = ['ExceptionTypes', 'Result']

logger = get_logger(__name__)

type ExceptionTypes = type[BaseException] | tuple[type[BaseException], ...]

_SUCCESS_TAG = 'success'
_FAILURE_TAG = 'failure'


@dataclass(slots=True, frozen=True, repr=False)
class Result[S, F]:
    """Exactly one of a success payload S or a failure payload F.

    Results are immutable and compare by branch and payload.

    Examples:
        >>> Result.succeed(5).map(lambda x: x + 1).success
        6
        >>> Result.fail('boom').map(lambda x: x + 1).failure
        'boom'
        >>> Result.try_(lambda: int('abc'), ValueError, lambda e: 'nan').failure
        'nan'
    """

    _is_successful: bool
    _success: S | None
    _failure: F | None

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def succeed(cls, value: S) -> Result[S, F]:
        """Create a successful Result.

        Raises:
            ArgumentNoneError: If value is None.
        """
        return cls(True, require(value, 'success'), None)

    @classmethod
    def fail(cls, error: F) -> Result[S, F]:
        """Create a failed Result.

        Raises:
            ArgumentNoneError: If error is None.
        """
        return cls(False, None, require(error, 'failure'))

    @classmethod
    def try_(
        cls,
        f: Callable[[], S],
        catch: ExceptionTypes,
        fail_with: Callable[[BaseException], F],
    ) -> Result[S, F]:
        """Run f, turning exceptions of the `catch` family into failures.

        A function that returns None is treated as an action: the success
        payload becomes `unit`. Use try_nullable when None should be a
        failure instead.

        Args:
            f: Zero-argument computation.
            catch: Exception class, or tuple of classes, to convert.
            fail_with: Builds the failure payload from the caught exception.

        Returns:
            Success with f's result, or failure built by fail_with.

        Raises:
            ArgumentNoneError: If f, catch or fail_with is None.
            BaseException: Any exception outside the `catch` family.

        Example:
            ```python
            assert Result.try_(lambda: int('42'), ValueError, str).success == 42
            ```
        """
        require(f, 'f')
        require(catch, 'catch')
        require(fail_with, 'fail_with')
        try:
            value = f()
        except catch as exc:
            logger.debug('result.try.caught', exception_type=type(exc).__name__)
            return cls.fail(fail_with(exc))
        return cls.succeed(or_unit(value))  # type: ignore[arg-type]

    @classmethod
    def try_nullable(
        cls,
        f: Callable[[], S | None],
        catch: ExceptionTypes,
        fail_with: Callable[[BaseException], F],
        if_null: Callable[[], F],
    ) -> Result[S, F]:
        """Run f, turning exceptions and a None result into failures.

        Args:
            f: Zero-argument computation that may return None.
            catch: Exception class, or tuple of classes, to convert.
            fail_with: Builds the failure payload from the caught exception.
            if_null: Builds the failure payload when f returns None.

        Returns:
            Success with f's result, or a failure.
        """
        require(f, 'f')
        require(catch, 'catch')
        require(fail_with, 'fail_with')
        require(if_null, 'if_null')
        try:
            value = f()
        except catch as exc:
            logger.debug('result.try.caught', exception_type=type(exc).__name__)
            return cls.fail(fail_with(exc))
        if value is None:
            logger.debug('result.try.null')
            return cls.fail(if_null())
        return cls.succeed(value)

    @classmethod
    async def try_async(
        cls,
        f: Callable[[], Awaitable[S]],
        catch: ExceptionTypes,
        fail_with: Callable[[BaseException], F | Awaitable[F]],
    ) -> Result[S, F]:
        """Async version of try_.

        An exception raised while calling f or while awaiting its result is
        caught the same way. fail_with may be sync or async.
        """
        require(f, 'f')
        require(catch, 'catch')
        require(fail_with, 'fail_with')
        try:
            value = await f()
        except catch as exc:
            logger.debug('result.try.caught', exception_type=type(exc).__name__)
            return cls.fail(await resolve(fail_with(exc)))
        return cls.succeed(or_unit(value))  # type: ignore[arg-type]

    @classmethod
    async def try_nullable_async(
        cls,
        f: Callable[[], Awaitable[S | None]],
        catch: ExceptionTypes,
        fail_with: Callable[[BaseException], F | Awaitable[F]],
        if_null: Callable[[], F | Awaitable[F]],
    ) -> Result[S, F]:
        """Async version of try_nullable; the handlers may be sync or async."""
        require(f, 'f')
        require(catch, 'catch')
        require(fail_with, 'fail_with')
        require(if_null, 'if_null')
        try:
            value = await f()
        except catch as exc:
            logger.debug('result.try.caught', exception_type=type(exc).__name__)
            return cls.fail(await resolve(fail_with(exc)))
        if value is None:
            logger.debug('result.try.null')
            return cls.fail(await resolve(if_null()))
        return cls.succeed(value)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    @property
    def is_successful(self) -> bool:
        """True for a successful Result."""
        return self._is_successful

    @property
    def success(self) -> S:
        """The success payload.

        Raises:
            ResultAccessError: If the Result failed.
        """
        if not self._is_successful:
            raise ResultAccessError(_SUCCESS_TAG)
        return self._success  # type: ignore[return-value]

    @property
    def failure(self) -> F:
        """The failure payload.

        Raises:
            ResultAccessError: If the Result succeeded.
        """
        if self._is_successful:
            raise ResultAccessError(_FAILURE_TAG)
        return self._failure  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self._is_successful:
            return f'Result.succeed({self._success!r})'
        return f'Result.fail({self._failure!r})'

    # -------------------------------------------------------------------------
    # Matching
    # -------------------------------------------------------------------------

    def match[R](self, success: Callable[[S], R], failure: Callable[[F], R]) -> R:
        """Call the handler for the active branch and return its result.

        Raises:
            ArgumentNoneError: If either handler is None.
        """
        require(success, 'success')
        require(failure, 'failure')
        if self._is_successful:
            return or_unit(success(self._success))  # type: ignore[arg-type,return-value]
        return or_unit(failure(self._failure))  # type: ignore[arg-type,return-value]

    async def match_async[R](
        self,
        success: Callable[[S], R | Awaitable[R]],
        failure: Callable[[F], R | Awaitable[R]],
    ) -> R:
        """Async version of match; each handler may be sync or async."""
        require(success, 'success')
        require(failure, 'failure')
        if self._is_successful:
            return or_unit(await resolve(success(self._success)))  # type: ignore[arg-type,return-value]
        return or_unit(await resolve(failure(self._failure)))  # type: ignore[arg-type,return-value]

    # -------------------------------------------------------------------------
    # Transformation
    # -------------------------------------------------------------------------

    def map[R](self, mapper: Callable[[S], R]) -> Result[R, F]:
        """Transform the success payload; a failure passes through."""
        return self.map_success(mapper)

    def map_success[R](self, mapper: Callable[[S], R]) -> Result[R, F]:
        """Transform the success payload; a failure passes through."""
        require(mapper, 'mapper')
        if self._is_successful:
            return Result.succeed(mapper(self._success))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def map_failure[G](self, mapper: Callable[[F], G]) -> Result[S, G]:
        """Transform the failure payload; a success passes through."""
        require(mapper, 'mapper')
        if self._is_successful:
            return self  # type: ignore[return-value]
        return Result.fail(mapper(self._failure))  # type: ignore[arg-type]

    async def map_async[R](self, mapper: Callable[[S], R | Awaitable[R]]) -> Result[R, F]:
        """Transform the success payload with a sync or async mapper."""
        return await self.map_success_async(mapper)

    async def map_success_async[R](
        self, mapper: Callable[[S], R | Awaitable[R]]
    ) -> Result[R, F]:
        """Transform the success payload with a sync or async mapper."""
        require(mapper, 'mapper')
        if self._is_successful:
            return Result.succeed(await resolve(mapper(self._success)))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    async def map_failure_async[G](
        self, mapper: Callable[[F], G | Awaitable[G]]
    ) -> Result[S, G]:
        """Transform the failure payload with a sync or async mapper."""
        require(mapper, 'mapper')
        if self._is_successful:
            return self  # type: ignore[return-value]
        return Result.fail(await resolve(mapper(self._failure)))  # type: ignore[arg-type]

    def bind[R, G](
        self,
        binder: Callable[[S], Result[R, G]],
        map_failure: Callable[[F], G] | None = None,
    ) -> Result[R, G]:
        """Chain a Result-returning function.

        The binder is never called on a failure. The failure passes through
        unchanged, or remapped by map_failure when one is given.

        Args:
            binder: Called with the success payload.
            map_failure: Optional conversion of an existing failure.

        Returns:
            The binder's Result, or the (possibly remapped) failure.
        """
        require(binder, 'binder')
        if self._is_successful:
            return binder(self._success)  # type: ignore[arg-type]
        if map_failure is not None:
            return Result.fail(map_failure(self._failure))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    async def bind_async[R, G](
        self,
        binder: Callable[[S], Result[R, G] | Awaitable[Result[R, G]]],
        map_failure: Callable[[F], G | Awaitable[G]] | None = None,
    ) -> Result[R, G]:
        """Async version of bind; binder and map_failure may be sync or async."""
        require(binder, 'binder')
        if self._is_successful:
            return await resolve(binder(self._success))  # type: ignore[arg-type]
        if map_failure is not None:
            return Result.fail(await resolve(map_failure(self._failure)))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def bind_try[R](
        self,
        f: Callable[[S], R],
        catch: ExceptionTypes,
        fail_with: Callable[[BaseException], F],
    ) -> Result[R, F]:
        """Bind through try_: exceptions from f in `catch` become failures."""
        require(f, 'f')
        require(catch, 'catch')
        require(fail_with, 'fail_with')
        return self.bind(lambda value: Result.try_(lambda: f(value), catch, fail_with))

    def bind_try_nullable[R](
        self,
        f: Callable[[S], R | None],
        catch: ExceptionTypes,
        fail_with: Callable[[BaseException], F],
        if_null: Callable[[], F],
    ) -> Result[R, F]:
        """Bind through try_nullable: exceptions and None become failures."""
        require(f, 'f')
        require(catch, 'catch')
        require(fail_with, 'fail_with')
        require(if_null, 'if_null')
        return self.bind(
            lambda value: Result.try_nullable(lambda: f(value), catch, fail_with, if_null)
        )

    async def bind_try_async[R](
        self,
        f: Callable[[S], Awaitable[R]],
        catch: ExceptionTypes,
        fail_with: Callable[[BaseException], F | Awaitable[F]],
    ) -> Result[R, F]:
        """Async version of bind_try."""
        require(f, 'f')
        require(catch, 'catch')
        require(fail_with, 'fail_with')
        if not self._is_successful:
            return self  # type: ignore[return-value]
        value = self._success
        return await Result.try_async(lambda: f(value), catch, fail_with)  # type: ignore[arg-type]

    async def bind_try_nullable_async[R](
        self,
        f: Callable[[S], Awaitable[R | None]],
        catch: ExceptionTypes,
        fail_with: Callable[[BaseException], F | Awaitable[F]],
        if_null: Callable[[], F | Awaitable[F]],
    ) -> Result[R, F]:
        """Async version of bind_try_nullable."""
        require(f, 'f')
        require(catch, 'catch')
        require(fail_with, 'fail_with')
        require(if_null, 'if_null')
        if not self._is_successful:
            return self  # type: ignore[return-value]
        value = self._success
        return await Result.try_nullable_async(
            lambda: f(value),  # type: ignore[arg-type]
            catch,
            fail_with,
            if_null,
        )

    def tee_bind[R](self, validator: Callable[[S], Result[R, F]]) -> Result[S, F]:
        """Validate the success payload without transforming it.

        Returns the original success when validator succeeds, validator's
        failure when it fails, and never calls validator on a failure.
        """
        require(validator, 'validator')
        return self.bind(lambda value: validator(value).map(lambda _: value))

    async def tee_bind_async[R](
        self, validator: Callable[[S], Result[R, F] | Awaitable[Result[R, F]]]
    ) -> Result[S, F]:
        """Async version of tee_bind; validator may be sync or async."""
        require(validator, 'validator')
        if not self._is_successful:
            return self
        checked = await resolve(validator(self._success))  # type: ignore[arg-type]
        return checked.map(lambda _: self._success)  # type: ignore[return-value]

    def select_many[U, R](
        self,
        binder: Callable[[S], Result[U, F]],
        select: Callable[[S, U], R],
    ) -> Result[R, F]:
        """Bind then combine both payloads, for comprehension-style chaining."""
        require(binder, 'binder')
        require(select, 'select')
        return self.bind(lambda x: binder(x).map(lambda y: select(x, y)))

    # -------------------------------------------------------------------------
    # Applicative
    # -------------------------------------------------------------------------

    @staticmethod
    def apply[A, B, G](func: Result[Callable[[A], B], G], arg: Result[A, G]) -> Result[B, G]:
        """Call a wrapped function on a wrapped argument.

        The function's failure wins when both operands have failed.
        """
        require(func, 'func')
        require(arg, 'arg')
        if not func.is_successful:
            return func  # type: ignore[return-value]
        if not arg.is_successful:
            return arg  # type: ignore[return-value]
        return Result.succeed(func.success(arg.success))

    @staticmethod
    def lift[A, B, G](func: Callable[[A], B], arg: Result[A, G]) -> Result[B, G]:
        """Call a bare function on a wrapped argument."""
        require(func, 'func')
        require(arg, 'arg')
        return arg.map(func)

    @staticmethod
    async def apply_async[A, B, G](
        func: Result[Callable[[A], B], G] | Awaitable[Result[Callable[[A], B], G]],
        arg: Result[A, G] | Awaitable[Result[A, G]],
    ) -> Result[B, G]:
        """Version of apply where either operand may be awaitable."""
        f = await resolve(func)
        a = await resolve(arg)
        return Result.apply(f, a)

    @staticmethod
    async def lift_async[A, B, G](
        func: Callable[[A], B] | Awaitable[Callable[[A], B]],
        arg: Result[A, G] | Awaitable[Result[A, G]],
    ) -> Result[B, G]:
        """Version of lift where either operand may be awaitable."""
        f = await resolve(func)
        a = await resolve(arg)
        return Result.lift(f, a)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_maybe(self) -> Maybe[S]:
        """Present with the success payload, or empty on failure."""
        from fun_core.maybe import Maybe

        if self._is_successful:
            return Maybe(self._success)
        return Maybe()

