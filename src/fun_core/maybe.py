"""Maybe: an optional value that replaces None.

A Maybe is either present (holding a non-None value) or empty. Constructing
one from None always gives the empty Maybe, so "present but None" cannot be
represented. The payload is only reachable through `value` (which raises
EmptyMaybeError when empty) or through the combinators below, which skip
their callbacks when the Maybe is empty.

Example:
    ```python
    def find_user(user_id: int) -> Maybe[User]:
        return Maybe(users.get(user_id))

    greeting = find_user(1).map(lambda u: u.name).match(
        some=lambda name: f'Hello, {name}',
        none=lambda: 'Hello, stranger',
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fun_core._internal.awaitables import resolve
from fun_core.errors import EmptyMaybeError, require
from fun_core.unit import or_unit

if TYPE_CHECKING:
    from fun_core.result import Result

__all__ = ['Maybe', 'to_maybe', 'to_maybe_async']

_EMPTY_HASH = hash(('fun_core.Maybe', None))


@dataclass(slots=True, frozen=True, init=False, repr=False, eq=False)
class Maybe[T]:
    """An optional value: present with a payload, or empty.

    Maybe is immutable and compares by value. An empty Maybe equals any
    other empty Maybe regardless of the payload type it was declared with.
    A present Maybe also compares equal to its bare payload, so
    `Maybe(5) == 5` holds while `Maybe.empty() == 5` never does.

    Examples:
        >>> Maybe(5).map(lambda x: x + 1).value
        6
        >>> Maybe(None).has_value
        False
        >>> Maybe.empty().map(lambda x: x + 1) == Maybe.empty()
        True
    """

    _has_value: bool
    _value: T | None

    def __init__(self, value: T | None = None) -> None:
        """Create a Maybe; None gives the empty Maybe.

        Args:
            value: The payload, or None for an empty Maybe.
        """
        object.__setattr__(self, '_has_value', value is not None)
        object.__setattr__(self, '_value', value)

    @classmethod
    def empty(cls) -> Maybe[T]:
        """Return an empty Maybe."""
        return cls()

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    @property
    def has_value(self) -> bool:
        """True if the Maybe holds a value."""
        return self._has_value

    @property
    def value(self) -> T:
        """The payload.

        Raises:
            EmptyMaybeError: If the Maybe is empty.
        """
        if not self._has_value:
            raise EmptyMaybeError()
        return self._value  # type: ignore[return-value]

    def any(self) -> bool:
        """Sequence-style alias for has_value."""
        return self._has_value

    def single(self) -> T:
        """Sequence-style alias for value."""
        return self.value

    def single_or_default(self, default: T | None = None) -> T | None:
        """Return the payload, or default when empty."""
        return self._value if self._has_value else default

    def __iter__(self) -> Iterator[T]:
        if self._has_value:
            yield self._value  # type: ignore[misc]

    def __bool__(self) -> bool:
        return self._has_value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Maybe):
            if self._has_value and other._has_value:
                if isinstance(self._value, Maybe) != isinstance(other._value, Maybe):
                    return False
                return bool(self._value == other._value)
            return not self._has_value and not other._has_value
        return self._has_value and bool(self._value == other)

    def __hash__(self) -> int:
        if self._has_value:
            return hash(self._value)
        return _EMPTY_HASH

    def __repr__(self) -> str:
        if self._has_value:
            return f'Maybe({self._value!r})'
        return 'Maybe.empty()'

    # -------------------------------------------------------------------------
    # Matching
    # -------------------------------------------------------------------------

    def match[R](self, some: Callable[[T], R], none: Callable[[], R]) -> R:
        """Call exactly one handler and return its result.

        A handler that returns None is treated as an action and the match
        returns unit.

        Args:
            some: Called with the payload when present.
            none: Called with no arguments when empty.

        Returns:
            The result of the handler that ran.

        Raises:
            ArgumentNoneError: If either handler is None.
        """
        require(some, 'some')
        require(none, 'none')
        if self._has_value:
            return or_unit(some(self._value))  # type: ignore[arg-type,return-value]
        return or_unit(none())  # type: ignore[return-value]

    async def match_async[R](
        self,
        some: Callable[[T], R | Awaitable[R]],
        none: Callable[[], R | Awaitable[R]],
    ) -> R:
        """Async version of match; each handler may be sync or async."""
        require(some, 'some')
        require(none, 'none')
        if self._has_value:
            return or_unit(await resolve(some(self._value)))  # type: ignore[arg-type,return-value]
        return or_unit(await resolve(none()))  # type: ignore[return-value]

    # -------------------------------------------------------------------------
    # Transformation
    # -------------------------------------------------------------------------

    def map[R](self, mapper: Callable[[T], R | None]) -> Maybe[R]:
        """Transform the payload; empty stays empty.

        The mapper's result goes through Maybe(), so a mapper returning
        None yields an empty Maybe.

        Example:
            ```python
            assert Maybe(5).map(lambda x: x + 1).map(lambda x: x * 2).value == 12
            ```
        """
        require(mapper, 'mapper')
        if self._has_value:
            return Maybe(mapper(self._value))  # type: ignore[arg-type]
        return Maybe()

    async def map_async[R](self, mapper: Callable[[T], R | Awaitable[R]]) -> Maybe[R]:
        """Transform the payload with a sync or async mapper."""
        require(mapper, 'mapper')
        if self._has_value:
            return Maybe(await resolve(mapper(self._value)))  # type: ignore[arg-type]
        return Maybe()

    def bind[R](
        self,
        binder: Callable[[T], Maybe[R]],
        none: Callable[[], Maybe[R]] | None = None,
    ) -> Maybe[R]:
        """Chain a Maybe-returning function; empty short-circuits.

        The binder is not called when the Maybe is empty. An empty Maybe
        gives none() when a fallback is supplied, otherwise stays empty.

        Args:
            binder: Called with the payload when present.
            none: Optional fallback producing a Maybe when empty.

        Example:
            ```python
            user = find_cached(user_id).bind(validate, none=lambda: find_stored(user_id))
            ```
        """
        require(binder, 'binder')
        if self._has_value:
            return binder(self._value)  # type: ignore[arg-type]
        if none is not None:
            return none()
        return Maybe()

    async def bind_async[R](
        self,
        binder: Callable[[T], Maybe[R] | Awaitable[Maybe[R]]],
        none: Callable[[], Maybe[R] | Awaitable[Maybe[R]]] | None = None,
    ) -> Maybe[R]:
        """Chain a sync or async Maybe-returning function, with an optional fallback."""
        require(binder, 'binder')
        if self._has_value:
            return await resolve(binder(self._value))  # type: ignore[arg-type]
        if none is not None:
            return await resolve(none())
        return Maybe()

    def tee_map(self, action: Callable[[T], Any]) -> Maybe[T]:
        """Run action on the payload when present and return self."""
        require(action, 'action')
        if self._has_value:
            action(self._value)  # type: ignore[arg-type]
        return self

    async def tee_map_async(self, action: Callable[[T], Any]) -> Maybe[T]:
        """Run a sync or async action on the payload when present and return self."""
        require(action, 'action')
        if self._has_value:
            await resolve(action(self._value))  # type: ignore[arg-type]
        return self

    def select_many[U, R](
        self,
        binder: Callable[[T], Maybe[U]],
        select: Callable[[T, U], R],
    ) -> Maybe[R]:
        """Bind then combine both payloads, for comprehension-style chaining."""
        require(binder, 'binder')
        require(select, 'select')
        return self.bind(lambda x: binder(x).map(lambda y: select(x, y)))

    # -------------------------------------------------------------------------
    # Applicative
    # -------------------------------------------------------------------------

    @staticmethod
    def apply[A, B](func: Maybe[Callable[[A], B]], arg: Maybe[A]) -> Maybe[B]:
        """Call a wrapped function on a wrapped argument.

        Present only when both the function and the argument are present.
        """
        require(func, 'func')
        require(arg, 'arg')
        if not func.has_value or not arg.has_value:
            return Maybe()
        return Maybe(func.value(arg.value))

    @staticmethod
    def lift[A, B](func: Callable[[A], B], arg: Maybe[A]) -> Maybe[B]:
        """Call a bare function on a wrapped argument."""
        require(func, 'func')
        require(arg, 'arg')
        if not arg.has_value:
            return Maybe()
        return Maybe(func(arg.value))

    @staticmethod
    async def apply_async[A, B](
        func: Maybe[Callable[[A], B]] | Awaitable[Maybe[Callable[[A], B]]],
        arg: Maybe[A] | Awaitable[Maybe[A]],
    ) -> Maybe[B]:
        """Version of apply where either operand may be awaitable."""
        f = await resolve(func)
        a = await resolve(arg)
        return Maybe.apply(f, a)

    @staticmethod
    async def lift_async[A, B](
        func: Callable[[A], B] | Awaitable[Callable[[A], B]],
        arg: Maybe[A] | Awaitable[Maybe[A]],
    ) -> Maybe[B]:
        """Version of lift where either operand may be awaitable."""
        f = await resolve(func)
        a = await resolve(arg)
        return Maybe.lift(f, a)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_result[F](self, if_empty: Callable[[], F]) -> Result[T, F]:
        """Convert to a Result, calling if_empty only when empty.

        Args:
            if_empty: Produces the failure payload for an empty Maybe.

        Returns:
            A successful Result with the payload, or a failed one.
        """
        from fun_core.result import Result

        require(if_empty, 'if_empty')
        if self._has_value:
            return Result.succeed(self._value)  # type: ignore[arg-type]
        return Result.fail(if_empty())


def to_maybe[T](value: T | None) -> Maybe[T]:
    """Wrap a bare value; None gives the empty Maybe."""
    return Maybe(value)


async def to_maybe_async[T](value: Awaitable[T | None]) -> Maybe[T]:
    """Await a bare value and wrap it; None gives the empty Maybe."""
    return Maybe(await value)
